"""This module contains the command line pipeline to parse free-form soil descriptions."""

import json
import logging
from pathlib import Path

import click
from dotenv import load_dotenv

from soil_description import DATAPATH
from soil_description.description import ExtractionStrategy, classify
from soil_description.utils.data_utils import load_descriptions, write_descriptions, write_term_counts

load_dotenv()

logging.basicConfig(format="%(asctime)s %(levelname)-8s %(message)s", level=logging.INFO, datefmt="%Y-%m-%d %H:%M:%S")
logger = logging.getLogger(__name__)


def common_options(f):
    """Decorator to add common options to commands."""
    f = click.option(
        "-f",
        "--file-path",
        type=click.Path(exists=True, path_type=Path),
        default=None,
        help="Path to a text file with one description per line, or to a json file with a list of descriptions.",
    )(f)
    f = click.option(
        "-t",
        "--text",
        "texts",
        multiple=True,
        help="A description to parse. Can be given multiple times.",
    )(f)
    f = click.option(
        "-o",
        "--out-directory",
        type=click.Path(path_type=Path),
        default=DATAPATH / "output_description_parsing",
        help="Path to the output directory.",
    )(f)
    f = click.option(
        "-s",
        "--strategy",
        type=click.Choice([strategy.value for strategy in ExtractionStrategy]),
        default=ExtractionStrategy.UNIFIED.value,
        help="How to fill the fields of the descriptions.",
    )(f)
    return f


@click.command()
@common_options
def click_pipeline(file_path: Path | None, texts: tuple[str, ...], out_directory: Path, strategy: str):
    """Parse free-form soil descriptions into structured descriptions."""
    if file_path is None and not texts:
        raise click.UsageError("Provide at least one description with --text or a file with --file-path.")
    main(file_path, list(texts), out_directory, ExtractionStrategy.infer_type(strategy))


def main(
    file_path: Path | None,
    texts: list[str],
    out_directory: Path,
    strategy: ExtractionStrategy = ExtractionStrategy.UNIFIED,
):
    """Main pipeline to parse soil descriptions.

    Args:
        file_path (Path | None): Path to the file with the raw descriptions.
        texts (list[str]): Raw descriptions given directly.
        out_directory (Path): Path to output directory.
        strategy (ExtractionStrategy): How to fill the fields of the descriptions.
    """
    raw_descriptions = list(texts)
    if file_path is not None:
        logger.info(f"Loading descriptions from {file_path}")
        raw_descriptions.extend(load_descriptions(file_path))

    logger.info(f"Parsing {len(raw_descriptions)} descriptions with the {strategy.value} strategy")
    descriptions = [classify(text, strategy) for text in raw_descriptions]

    for description in descriptions:
        click.echo(json.dumps(description.to_json(), ensure_ascii=False))

    write_descriptions(descriptions, out_directory)
    term_counts_file = write_term_counts(descriptions, out_directory)
    logger.info(f"Term counts written to {term_counts_file}")


if __name__ == "__main__":
    # launch with: python -m soil_description.main -t "compact silty sand, some clay, wet"
    # or with: soil-describe -f data/descriptions.txt
    click_pipeline()
