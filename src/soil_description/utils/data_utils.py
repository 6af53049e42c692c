"""Data utils module."""

import csv
import json
import logging
from collections import Counter
from pathlib import Path

from soil_description.description import Description

logger = logging.getLogger(__name__)

COUNTED_FIELDS = ("primary", "secondary", "consistency", "moisture")


def load_descriptions(file_path: Path) -> list[str]:
    """Loads raw descriptions from a file.

    JSON files must contain a list of strings. Any other file is read as text with one description per line;
    blank lines are skipped.

    Args:
        file_path (Path): the input file.

    Returns:
        list[str]: the raw descriptions.

    Raises:
        ValueError: if a JSON file does not contain a list of strings.
    """
    if file_path.suffix == ".json":
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
            raise ValueError(f"Expected a list of strings in {file_path}.")
        return data

    with open(file_path, encoding="utf-8") as f:
        return [line.rstrip("\n") for line in f if line.strip()]


def get_term_counts(descriptions: list[Description]) -> dict[str, dict[str, int]]:
    """Returns how often each value occurs per field, ignoring empty values.

    Args:
        descriptions (list[Description]): the parsed descriptions.

    Returns:
        dict[str, dict[str, int]]: the count of each value, per field name.
    """
    term_counts = {}
    for field_name in COUNTED_FIELDS:
        values = [getattr(description, field_name) for description in descriptions]
        term_counts[field_name] = dict(Counter(value for value in values if value))
    return term_counts


def write_descriptions(descriptions: list[Description], out_dir: Path) -> Path:
    """Writes the parsed descriptions to a JSON file.

    Args:
        descriptions (list[Description]): the parsed descriptions.
        out_dir (Path): Path to the output directory.

    Returns:
        Path: the written file.
    """
    out_dir.mkdir(parents=True, exist_ok=True)  # Ensure the output directory exists
    output_file = out_dir / "descriptions.json"

    with open(output_file, "w", encoding="utf-8") as f:
        json.dump([description.to_json() for description in descriptions], f, ensure_ascii=False, indent=4)

    logger.info(f"Wrote {len(descriptions)} descriptions to {output_file}")
    return output_file


def write_term_counts(descriptions: list[Description], out_dir: Path) -> Path:
    """Write an overview CSV with the number of occurrences of each value per field.

    Args:
        descriptions (list[Description]): the parsed descriptions.
        out_dir (Path): Directory where term_counts.csv will be written.

    Returns:
        Path: the written file.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    output_file = out_dir / "term_counts.csv"

    fieldnames = ["field", "term", "count"]

    with open(output_file, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()

        for field_name, counts in get_term_counts(descriptions).items():
            for term, count in sorted(counts.items(), key=lambda item: (-item[1], item[0])):
                writer.writerow({"field": field_name, "term": term, "count": count})

    return output_file
