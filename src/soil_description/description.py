"""Entry points to parse a free-form soil description into a structured Description."""

import dataclasses
import logging
from dataclasses import dataclass, field
from enum import Enum

from soil_description.extraction.field_extractor import FieldRecord, extract_fields_from_tokens
from soil_description.extraction.precedence_sorter import ordered_terms, sort_tokens
from soil_description.extraction.token_classifier import Token, TokenClassifier
from soil_description.text.normalizer import normalize, surface_tokens
from soil_description.vocabulary.vocabulary import VOCABULARY

logger = logging.getLogger(__name__)


class ExtractionStrategy(Enum):
    """Enum class for the available ways to fill a Description."""

    UNIFIED = "unified"
    FIELD = "field"

    @classmethod
    def infer_type(cls, strategy_str: str) -> "ExtractionStrategy":
        """Infer the extraction strategy from the string.

        Args:
            strategy_str (str): The strategy as a string.

        Returns:
            ExtractionStrategy: The corresponding ExtractionStrategy enum value.
        """
        for strategy in cls:
            if strategy.value == strategy_str:
                return strategy
        raise ValueError(f"Invalid extraction strategy : {strategy_str}, chose from {[s.value for s in cls]}")


@dataclass(frozen=True)
class Description:
    """Structured version of a soil description.

    Empty strings mean that the description does not mention the property.
    """

    original: str
    primary: str = ""
    secondary: str = ""
    consistency: str = ""
    moisture: str = ""
    ordered: tuple[str, ...] = field(default_factory=tuple)

    def to_json(self) -> dict:
        """Converts the object to a dictionary.

        Returns:
            dict: The object as a dictionary.
        """
        return {
            "original": self.original,
            "primary": self.primary,
            "secondary": self.secondary,
            "consistency": self.consistency,
            "moisture": self.moisture,
            "ordered": list(self.ordered),
        }


def assemble(original: str, fields: FieldRecord, ordered: list[str] | tuple[str, ...]) -> Description:
    """Combines extracted fields and an ordered term list into a Description.

    Args:
        original (str): the unmodified description.
        fields (FieldRecord): the primary, secondary, consistency and moisture fields.
        ordered (list[str] | tuple[str, ...]): the constituent terms in precedence order.

    Returns:
        Description: the structured description.
    """
    return Description(
        original=original,
        primary=fields.primary,
        secondary=fields.secondary,
        consistency=fields.consistency,
        moisture=fields.moisture,
        ordered=tuple(ordered),
    )


def select_constituents(sorted_tokens: list[Token]) -> tuple[str, str]:
    """Selects the primary and secondary constituents from tokens sorted by precedence.

    The primary constituent is the first unqualified term. The secondary one is the next unqualified term
    ("sand and gravel"), or else the first qualified term ("silty sand", "sand, some gravel").

    Both are returned as primary terms of the vocabulary ("boulder" -> "boulders").

    Args:
        sorted_tokens (list[Token]): the tokens, as returned by `sort_tokens`.

    Returns:
        tuple[str, str]: the primary and secondary terms, empty strings if not found.
    """
    unqualified_tokens = [token for token in sorted_tokens if not token.modifier.is_qualifying]
    unqualified = [as_primary_term(term) for term in ordered_terms(unqualified_tokens)]
    primary = unqualified[0] if unqualified else ""
    if len(unqualified) > 1:
        return primary, unqualified[1]

    qualified_tokens = [token for token in sorted_tokens if token.modifier.is_qualifying]
    qualified = [as_primary_term(term) for term in ordered_terms(qualified_tokens)]
    secondary = next((term for term in qualified if term != primary), "")
    return primary, secondary


def as_primary_term(stem: str) -> str:
    """Maps a token classifier stem to the matching primary term, e.g. "cobble" -> "cobbles".

    Args:
        stem (str): the canonical term found by the token classifier.

    Returns:
        str: the primary term, or the stem itself if the vocabulary has no primary term for it.
    """
    for candidate in (stem, stem + "s"):
        if candidate in VOCABULARY.primary_terms:
            return candidate
    return stem


def _sorted_tokens(text: str) -> list[Token]:
    tokens, input_is_all_caps = TokenClassifier().classify(surface_tokens(text))
    return sort_tokens(tokens, input_is_all_caps)


def extract_fields(text: str) -> FieldRecord:
    """Extracts the fields of a description with the field-oriented strategy only.

    Args:
        text (str): the raw description.

    Returns:
        FieldRecord: the fields, including the field extractor's own ordered terms.
    """
    return extract_fields_from_tokens(normalize(text))


def extract_ordered_terms(text: str) -> list[str]:
    """Returns the constituent terms of a description in precedence order.

    Uppercase terms come first (unless the whole description is uppercase), then unqualified terms, then
    qualified ones ("some", "trace", "silty"). Consistency and moisture are not part of the result.

    Args:
        text (str): the raw description.

    Returns:
        list[str]: the canonical terms, without duplicates.
    """
    return ordered_terms(_sorted_tokens(text))


def classify(text: str, strategy: ExtractionStrategy = ExtractionStrategy.UNIFIED) -> Description:
    """Parses a free-form soil description.

    Examples of input descriptions are "sandy gravel, very wet" or "water bearing silts". Any string is a
    valid input; a description without known terms gives a Description with only `original` set.

    With the unified strategy, the constituents and their order come from the token classifier and the
    precedence sorter, while consistency and moisture come from the field extractor. With the field
    strategy, every field comes from the field extractor.

    Args:
        text (str): the raw description.
        strategy (ExtractionStrategy): how to fill the Description.

    Returns:
        Description: the structured description.
    """
    fields = extract_fields(text)
    if strategy == ExtractionStrategy.FIELD:
        description = assemble(text, fields, fields.ordered)
    else:
        sorted_tokens = _sorted_tokens(text)
        primary, secondary = select_constituents(sorted_tokens)
        if (primary, secondary) != (fields.primary, fields.secondary):
            logger.debug(
                f"Strategies disagree on '{text}': field extractor found ({fields.primary}, {fields.secondary}), "
                f"token classifier found ({primary}, {secondary})."
            )
        fields = dataclasses.replace(fields, primary=primary, secondary=secondary)
        description = assemble(text, fields, ordered_terms(sorted_tokens))

    logger.debug(f"Parsed description: {description.to_json()}")
    return description
