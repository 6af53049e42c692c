"""Field-oriented extraction of the constituents, consistency and moisture of a description."""

import logging
from dataclasses import dataclass, field

from soil_description.vocabulary.vocabulary import VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldRecord:
    """Fields found in a description by the FieldExtractor. Empty strings mean that nothing was found."""

    primary: str = ""
    secondary: str = ""
    consistency: str = ""
    moisture: str = ""
    ordered: tuple[str, ...] = field(default_factory=tuple)


class FieldExtractor:
    """Extracts structured fields from normalized description tokens.

    The extraction uses two passes over the tokens:

    1. Primary and secondary constituents from the primary terms. A term directly preceded by a qualifier
       ("some", "trace") is ignored, a term directly preceded by a conjunction ("and", "&") can only be
       secondary (e.g. "sand and gravel").
    2. Adjectival or qualified secondary constituents ("silty", "some clay"), consistency and moisture.
       Each field keeps its first match.

    The ordered terms list every constituent found, the primary one first.
    """

    def __init__(self, vocabulary: Vocabulary = VOCABULARY):
        """Initialize with the vocabulary to match against.

        Args:
            vocabulary (Vocabulary): the term tables (default: the shared vocabulary).
        """
        self.vocabulary = vocabulary

    def _match_primary_term(self, token: str) -> str | None:
        """Returns the primary term matching the token, accepting a plural "s"."""
        if token in self.vocabulary.primary_terms:
            return token
        if token.endswith("s") and token[:-1] in self.vocabulary.primary_terms:
            return token[:-1]
        return None

    def _match_moisture_term(self, prev: str, token: str) -> str | None:
        """Returns the first moisture term that equals the token or the two-word phrase ending with the token."""
        phrase = f"{prev} {token}"
        for term in self.vocabulary.moisture_terms:
            if term in (token, phrase):
                return term
        return None

    def extract(self, tokens: list[str]) -> FieldRecord:
        """Extracts the fields from normalized tokens.

        Args:
            tokens (list[str]): lowercase tokens, as returned by `normalize`.

        Returns:
            FieldRecord: the extracted fields.
        """
        primary = ""
        secondary = ""
        consistency = ""
        moisture = ""
        ordered: list[str] = []

        prev = ""
        for token in tokens:
            term = self._match_primary_term(token)
            if term is not None and prev not in self.vocabulary.qualifiers:
                if not primary and prev not in self.vocabulary.conjunctions:
                    primary = term
                    ordered.insert(0, term)
                else:
                    if not secondary and term != primary:
                        secondary = term
                    ordered.append(term)
            prev = token

        if secondary == primary:
            secondary = ""

        prev = ""
        for token in tokens:
            modifiers = self.vocabulary.secondary_modifier_terms
            if token in modifiers or f"{prev} {token}" in modifiers:
                soil = self.vocabulary.canonical(token)
                if not secondary and soil != primary:
                    secondary = soil
                ordered.append(soil)

            if not consistency and token in self.vocabulary.consistency_terms:
                consistency = token

            if not moisture:
                term = self._match_moisture_term(prev, token)
                if term is not None:
                    moisture = self.vocabulary.canonical(term)

            prev = token

        record = FieldRecord(primary, secondary, consistency, moisture, tuple(dict.fromkeys(ordered)))
        logger.debug(f"Extracted fields {record} from tokens {tokens}")
        return record


def extract_fields_from_tokens(tokens: list[str], vocabulary: Vocabulary = VOCABULARY) -> FieldRecord:
    """Runs the FieldExtractor on normalized tokens."""
    return FieldExtractor(vocabulary).extract(tokens)
