"""Static vocabulary used to recognize terms in soil descriptions.

The tables are read once from `config/description_params.yml` and exposed as immutable lookup structures.
`VOCABULARY` is shared by every parsing call and must never be mutated.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from soil_description.utils.description_classes import Consistency, Modifier, Moisture, map_to_enum_value
from soil_description.utils.util import read_params

logger = logging.getLogger(__name__)

DESCRIPTION_PARAMS_FILE = "description_params.yml"


@dataclass(frozen=True)
class Vocabulary:
    """Read-only term tables.

    Attributes:
        primary_terms (frozenset[str]): Terms that can be the primary or a coordinate secondary constituent.
        secondary_modifier_terms (frozenset[str]): Adjectival forms and "some"/"trace" phrases.
        consistency_terms (tuple[str, ...]): Closed consistency vocabulary, in matching order.
        moisture_terms (tuple[str, ...]): Moisture words and phrases, longest phrases first.
        base_form (Mapping[str, str]): Canonical form of suffixed or plural variants.
        qualifiers (frozenset[str]): Preceding words that prevent a term from becoming primary.
        conjunctions (frozenset[str]): Preceding words that mark a coordinate constituent.
        token_modifiers (frozenset[str]): Preceding words recorded as modifier by the token classifier.
        soil_stems (frozenset[str]): Stems classified as soil.
        rock_stems (frozenset[str]): Stems classified as bedrock.
    """

    primary_terms: frozenset[str]
    secondary_modifier_terms: frozenset[str]
    consistency_terms: tuple[str, ...]
    moisture_terms: tuple[str, ...]
    base_form: Mapping[str, str]
    qualifiers: frozenset[str]
    conjunctions: frozenset[str]
    token_modifiers: frozenset[str]
    soil_stems: frozenset[str]
    rock_stems: frozenset[str]

    def canonical(self, term: str) -> str:
        """Returns the canonical form of a term, or the term itself if it has no entry in the base form table.

        Args:
            term (str): a single word or a two-word phrase.

        Returns:
            str: the canonical term.
        """
        return self.base_form.get(term, term)

    @classmethod
    def from_params(cls, params: dict) -> "Vocabulary":
        """Builds the vocabulary from the content of a params file.

        Args:
            params (dict): the parsed params file.

        Returns:
            Vocabulary: the vocabulary.

        Raises:
            ValueError: if a consistency, moisture or modifier term is not part of its closed set.
            KeyError: if a table is missing from the params.
        """
        base_form = {str(key): str(value) for key, value in params["base_form"].items()}

        consistency_terms = tuple(map_to_enum_value(term, Consistency) for term in params["consistency_terms"])

        moisture_terms = tuple(params["moisture_terms"])
        for term in moisture_terms:
            map_to_enum_value(base_form.get(term, term), Moisture)

        token_modifiers = frozenset(map_to_enum_value(term, Modifier) for term in params["token_modifiers"])

        vocabulary = cls(
            primary_terms=frozenset(params["primary_terms"]),
            secondary_modifier_terms=frozenset(params["secondary_modifier_terms"]),
            consistency_terms=consistency_terms,
            moisture_terms=moisture_terms,
            base_form=MappingProxyType(base_form),
            qualifiers=frozenset(params["qualifiers"]),
            conjunctions=frozenset(params["conjunctions"]),
            token_modifiers=token_modifiers,
            soil_stems=frozenset(params["soil_stems"]),
            rock_stems=frozenset(params["rock_stems"]),
        )
        logger.debug(
            f"Loaded vocabulary with {len(vocabulary.primary_terms)} primary terms, "
            f"{len(vocabulary.soil_stems)} soil stems and {len(vocabulary.rock_stems)} rock stems."
        )
        return vocabulary


def load_vocabulary(params_name: str = DESCRIPTION_PARAMS_FILE) -> Vocabulary:
    """Loads the vocabulary from a params file in the config directory.

    Args:
        params_name (str): Name of the params yaml file.

    Returns:
        Vocabulary: the vocabulary.
    """
    return Vocabulary.from_params(read_params(params_name))


VOCABULARY = load_vocabulary()


def base_form(term: str) -> str:
    """Returns the canonical form of a term using the shared vocabulary (e.g. "sandy" -> "sand")."""
    return VOCABULARY.canonical(term)
