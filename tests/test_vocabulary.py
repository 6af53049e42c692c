"""Tests for the vocabulary module."""

import copy

import pytest

from soil_description.utils.description_classes import Consistency, Moisture
from soil_description.utils.util import read_params
from soil_description.vocabulary.vocabulary import DESCRIPTION_PARAMS_FILE, VOCABULARY, Vocabulary, base_form


@pytest.fixture
def params():  # noqa: D103
    return copy.deepcopy(read_params(DESCRIPTION_PARAMS_FILE))


@pytest.mark.parametrize(
    "term,expected",
    [
        ("gravelly", "gravel"),
        ("gravels", "gravel"),
        ("sandy", "sand"),
        ("sands", "sand"),
        ("silty", "silt"),
        ("silts", "silt"),
        ("clayey", "clay"),
        ("clays", "clay"),
        ("water bearing", "wet"),
        ("water", "wet"),
        ("granite", "granite"),
        ("unknown", "unknown"),
    ],
)
def test_base_form(term, expected):  # noqa: D103
    assert base_form(term) == expected


@pytest.mark.parametrize("term", [*VOCABULARY.base_form.keys(), *sorted(VOCABULARY.primary_terms), "very wet", ""])
def test_base_form_is_idempotent(term):  # noqa: D103
    assert base_form(base_form(term)) == base_form(term)


def test_core_soil_classes_are_primary_terms():  # noqa: D103
    assert {"gravel", "sand", "clay", "silt"} <= VOCABULARY.primary_terms
    assert len(VOCABULARY.primary_terms) == 29


def test_closed_vocabularies_match_enums():
    """Consistency terms and canonical moisture terms are exactly the enum values."""
    assert set(VOCABULARY.consistency_terms) == {member.value for member in Consistency}
    assert {base_form(term) for term in VOCABULARY.moisture_terms} == {member.value for member in Moisture}


def test_moisture_phrases_come_before_their_words():
    """Two-word moisture phrases are tested before the single words they contain."""
    terms = list(VOCABULARY.moisture_terms)
    assert terms.index("water bearing") < terms.index("water")
    assert terms.index("very wet") < terms.index("wet")
    assert terms.index("very dry") < terms.index("dry")


def test_vocabulary_is_read_only():  # noqa: D103
    with pytest.raises(TypeError):
        VOCABULARY.base_form["loamy"] = "loam"
    with pytest.raises(AttributeError):
        VOCABULARY.primary_terms.add("loam")


def test_invalid_consistency_term(params):  # noqa: D103
    params["consistency_terms"].append("crumbly")
    with pytest.raises(ValueError, match="crumbly"):
        Vocabulary.from_params(params)


def test_invalid_moisture_term(params):  # noqa: D103
    params["moisture_terms"].append("soaked")
    with pytest.raises(ValueError, match="soaked"):
        Vocabulary.from_params(params)


def test_moisture_term_mapped_to_closed_value(params):
    """A moisture phrase is accepted when its base form is part of the closed set."""
    params["moisture_terms"].insert(0, "saturated")
    params["base_form"]["saturated"] = "wet"
    vocabulary = Vocabulary.from_params(params)
    assert vocabulary.canonical("saturated") == "wet"


def test_read_params_missing_file():  # noqa: D103
    with pytest.raises(FileNotFoundError):
        read_params("does_not_exist.yml")
