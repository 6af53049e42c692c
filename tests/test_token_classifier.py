"""Tests for the token classifier module."""

import pytest

from soil_description.extraction.token_classifier import Token, TokenClassifier, is_all_caps, is_capitalized
from soil_description.utils.description_classes import Modifier, TermClass


@pytest.fixture
def classifier():  # noqa: D103
    return TokenClassifier()


@pytest.mark.parametrize(
    "word,term,modifier,term_class",
    [
        pytest.param("sand", "sand", Modifier.NONE, TermClass.SOIL, id="stem"),
        pytest.param("sands", "sand", Modifier.NONE, TermClass.SOIL, id="plural"),
        pytest.param("silty", "silt", Modifier.Y, TermClass.SOIL, id="y-suffix"),
        pytest.param("sandy", "sand", Modifier.Y, TermClass.SOIL, id="sandy"),
        pytest.param("clayey", "clay", Modifier.Y, TermClass.SOIL, id="ey-suffix"),
        pytest.param("gravelly", "gravel", Modifier.Y, TermClass.SOIL, id="ly-suffix"),
        pytest.param("boulders", "boulder", Modifier.NONE, TermClass.SOIL, id="boulders"),
        pytest.param("organics", "organic", Modifier.NONE, TermClass.SOIL, id="organics"),
        pytest.param("granite", "granite", Modifier.NONE, TermClass.BEDROCK, id="rock"),
        pytest.param("pebbles", "pebbles", Modifier.NONE, TermClass.BEDROCK, id="plural-rock-stem"),
        pytest.param("rocky", "rock", Modifier.Y, TermClass.BEDROCK, id="adjectival-rock"),
        pytest.param("Sandstone", "sandstone", Modifier.NONE, TermClass.BEDROCK, id="title-case"),
    ],
)
def test_classify_word(classifier, word, term, modifier, term_class):  # noqa: D103
    token = classifier.classify_word(word)
    assert token is not None
    assert token.word == word
    assert token.term == term
    assert token.modifier == modifier
    assert token.term_class == term_class


@pytest.mark.parametrize("word", ["wet", "compact", "brown", "muddy", "2", "&", "some", ""])
def test_unknown_words_are_dropped(classifier, word):  # noqa: D103
    assert classifier.classify_word(word) is None


@pytest.mark.parametrize(
    "prev,expected",
    [
        pytest.param("some", Modifier.SOME, id="some"),
        pytest.param("Trace", Modifier.TRACE, id="trace-capitalized"),
        pytest.param("and", Modifier.AND, id="and"),
        pytest.param("&", Modifier.NONE, id="ampersand"),
        pytest.param("silty", Modifier.NONE, id="other-word"),
        pytest.param("", Modifier.NONE, id="first-word"),
    ],
)
def test_modifier_from_preceding_word(classifier, prev, expected):  # noqa: D103
    assert classifier.classify_word("gravel", prev).modifier == expected


def test_suffix_modifier_overrides_preceding_word(classifier):
    """Adjectival forms are always marked with the suffix modifier."""
    assert classifier.classify_word("silty", "some").modifier == Modifier.Y


@pytest.mark.parametrize(
    "word,expected",
    [("SAND", True), ("Sand", False), ("sand", False), ("2", False), ("&", False), ("", False)],
)
def test_is_capitalized(word, expected):  # noqa: D103
    assert is_capitalized(word) == expected


@pytest.mark.parametrize(
    "words,expected",
    [
        pytest.param(["SAND", "AND", "GRAVEL"], True, id="all-caps"),
        pytest.param(["SAND", "&", "GRAVEL", "2"], True, id="words-without-letters-ignored"),
        pytest.param(["SAND", "and", "GRAVEL"], False, id="mixed"),
        pytest.param(["&"], False, id="no-letters"),
        pytest.param([], False, id="empty"),
    ],
)
def test_is_all_caps(words, expected):  # noqa: D103
    assert is_all_caps(words) == expected


def test_classify(classifier):  # noqa: D103
    tokens, input_is_all_caps = classifier.classify(["SAND", "and", "GRAVEL", "silty"])
    assert not input_is_all_caps
    assert tokens == [
        Token("SAND", "sand", Modifier.NONE, True, TermClass.SOIL),
        Token("GRAVEL", "gravel", Modifier.AND, True, TermClass.SOIL),
        Token("silty", "silt", Modifier.Y, False, TermClass.SOIL),
    ]


def test_classify_keeps_description_order(classifier):  # noqa: D103
    tokens, _ = classifier.classify(["compact", "silty", "sand", "some", "clay", "wet"])
    assert [token.term for token in tokens] == ["silt", "sand", "clay"]
    assert [token.modifier for token in tokens] == [Modifier.Y, Modifier.NONE, Modifier.SOME]
