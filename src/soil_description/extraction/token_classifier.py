"""Per-token classification of description words into soil and bedrock constituents."""

import logging
from dataclasses import dataclass

from soil_description.utils.description_classes import Modifier, TermClass
from soil_description.vocabulary.vocabulary import VOCABULARY, Vocabulary

logger = logging.getLogger(__name__)

# suffixes that turn a stem into an adjective ("silty", "clayey", "gravelly"), tried in this order
ADJECTIVE_SUFFIXES = ("y", "ey", "ly")


@dataclass(frozen=True)
class Token:
    """A description word recognized as a soil or bedrock constituent.

    Attributes:
        word (str): the word as written in the description.
        term (str): the canonical stem the word was matched to.
        modifier (Modifier): the qualifier of the word.
        capitalized (bool): whether the word was written in uppercase.
        term_class (TermClass): soil or bedrock.
    """

    word: str
    term: str
    modifier: Modifier
    capitalized: bool
    term_class: TermClass


def is_capitalized(word: str) -> bool:
    """Whether a word is fully uppercase. Words without letters (e.g. "&", "2") are never capitalized."""
    return word == word.upper() and word != word.lower()


def is_all_caps(words: list[str]) -> bool:
    """Whether every word with letters is fully uppercase.

    Words without letters are ignored. A list without any word with letters is not considered all caps.

    Args:
        words (list[str]): the words of the description, with their original capitalization.

    Returns:
        bool: True if the description is written entirely in uppercase.
    """
    cased_words = [word for word in words if word.upper() != word.lower()]
    return bool(cased_words) and all(is_capitalized(word) for word in cased_words)


class TokenClassifier:
    """Classifies description words one by one.

    For each word, the following candidate stems are tried in order, the first known stem wins:

    1. the word itself, with the modifier given by the preceding word ("some", "trace", "and");
    2. the word without a trailing "s", same modifier;
    3. the word without a trailing "y", "ey" or "ly" (in that order), with the modifier `Modifier.Y`.

    Words that do not match any soil or bedrock stem are dropped.
    """

    def __init__(self, vocabulary: Vocabulary = VOCABULARY):
        """Initialize with the vocabulary to match against.

        Args:
            vocabulary (Vocabulary): the term tables (default: the shared vocabulary).
        """
        self.vocabulary = vocabulary

    def _candidates(self, word: str, modifier: Modifier) -> list[tuple[str, Modifier]]:
        candidates = [(word, modifier)]
        if word.endswith("s"):
            candidates.append((word[:-1], modifier))
        for suffix in ADJECTIVE_SUFFIXES:
            if word.endswith(suffix):
                candidates.append((word[: -len(suffix)], Modifier.Y))
        return candidates

    def _term_class(self, stem: str) -> TermClass | None:
        if stem in self.vocabulary.soil_stems:
            return TermClass.SOIL
        if stem in self.vocabulary.rock_stems:
            return TermClass.BEDROCK
        return None

    def classify_word(self, word: str, prev: str = "") -> Token | None:
        """Classifies a single word.

        Args:
            word (str): the word with its original capitalization.
            prev (str): the preceding word, if any.

        Returns:
            Token | None: the classified token, or None if the word is not a known constituent.
        """
        prev = prev.lower()
        modifier = Modifier(prev) if prev in self.vocabulary.token_modifiers else Modifier.NONE

        for stem, candidate_modifier in self._candidates(word.lower(), modifier):
            term_class = self._term_class(stem)
            if term_class is not None:
                return Token(word, stem, candidate_modifier, is_capitalized(word), term_class)

        logger.debug(f"Could not classify '{word}', dropping it.")
        return None

    def classify(self, words: list[str]) -> tuple[list[Token], bool]:
        """Classifies the words of a description.

        Args:
            words (list[str]): the words of the description with their original capitalization, as returned
                by `surface_tokens`.

        Returns:
            tuple[list[Token], bool]: the classified tokens in description order, and whether the whole
                description is written in uppercase.
        """
        tokens = []
        prev = ""
        for word in words:
            token = self.classify_word(word, prev)
            if token is not None:
                tokens.append(token)
            prev = word
        return tokens, is_all_caps(words)
