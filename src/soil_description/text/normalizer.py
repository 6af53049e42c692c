"""Splits raw field descriptions into word tokens."""

import re

# , - : \ / ; . ? ( ) are treated as word separators
_SEPARATORS = re.compile(r"[,\-:\\/;.?()]")


def surface_tokens(text: str) -> list[str]:
    """Split a description into words, keeping the original capitalization.

    Args:
        text (str): The raw description.

    Returns:
        list[str]: The words of the description, without punctuation.
    """
    return _SEPARATORS.sub(" ", text).split()


def normalize(text: str) -> list[str]:
    """Split a description into lowercase words.

    The result is index-aligned with `surface_tokens` for the same text.

    Args:
        text (str): The raw description.

    Returns:
        list[str]: The lowercase words of the description. Empty for an empty or blank description.
    """
    return [token.lower() for token in surface_tokens(text)]
