"""Orders classified tokens by their importance in the description."""

from soil_description.extraction.token_classifier import Token


def is_emphasized(token: Token, input_is_all_caps: bool) -> bool:
    """Whether the author emphasized the token by writing it in uppercase.

    Capitalization carries no meaning when the whole description is in uppercase.
    """
    return token.capitalized and not input_is_all_caps and not token.modifier.is_qualifying


def sort_tokens(tokens: list[Token], input_is_all_caps: bool) -> list[Token]:
    """Sorts tokens by precedence, keeping the description order within each group.

    The groups are, in order:
        - emphasized tokens (uppercase and not qualified);
        - other tokens that are not qualified;
        - qualified tokens ("some", "trace" or adjectival forms such as "silty").

    Args:
        tokens (list[Token]): the classified tokens, in description order.
        input_is_all_caps (bool): whether the whole description is written in uppercase.

    Returns:
        list[Token]: the sorted tokens.
    """
    emphasized = [token for token in tokens if is_emphasized(token, input_is_all_caps)]
    unqualified = [
        token
        for token in tokens
        if not is_emphasized(token, input_is_all_caps) and not token.modifier.is_qualifying
    ]
    qualified = [token for token in tokens if token.modifier.is_qualifying]
    return emphasized + unqualified + qualified


def ordered_terms(tokens: list[Token]) -> list[str]:
    """Returns the canonical terms of sorted tokens, without duplicates."""
    return list(dict.fromkeys(token.term for token in tokens))
