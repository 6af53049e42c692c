"""Closed sets of values used in parsed soil descriptions."""

from enum import Enum


class Consistency(str, Enum):
    """Firmness or looseness of the described material."""

    LOOSE = "loose"
    SOFT = "soft"
    FIRM = "firm"
    COMPACT = "compact"
    HARD = "hard"
    DENSE = "dense"


class Moisture(str, Enum):
    """Water content of the described material.

    Note:
        Phrases such as "water bearing" are not members; they are mapped to one of these values (here "wet")
        through the base form table of the vocabulary.
    """

    VERY_DRY = "very dry"
    VERY_WET = "very wet"
    DRY = "dry"
    DAMP = "damp"
    MOIST = "moist"
    WET = "wet"


class TermClass(str, Enum):
    """Class of a constituent recognized by the token classifier."""

    SOIL = "soil"
    BEDROCK = "bedrock"


class Modifier(str, Enum):
    """Qualifier attached to a classified token.

    `Y` marks a term recovered by stripping an adjectival suffix ("-y", "-ey", "-ly"), e.g. "silty".
    """

    NONE = ""
    SOME = "some"
    TRACE = "trace"
    AND = "and"
    Y = "y"

    @property
    def is_qualifying(self) -> bool:
        """Whether the modifier demotes the term it is attached to."""
        return self not in (Modifier.NONE, Modifier.AND)


def map_to_enum_value(value: str, enum_class: type[Enum]) -> str:
    """Maps a vocabulary term to the value of a closed enum.

    Args:
        value (str): the term, as written in the params file.
        enum_class (type[Enum]): the closed set the term must belong to.

    Returns:
        str: the matching enum value.

    Raises:
        ValueError: if the term is not part of the closed set.
    """
    for member in enum_class:
        if member.value == value:
            return member.value
    raise ValueError(
        f"Invalid {enum_class.__name__} term: {value}, chose from {[member.value for member in enum_class]}"
    )
