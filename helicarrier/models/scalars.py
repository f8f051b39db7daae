"""
Scalar value types for card stats.

Card stats in the documents are either plain integers or short tokens:

    atk = 2          -> BasicPower(2)
    atk = "X"        -> BasicPower(None), rendered "X"
    cost = "3"       -> Cost(3)
    hit_points = "4:player:"  -> HitPoints(4, per_player=True)
    keywords = ["Incite 1", "Quickstrike"]

INVARIANTS:
- X is its own value: it never equals, parses from, or renders as a number
- Numbers are unsigned 8-bit (0-255); anything else is a DecodeError
- Values are immutable and hashable
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, ClassVar

from pydantic import PlainSerializer, PlainValidator

from helicarrier.models.errors import DecodeError

U8_MAX = 255

# Used with fullmatch; ASCII so only 0-9 count as digits
_DIGITS = re.compile(r"\d+", re.ASCII)
_PER_PLAYER = re.compile(r"(\d+):player:", re.ASCII)
_PARAMETERIZED_KEYWORD = re.compile(r"(\w+) (\d+)", re.ASCII)


def _parse_u8(value: Any) -> int | None:
    """Return value as an int in 0-255, or None if it is not one."""
    # bool is an int subclass; true/false are never stats
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and _DIGITS.fullmatch(value):
        number = int(value)
    else:
        return None
    if 0 <= number <= U8_MAX:
        return number
    return None


@dataclass(frozen=True, slots=True)
class _NumberOrX:
    """A number from 0-255, or the symbolic X (number is None)."""

    number: int | None

    GRAMMAR: ClassVar[str] = "an integer from 0 to 255 or X"

    @property
    def is_x(self) -> bool:
        return self.number is None

    @classmethod
    def parse(cls, value: Any) -> "_NumberOrX":
        """
        Parse an integer, a numeric string, or "X".

        Raises:
            DecodeError: If value matches neither grammar
        """
        if isinstance(value, cls):
            return value
        if value == "X":
            return cls(None)
        number = _parse_u8(value)
        if number is None:
            raise DecodeError(value, cls.GRAMMAR)
        return cls(number)

    def __str__(self) -> str:
        return "X" if self.number is None else str(self.number)


class BasicPower(_NumberOrX):
    """THW, ATK, DEF, REC or SCH value of a card side."""

    __slots__ = ()


class Cost(_NumberOrX):
    """Resource cost of a player card."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class HitPoints:
    """
    Hit points of a character.

    Attributes:
        number: The printed value
        per_player: True when the value is multiplied by the number of players
    """

    number: int
    per_player: bool = False

    GRAMMAR: ClassVar[str] = "an integer from 0 to 255 or '<integer>:player:'"

    @classmethod
    def parse(cls, value: Any) -> "HitPoints":
        """
        Parse an integer, a numeric string, or "N:player:".

        Raises:
            DecodeError: If value matches neither grammar
        """
        if isinstance(value, cls):
            return value
        number = _parse_u8(value)
        if number is not None:
            return cls(number)
        if isinstance(value, str):
            match = _PER_PLAYER.fullmatch(value)
            if match:
                per_player = _parse_u8(match.group(1))
                if per_player is not None:
                    return cls(per_player, per_player=True)
        raise DecodeError(value, cls.GRAMMAR)

    def __str__(self) -> str:
        if self.per_player:
            return f"{self.number} per Player"
        return str(self.number)


class KeywordName(str, Enum):
    """Keywords that can appear on encounter cards."""

    INCITE = "Incite"
    HINDER = "Hinder"
    QUICKSTRIKE = "Quickstrike"
    STALWART = "Stalwart"
    STEADY = "Steady"
    TOUGHNESS = "Toughness"


PARAMETERIZED_KEYWORDS = frozenset({KeywordName.INCITE, KeywordName.HINDER})


@dataclass(frozen=True, slots=True)
class Keyword:
    """
    A keyword ability, optionally carrying a value (e.g. Incite 2).

    Attributes:
        name: Which keyword this is
        value: The keyword's number for Incite and Hinder, None otherwise
    """

    name: KeywordName
    value: int | None = None

    GRAMMAR: ClassVar[str] = (
        "'Incite <N>', 'Hinder <N>', 'Quickstrike', 'Stalwart', 'Steady' or 'Toughness'"
    )

    @classmethod
    def parse(cls, value: Any) -> "Keyword":
        """
        Parse a keyword token such as "Incite 2" or "Stalwart".

        Raises:
            DecodeError: If the keyword is unknown, or its value is not 0-255
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise DecodeError(value, cls.GRAMMAR)

        match = _PARAMETERIZED_KEYWORD.fullmatch(value)
        if match:
            word, digits = match.groups()
            if word not in {k.value for k in PARAMETERIZED_KEYWORDS}:
                raise DecodeError(value, cls.GRAMMAR)
            number = _parse_u8(digits)
            if number is None:
                raise DecodeError(value, f"{word} followed by an integer from 0 to {U8_MAX}")
            return cls(KeywordName(word), number)

        try:
            name = KeywordName(value)
        except ValueError:
            raise DecodeError(value, cls.GRAMMAR) from None
        if name in PARAMETERIZED_KEYWORDS:
            raise DecodeError(value, f"{name.value} followed by an integer from 0 to {U8_MAX}")
        return cls(name)

    def __str__(self) -> str:
        if self.value is None:
            return self.name.value
        return f"{self.name.value} {self.value}"


def _render(value: Any) -> str:
    return str(value)


# Field types for pydantic models: validate from document tokens, serialize
# back to the display string.
BasicPowerField = Annotated[
    BasicPower,
    PlainValidator(BasicPower.parse),
    PlainSerializer(_render, return_type=str),
]
CostField = Annotated[
    Cost,
    PlainValidator(Cost.parse),
    PlainSerializer(_render, return_type=str),
]
HitPointsField = Annotated[
    HitPoints,
    PlainValidator(HitPoints.parse),
    PlainSerializer(_render, return_type=str),
]
KeywordField = Annotated[
    Keyword,
    PlainValidator(Keyword.parse),
    PlainSerializer(_render, return_type=str),
]
