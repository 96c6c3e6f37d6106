"""
Colors, pegs and codes.

Conventions:
  - A code (or a guess) is a tuple of exactly CODE_LENGTH Pegs.
  - Colors repeat freely inside a code.
  - Feedback is one Marker per guess position (position-aligned).

The board size is fixed: 4 positions, 6 colors, 12 guesses per round.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple, Union

CODE_LENGTH = 4
MAX_GUESSES = 12


class InvalidInput(ValueError):
    """A code or guess that breaks the board rules (length, palette)."""


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    WHITE = "white"
    BLACK = "black"
    YELLOW = "yellow"

    @classmethod
    def from_string(cls, name: str) -> "Color":
        """
        Case-insensitive lookup by color name ("Red", "red " -> Color.RED).
        Raises InvalidInput for anything outside the palette.
        """
        key = name.strip().lower()
        for c in cls:
            if c.value == key:
                return c
        allowed = ", ".join(c.value for c in cls)
        raise InvalidInput(f"Invalid color '{name}'. Allowed: {allowed}.")

    def __str__(self) -> str:
        return self.value


PALETTE: Tuple[Color, ...] = tuple(Color)


class Marker(Enum):
    """Per-position feedback; values are the key-peg symbols used in patterns."""
    EXACT_MATCH = "B"  # black key peg: right color, right position
    COLOR_MATCH = "W"  # white key peg: right color, wrong position
    NO_MATCH = "-"


@dataclass(frozen=True)
class Peg:
    color: Color

    def __str__(self) -> str:
        return self.color.value


Code = Tuple[Peg, ...]
Guess = Code
Feedback = Tuple[Marker, ...]


def make_code(colors: Iterable[Union[Color, str]]) -> Code:
    """
    Build a code from colors or color names.

    Examples:
      make_code([Color.RED, Color.RED, Color.BLUE, Color.WHITE])
      make_code(["red", "red", "blue", "white"])
    """
    out = []
    for c in colors:
        out.append(Peg(c if isinstance(c, Color) else Color.from_string(c)))
    return tuple(out)


def code_str(code: Code) -> str:
    """Space-separated color names, e.g. 'red red blue white'."""
    return " ".join(p.color.value for p in code)
