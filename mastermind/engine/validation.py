"""
Code / guess validation.

This module answers the question: "Is this code acceptable on the board?"
A code is valid iff:
  - it is a tuple/list of Pegs
  - it has exact length N (4)
  - every peg's color is in the palette

The core (scoring, guessers) assumes validated input; the input layer calls
`parse_code`, which raises InvalidInput so the caller can re-ask.
"""

from __future__ import annotations

import re
from typing import Iterable

from .pegs import CODE_LENGTH, PALETTE, Code, Color, InvalidInput, Peg, make_code

__all__ = ["InvalidInput", "validate_code", "parse_code"]


def validate_code(code, N: int = CODE_LENGTH, palette: Iterable[Color] = PALETTE) -> bool:
    """
    Return True if `code` is a valid code per the rules above.
    """
    if not isinstance(code, (tuple, list)):
        return False
    if len(code) != N:
        return False

    allowed = set(palette)
    return all(isinstance(p, Peg) and p.color in allowed for p in code)


def parse_code(text: str, N: int = CODE_LENGTH) -> Code:
    """
    Parse user input like "red green blue white" (commas also accepted).

    Raises:
      InvalidInput: wrong number of colors, or an unknown color name.
    """
    if not isinstance(text, str):
        raise InvalidInput("Expected a line of color names.")

    tokens = [t for t in re.split(r"[\s,]+", text.strip()) if t]
    if len(tokens) != N:
        raise InvalidInput(f"Code length must be {N}, but got {len(tokens)}.")

    return make_code(tokens)
