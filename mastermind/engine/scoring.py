"""
Mastermind scoring (feedback) for a single (secret, guess) pair.

Conventions (one marker per GUESS position):
  - 'B' : EXACT_MATCH  = correct color in the correct position
  - 'W' : COLOR_MATCH  = color present elsewhere in the secret
  - '-' : NO_MATCH     = color absent (or already used up by exact matches)

Algorithm (two passes; the first must finish before the second starts):
  1) Mark every exact match.
  2) For each remaining position with color c, award a color match iff the
     secret holds more c's than there are exact matches of color c across
     the WHOLE guess.

Example (duplicates):
  secret = white white black black
  guess  = white white white black  ->  B B - B
  The third white gets nothing: both whites in the secret are already
  matched exactly.

Note the rule in pass 2 compares against exact matches only, so two
non-exact guess pegs of the same color can both earn 'W' when the secret
has spare copies. Feedback stays position-aligned so guessers can learn
from each slot; `key_pegs` gives the unordered view a human would see.
"""

from __future__ import annotations

from collections import Counter
from typing import List

from .pegs import Code, Feedback, Marker


def evaluate(secret: Code, guess: Code) -> Feedback:
    """
    Compute the position-aligned feedback for `guess` against `secret`.

    Preconditions:
      - len(guess) == len(secret)

    Returns:
      - tuple of Markers, slot i for guess position i

    Examples:
      WWBB vs WWWB -> (EXACT, EXACT, NO, EXACT)
      WWBB vs WBBB -> (EXACT, NO, EXACT, EXACT)
    """
    assert len(secret) == len(guess), "Secret and guess must be the same length"

    n = len(guess)
    marks = [Marker.NO_MATCH] * n

    # Pass 1: exact matches, counted per color for pass 2.
    exact_by_color: Counter = Counter()
    for i in range(n):
        if guess[i].color == secret[i].color:
            marks[i] = Marker.EXACT_MATCH
            exact_by_color[guess[i].color] += 1

    in_secret = Counter(p.color for p in secret)

    # Pass 2: color matches, capped by the surplus over exact matches.
    for i in range(n):
        if marks[i] is Marker.EXACT_MATCH:
            continue
        c = guess[i].color
        if in_secret[c] > exact_by_color[c]:
            marks[i] = Marker.COLOR_MATCH

    return tuple(marks)


def is_solved(feedback: Feedback) -> bool:
    """True when every slot is an exact match (code fully matched)."""
    return len(feedback) > 0 and all(m is Marker.EXACT_MATCH for m in feedback)


def to_pattern(feedback: Feedback) -> str:
    """Positional key-peg string, e.g. 'BB-B'."""
    return "".join(m.value for m in feedback)


def from_pattern(pattern: str) -> Feedback:
    """Inverse of to_pattern ('BW--' -> markers)."""
    return tuple(Marker(ch) for ch in pattern)


def key_pegs(feedback: Feedback) -> List[Marker]:
    """
    Unordered view of the feedback: exact markers first, then color markers,
    NO_MATCH dropped. This is what a human code breaker is shown.
    """
    exact = [m for m in feedback if m is Marker.EXACT_MATCH]
    color = [m for m in feedback if m is Marker.COLOR_MATCH]
    return exact + color


def format_feedback(feedback: Feedback) -> str:
    """Render key pegs for the console, e.g. '(black) (black) (white)'."""
    pegs = key_pegs(feedback)
    if not pegs:
        return "*MISS*"
    names = {Marker.EXACT_MATCH: "(black)", Marker.COLOR_MATCH: "(white)"}
    return " ".join(names[m] for m in pegs)
