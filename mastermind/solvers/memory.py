"""
Guesser memory and the pure functions that read and update it.

Memory holds two things learned during ONE round:
  - confirmed    : per position, the color known from an exact match (or None)
  - must_include : multiset of colors seen as color matches, not yet placed

Strategy (greedy, not optimal):
  - confirmed position       -> reuse that color
  - else must_include left   -> take one of those colors at random (consumed)
  - else                     -> uniform random color from the palette

Colors tried and found absent are not remembered, and a color taken from
must_include is only re-added if it earns another color match. The
functions never mutate their input; callers keep the returned memory.

`rng` is any object with `randrange(n)` (random.Random in production, a
scripted sequence in tests).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence, Tuple

from mastermind.engine import CODE_LENGTH, Code, Color, Feedback, Marker, Peg


@dataclass(frozen=True)
class GuesserMemory:
    confirmed: Tuple[Optional[Color], ...] = field(
        default_factory=lambda: (None,) * CODE_LENGTH)
    must_include: Tuple[Color, ...] = ()

    @classmethod
    def empty(cls, N: int = CODE_LENGTH) -> "GuesserMemory":
        """Start-of-round memory: nothing confirmed, nothing pending."""
        return cls(confirmed=(None,) * N, must_include=())


def next_guess(memory: GuesserMemory, palette: Sequence[Color], rng) -> Tuple[Code, GuesserMemory]:
    """
    Build the next guess from memory, filling positions left to right.

    Returns:
      (guess, memory') where memory' has the consumed must_include colors
      removed.
    """
    pool: List[Color] = list(memory.must_include)
    pegs: List[Peg] = []

    for known in memory.confirmed:
        if known is not None:
            pegs.append(Peg(known))
        elif pool:
            pegs.append(Peg(pool.pop(rng.randrange(len(pool)))))
        else:
            pegs.append(Peg(palette[rng.randrange(len(palette))]))

    return tuple(pegs), replace(memory, must_include=tuple(pool))


def update_memory(memory: GuesserMemory, guess: Code, feedback: Feedback) -> GuesserMemory:
    """
    Fold one scored guess into memory. `guess` and `feedback` must come
    from the same turn.
    """
    confirmed = list(memory.confirmed)
    must_include = list(memory.must_include)

    for i, mark in enumerate(feedback):
        if mark is Marker.EXACT_MATCH:
            confirmed[i] = guess[i].color
        elif mark is Marker.COLOR_MATCH:
            must_include.append(guess[i].color)

    return GuesserMemory(confirmed=tuple(confirmed), must_include=tuple(must_include))
