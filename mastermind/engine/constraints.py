"""
Candidate filtering given game history.

Given:
  - a pool of codes (usually every code on the board, 6^4 = 1296)
  - a history of (guess, feedback) pairs

Return:
  - codes that are consistent with ALL feedback seen so far.

Feedback is position-aligned, so a candidate must reproduce the exact
per-slot markers, not only the black/white counts.
"""

from itertools import product
from typing import Iterable, List, Sequence, Tuple

from .pegs import CODE_LENGTH, PALETTE, Code, Color, Feedback, Peg
from .scoring import evaluate

# History is a sequence of (guess, feedback) tuples produced by the engine.
History = Iterable[Tuple[Code, Feedback]]


def all_codes(palette: Sequence[Color] = PALETTE, N: int = CODE_LENGTH) -> List[Code]:
    """Every code of length N over `palette`, in lexicographic palette order."""
    return [tuple(Peg(c) for c in combo) for combo in product(palette, repeat=N)]


def filter_candidates(codes: Iterable[Code], history: History) -> List[Code]:
    """
    Keep only codes that would produce exactly the recorded feedback for
    every (guess, feedback) in `history`.

    Returns:
      List of consistent codes (order preserved as in `codes`).
    """
    history = list(history)
    out: List[Code] = []

    for c in codes:
        # Treat the candidate as the secret: the old guess must score the same.
        if all(evaluate(c, g) == fb for g, fb in history):
            out.append(c)

    return out
