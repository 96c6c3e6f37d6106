"""
Random solver.

Strategy:
  - Every position gets a uniformly random palette color; feedback is ignored.

Notes:
  - Baseline for the harness; it solves ~1% of rounds within 12 guesses.
"""

from __future__ import annotations

from mastermind.engine import Code, Peg
from .base import BaseSolver, register


@register
class RandomSolver(BaseSolver):
    id = "random"
    name = "Random"
    version = "1.0.0"

    def next_guess(self, state: dict) -> Code:
        return tuple(Peg(self.rng.choice(self.palette)) for _ in range(self.N))
