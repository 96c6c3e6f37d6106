"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (codes still
    consistent with all feedback so far).
  - If (unexpectedly) the candidate set is empty, fall back to a random code.

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - A reference point for the memory heuristic, not an optimal solver.
"""

from __future__ import annotations

from typing import List

from mastermind.engine import Code, Peg
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"
    uses_candidates = True

    def next_guess(self, state: dict) -> Code:
        """
        Pick any candidate uniformly at random (seeded RNG).

        Args:
            state: dict with keys:
                - "candidates": codes consistent with the history (List[Code])
                - "history":    list of (guess, feedback)
                - "turn":       1-based guess number

        Returns:
            A code of length N.
        """
        candidates: List[Code] = state["candidates"]

        if not candidates:
            return tuple(Peg(self.rng.choice(self.palette)) for _ in range(self.N))

        i = self.rng.randrange(len(candidates))
        return candidates[i]
