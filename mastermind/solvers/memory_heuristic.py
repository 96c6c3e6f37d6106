"""
Memory heuristic solver (the automated code breaker).

Strategy:
  - Keep exact-match colors in place for the rest of the round.
  - Spread color-match colors over the unresolved positions.
  - Fill whatever is left with random colors.

See `memory.py` for the pure functions. This class only owns the memory
value for the CURRENT round; `reset()` wipes it, and every round driver
calls `reset()` before the first guess.
"""

from __future__ import annotations

from mastermind.engine import Code, Feedback
from .base import BaseSolver, register
from .memory import GuesserMemory, next_guess, update_memory


@register
class MemorySolver(BaseSolver):
    id = "memory"
    name = "Memory Heuristic"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self.memory = GuesserMemory.empty(self.N)

    def reset(self, **kwargs) -> None:
        super().reset(**kwargs)
        self.memory = GuesserMemory.empty(self.N)

    def next_guess(self, state: dict) -> Code:
        guess, self.memory = next_guess(self.memory, self.palette, self.rng)
        return guess

    def observe(self, guess: Code, feedback: Feedback) -> None:
        self.memory = update_memory(self.memory, guess, feedback)
