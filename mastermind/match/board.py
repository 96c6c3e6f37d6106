from __future__ import annotations

from typing import List

from mastermind.engine import MAX_GUESSES, Code, Feedback, evaluate, is_solved


class Board:
    """One round: the secret, every attempt and its position-aligned response."""

    def __init__(self, secret: Code, max_guesses: int = MAX_GUESSES):
        if max_guesses < 1:
            raise ValueError(f"max_guesses must be >= 1; got {max_guesses}")
        self.secret = secret
        self.max_guesses = max_guesses
        self.attempts: List[Code] = []
        self.responses: List[Feedback] = []

    def make_attempt(self, guess: Code) -> Feedback:
        """Score a guess, record it, and return the feedback."""
        feedback = evaluate(self.secret, guess)
        self.attempts.append(guess)
        self.responses.append(feedback)
        return feedback

    @property
    def guess_count(self) -> int:
        return len(self.attempts)

    def remaining(self) -> int:
        """Return how many guesses are left."""
        return max(0, self.max_guesses - self.guess_count)

    @property
    def breaker_victory(self) -> bool:
        return any(is_solved(fb) for fb in self.responses)

    @property
    def maker_victory(self) -> bool:
        return not self.breaker_victory and self.guess_count >= self.max_guesses

    @property
    def is_over(self) -> bool:
        return self.breaker_victory or self.maker_victory

    def history(self):
        return list(zip(self.attempts, self.responses))
