"""
Players for a human-vs-computer match.

Both kinds expose the same surface to the Game loop:
  - make_code()             -> secret for a round where they are code maker
  - begin_round(seed)       -> called before each round they break
  - next_guess(board)       -> a Code
  - observe(guess, feedback)
"""

from __future__ import annotations

import random
import time
from typing import Callable

from mastermind.engine import (CODE_LENGTH, PALETTE, Code, Feedback, InvalidInput, Peg,
                               all_codes, filter_candidates, parse_code)


class Player:
    is_ai = False

    def __init__(self, name: str):
        self.name = name
        self.score = 0

    def begin_round(self, seed: int | None = None) -> None:
        pass

    def observe(self, guess: Code, feedback: Feedback) -> None:
        pass


class HumanPlayer(Player):
    """Reads codes from `ask` (input() by default); re-asks on bad input."""

    def __init__(self, name: str, ask: Callable[[str], str] = input,
                 say: Callable[[str], None] = print):
        super().__init__(name)
        self.ask = ask
        self.say = say

    def _read_code(self, prompt: str) -> Code:
        while True:
            self.say(prompt)
            self.say("Colors: " + " ".join(c.value for c in PALETTE))
            try:
                return parse_code(self.ask("> "))
            except InvalidInput as e:
                self.say(f"Invalid input: {e}")

    def make_code(self) -> Code:
        return self._read_code(f"Pick {CODE_LENGTH} colors for your secret code!")

    def next_guess(self, board) -> Code:
        return self._read_code(f"Pick {CODE_LENGTH} colors!")


class AIPlayer(Player):
    """Computer opponent: random secrets, guesses through a registered solver."""

    is_ai = True

    def __init__(self, name: str, solver, *, think_delay: float = 0.0,
                 say: Callable[[str], None] = print, seed: int | None = None):
        super().__init__(name)
        self.solver = solver
        self.think_delay = think_delay
        self.say = say
        self.rng = random.Random(seed)
        self._candidates = None

    def make_code(self) -> Code:
        return tuple(Peg(self.rng.choice(PALETTE)) for _ in range(CODE_LENGTH))

    def begin_round(self, seed: int | None = None) -> None:
        # Explicit reset: nothing learned last round carries over
        self.solver.reset(palette=PALETTE, N=CODE_LENGTH, seed=seed)
        self._candidates = all_codes() if self.solver.uses_candidates else None

    def next_guess(self, board) -> Code:
        if self.think_delay > 0:
            self.say(f"# {self.name} is thinking...")
            time.sleep(self.think_delay)
        state = {
            "turn": board.guess_count + 1,
            "history": board.history(),
            "candidates": self._candidates,
            "palette": list(PALETTE),
            "N": CODE_LENGTH,
        }
        return self.solver.next_guess(state)

    def observe(self, guess: Code, feedback: Feedback) -> None:
        self.solver.observe(guess, feedback)
        if self._candidates is not None:
            self._candidates = filter_candidates(self._candidates, [(guess, feedback)])
