"""
Human-vs-computer match over a fixed number of rounds.

Each round one side makes the secret and the other breaks it within the
guess limit. The round winner scores a point and the roles swap. The match
ends as soon as one side holds a majority of the rounds, or as a draw when
every round was played with equal scores.
"""

from __future__ import annotations

import random
from typing import Callable

from mastermind.engine import MAX_GUESSES, code_str, format_feedback
from .board import Board
from .players import Player

ROLES = ("breaker", "maker")


class Game:
    def __init__(self, human: Player, ai: Player, *, rounds: int, human_role: str = "breaker",
                 max_guesses: int = MAX_GUESSES, say: Callable[[str], None] = print,
                 seed: int | None = None):
        if rounds < 1:
            raise ValueError(f"rounds must be >= 1; got {rounds}")
        if human_role not in ROLES:
            raise ValueError(f"human_role must be one of {ROLES}; got {human_role!r}")

        self.human = human
        self.ai = ai
        self.rounds = rounds
        self.max_guesses = max_guesses
        self.say = say
        self.rng = random.Random(seed)
        self.rounds_played = 0

        if human_role == "breaker":
            self.code_breaker, self.code_maker = human, ai
        else:
            self.code_breaker, self.code_maker = ai, human

    def swap_players(self) -> None:
        self.code_breaker, self.code_maker = self.code_maker, self.code_breaker

    def result(self) -> str | None:
        """Final verdict once the match is decided, else None."""
        half = self.rounds // 2
        for p in (self.human, self.ai):
            if p.score > half:
                return f"{p.name} wins! {p.score}/{self.rounds} rounds"
        if self.human.score + self.ai.score == self.rounds:
            return "Draw!"
        return None

    def print_score(self) -> None:
        self.say(f"Rounds: {self.rounds}")
        self.say(f"{self.human.name}'s score: {self.human.score}")
        self.say(f"{self.ai.name}'s score: {self.ai.score}")

    def play_round(self) -> Player:
        """Play one round to the end; returns the round winner."""
        breaker, maker = self.code_breaker, self.code_maker

        self.say(f"{maker.name} makes a secret code!")
        board = Board(maker.make_code(), self.max_guesses)
        breaker.begin_round(seed=self.rng.randrange(2 ** 31))

        while not board.is_over:
            guess = breaker.next_guess(board)
            feedback = board.make_attempt(guess)
            breaker.observe(guess, feedback)

            self.say(f"Guess {board.guess_count} of {board.max_guesses}: {code_str(guess)}")
            self.say(f"Response: {format_feedback(feedback)}")

        if board.breaker_victory:
            winner = breaker
            self.say("Code breaker wins!")
        else:
            winner = maker
            self.say(f"Code maker wins! The code was: {code_str(board.secret)}")

        winner.score += 1
        self.rounds_played += 1
        self.print_score()
        self.swap_players()
        return winner

    def play(self) -> str:
        """Play rounds until the match is decided; returns the result line."""
        verdict = self.result()
        while verdict is None:
            self.play_round()
            verdict = self.result()
        self.say("Game over!")
        self.say(verdict)
        return verdict
