# apps/cli/play.py
"""
Play Mastermind against the computer in the terminal.

Usage:
    python -m apps.cli.play --name Ada --role breaker --rounds 3

Enter codes as four color names, e.g. "red green blue white".
"""

from __future__ import annotations

import argparse

from mastermind.engine import MAX_GUESSES
from mastermind.match import AIPlayer, Game, HumanPlayer
from mastermind.solvers import create_solver, get_solver_ids


def main(argv=None):
    ap = argparse.ArgumentParser(description="mastermindAI — play against the computer")
    ap.add_argument("--name", default="Player", help="your name")
    ap.add_argument("--role", choices=["breaker", "maker"], default="breaker",
                    help="your role in the first round (roles swap every round)")
    ap.add_argument("--rounds", type=int, default=3, help="number of rounds")
    ap.add_argument("--solver", default="memory",
                    help=f"computer's guessing strategy (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--max-guesses", type=int, default=MAX_GUESSES, help="guess limit per round")
    ap.add_argument("--think-delay", type=float, default=0.0,
                    help="seconds the computer pauses before each guess")
    ap.add_argument("--seed", type=int, help="RNG seed (for reproducible computer play)")
    args = ap.parse_args(argv)

    if args.rounds < 1:
        ap.error("--rounds must be >= 1")
    if args.max_guesses < 1:
        ap.error("--max-guesses must be >= 1")
    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        ap.error(str(e))

    print(f"Welcome to Mastermind, {args.name}!")
    human = HumanPlayer(args.name)
    ai = AIPlayer("Mastermind", solver, think_delay=args.think_delay, seed=args.seed)
    game = Game(human, ai, rounds=args.rounds, human_role=args.role,
                max_guesses=args.max_guesses, seed=args.seed)
    try:
        game.play()
    except (KeyboardInterrupt, EOFError):
        print("\nExiting game.")


if __name__ == "__main__":
    main()
