"""
Experiment harness core primitives.

- run_case:       play one round (one hidden secret) with a given solver.
- run_batch:      run many rounds in sequence (optionally a sample prefix).
- random_secrets: reproducible list of random secret codes.

The guess limit (12 by default) is enforced here. These functions are
UI-agnostic so they can be reused by a CLI app, the match loop, or tests.
"""

from __future__ import annotations
import random
import time
from typing import Dict, List, Tuple
from mastermind.engine import (CODE_LENGTH, MAX_GUESSES, PALETTE, Code, Feedback, Peg,
                               all_codes, evaluate, filter_candidates, is_solved)


def _assert_turns(max_turns: int) -> None:
    """Guardrail: a round needs at least one guess."""
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")


def random_secrets(n: int, seed: int | None = None) -> List[Code]:
    """Draw `n` secrets uniformly (colors may repeat), reproducible by seed."""
    rng = random.Random(seed)
    return [tuple(Peg(rng.choice(PALETTE)) for _ in range(CODE_LENGTH)) for _ in range(n)]


def run_case(
        solver,
        secret: Code,
        *,
        max_turns: int = MAX_GUESSES,
        seed: int | None = None,
) -> Dict:
    """
    Execute one round until the solver cracks the code or runs out of guesses.

    Args:
        solver:    an object implementing BaseSolver with next_guess(state)
        secret:    the hidden code for this round
        max_turns: guess limit (12 by default)
        seed:      RNG seed to make the solver's random picks reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, feedback)]), secret (Code)
    """
    _assert_turns(max_turns)

    # New round: the solver drops its memory and reseeds
    solver.reset(palette=PALETTE, N=CODE_LENGTH, seed=seed)

    history: List[Tuple[Code, Feedback]] = []
    track = getattr(solver, "uses_candidates", False)
    candidates = all_codes(PALETTE, CODE_LENGTH) if track else None

    t0 = time.time()
    for turn in range(1, max_turns + 1):
        state = {
            "turn": turn,
            "history": list(history),
            "candidates": candidates,
            "palette": list(PALETTE),
            "N": CODE_LENGTH,
        }

        guess = solver.next_guess(state)

        feedback = evaluate(secret, guess)
        history.append((guess, feedback))
        solver.observe(guess, feedback)

        if is_solved(feedback):
            dt = (time.time() - t0) * 1000.0
            return {
                "success": True, "guesses": turn, "time_ms": dt,
                "history": history, "secret": secret
            }

        # Narrow candidate set before the next turn
        if track:
            candidates = filter_candidates(candidates, [(guess, feedback)])

    # Out of guesses: the code maker wins
    dt = (time.time() - t0) * 1000.0
    return {
        "success": False, "guesses": max_turns, "time_ms": dt,
        "history": history, "secret": secret
    }


def run_batch(
        solver,
        secrets: List[Code],
        *,
        max_turns: int = MAX_GUESSES,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many rounds back-to-back. If 'sample' is provided, only the first K
    secrets are used.

    Each round's seed is derived from the base seed (seed + index) so runs
    are reproducible but rounds differ.
    """
    _assert_turns(max_turns)

    pool = list(secrets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, secret, max_turns=max_turns, seed=case_seed)
        r["solver_id"] = solver.id
        out.append(r)
    return out
