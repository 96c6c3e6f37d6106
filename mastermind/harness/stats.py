"""
Batch statistics over harness results.

summarize() returns a JSON-serializable dict (plain floats/ints, no numpy
scalars) so it can go straight into a run manifest.
"""

from __future__ import annotations
from typing import Dict, List
import numpy as np


def summarize(results: List[Dict], max_turns: int) -> Dict:
    """
    Aggregate per-round results.

    Keys:
      games, solved, success_rate,
      mean_guesses / median_guesses / p90_guesses  (solved rounds only; None if none)
      histogram: list where index k = number of rounds solved in k guesses
    """
    n = len(results)
    success = np.array([bool(r["success"]) for r in results], dtype=bool)
    guesses = np.array([int(r["guesses"]) for r in results], dtype=int)
    solved = guesses[success] if n else np.array([], dtype=int)

    hist = np.bincount(solved, minlength=max_turns + 1) if solved.size else np.zeros(max_turns + 1, dtype=int)

    out = {
        "games": n,
        "solved": int(success.sum()),
        "success_rate": float(success.mean()) if n else 0.0,
        "mean_guesses": None,
        "median_guesses": None,
        "p90_guesses": None,
        "histogram": [int(x) for x in hist],
    }
    if solved.size:
        out["mean_guesses"] = float(np.mean(solved))
        out["median_guesses"] = float(np.median(solved))
        out["p90_guesses"] = float(np.percentile(solved, 90))
    return out


def pretty_stats(summary: Dict) -> str:
    """
    One-liner for the console, e.g.
        games=1000 | solved=771 (77.1%) | mean=7.07 median=7.0 p90=10.0
    """
    head = (f"games={summary['games']} | solved={summary['solved']} "
            f"({100.0 * summary['success_rate']:.1f}%)")
    if summary["mean_guesses"] is None:
        return head + " | no solved rounds"
    return (head + f" | mean={summary['mean_guesses']:.2f} "
                   f"median={summary['median_guesses']:.1f} p90={summary['p90_guesses']:.1f}")
