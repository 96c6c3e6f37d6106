# apps/cli/run.py
"""
CLI entry point for running mastermindAI experiments.

This script:
  1) Picks the secrets: a validated secrets file (prints count + SHA) or a
     seeded random sample.
  2) Instantiates the requested solver.
  3) Plays every round with a live progress indicator and writes:
       - CSV:  per-round results + guess/pattern history columns
       - JSON: manifest with config, secrets report, stats, git commit, etc.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from tqdm import tqdm

from mastermind.datasets import load_codes, pretty_summary, validate_codelist
from mastermind.engine import MAX_GUESSES
from mastermind.harness import pretty_stats, random_secrets, run_case, summarize
from mastermind.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from mastermind.solvers import create_solver, get_solver_ids


def main(argv=None):
    """
    Parse CLI args, choose secrets, run the batch with progress, and write outputs.
    """
    # Build help text showing currently registered solver IDs
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="mastermindAI — run solver experiments")
    ap.add_argument("--solver", default="memory",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--secrets",
                    help="path to a secrets file (one code per line); default: random sample")
    ap.add_argument("--sample", type=int, default=1000,
                    help="number of rounds (random secrets, or a prefix of --secrets)")
    ap.add_argument("--max-guesses", type=int, default=MAX_GUESSES,
                    help="guess limit per round")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    if args.max_guesses < 1:
        ap.error("--max-guesses must be >= 1")

    # 1) Secrets: validated file or seeded random draw
    rep = None
    if args.secrets:
        rep = validate_codelist(args.secrets)
        print(pretty_summary(rep))
        if not rep["passed"]:
            raise SystemExit(f"Secrets file failed validation: {rep['issues']}")
        secrets = load_codes(args.secrets)
        if args.sample and args.sample < len(secrets):
            secrets = secrets[: args.sample]
    else:
        secrets = random_secrets(args.sample, seed=args.seed)

    # 2) Instantiate solver by id
    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        ap.error(str(e))

    total = len(secrets)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(secrets, ncols=80, desc="Running", unit="round") if mode == "bar" else secrets

    # 4) Run batch with live progress
    for idx, secret in enumerate(iterator, 1):
        # Derive a per-round seed so runs are reproducible and independent
        per_seed = args.seed + idx * 1013904223  # LCG-ish stride to avoid collisions
        r = run_case(solver, secret, max_turns=args.max_guesses, seed=per_seed)
        r["solver_id"] = solver.id  # stamp id for downstream tools
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    stats = summarize(results, max_turns=args.max_guesses)
    print(f"{solver.id}: {pretty_stats(stats)}")

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_guesses)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "secrets": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "stats": stats,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return stats


if __name__ == "__main__":
    main()
