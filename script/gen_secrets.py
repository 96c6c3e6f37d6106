"""
Write a reproducible list of random secret codes.

Features:
- Seeded draw (same seed -> same file).
- Optional --unique to skip repeated codes.

Usage:
    python -m script.gen_secrets --out reports/secrets_100.txt \
        --count 100 --seed 7 --unique
"""

import argparse
import random
from pathlib import Path

from mastermind.datasets import write_codes
from mastermind.engine import CODE_LENGTH, PALETTE, Peg


def draw_codes(count: int, seed: int, unique: bool) -> list:
    total = len(PALETTE) ** CODE_LENGTH
    if unique and count > total:
        raise ValueError(f"only {total} distinct codes exist; asked for {count}")

    rng = random.Random(seed)
    seen, out = set(), []
    while len(out) < count:
        code = tuple(Peg(rng.choice(PALETTE)) for _ in range(CODE_LENGTH))
        if unique and code in seen:
            continue
        seen.add(code)
        out.append(code)
    return out


def main():
    ap = argparse.ArgumentParser(description="Write a seeded list of random secret codes.")
    ap.add_argument("--out", dest="out", required=True, help="output .txt file")
    ap.add_argument("--count", type=int, default=100, help="number of codes")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed")
    ap.add_argument("--unique", action="store_true", help="no repeated codes")
    args = ap.parse_args()

    codes = draw_codes(args.count, args.seed, args.unique)
    path = write_codes(codes, Path(args.out))
    print(f"Wrote {len(codes)} codes to {path}")


if __name__ == "__main__":
    main()
