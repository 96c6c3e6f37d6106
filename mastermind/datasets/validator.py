"""
Dataset validator for secret-code lists.

What this module does:
- Validate a secrets file used for reproducible benchmark runs.
- Enforce formatting rules (one code per line, exactly N lowercase color names
  from the palette, separated by single spaces).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from mastermind.datasets import validate_codelist, pretty_summary
    rep = validate_codelist("mastermind/datasets/data/secrets_sample.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from mastermind.engine import CODE_LENGTH, PALETTE


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID codes
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid codes (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for a secrets file."""
    N: int
    secrets: FileReport
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load codes from a text file and validate them.

    Rules:
      - one code per line, N color names separated by single spaces
      - names must already be lowercase and in the palette
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_lines, invalid_count)
    """
    names = {c.value for c in PALETTE}
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            line = raw.strip()
            tokens = line.split(" ")
            if line and len(tokens) == N and all(t in names for t in tokens):
                valid.append(line)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_codelist(path: str, N: int = CODE_LENGTH) -> Dict:
    """
    Validate a secrets file for code length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - count, unique count, SHA-256, invalid line count
          - `passed` boolean (strict: non-empty, no invalid lines)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"secrets file not found: {path}")
        rep = ValidationReport(
            N=N,
            secrets=FileReport(path, False, 0, "", 0, 0),
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    codes, invalid = _load_and_check(p, N)
    report = FileReport(
        path=str(p),
        exists=True,
        count=len(codes),
        sha256=_sha256_file(p),
        unique_count=len(set(codes)),
        invalid_lines=invalid,
    )

    if report.count == 0:
        issues.append("secrets file contains 0 valid codes")
    if invalid:
        issues.append(f"secrets has {invalid} invalid line(s)")
    # Duplicates are allowed (a benchmark may repeat a code) but worth surfacing
    if report.count != report.unique_count:
        issues.append("secrets contains duplicate lines")

    passed = report.count > 0 and invalid == 0

    rep = ValidationReport(N=N, secrets=report, passed=passed, issues=issues)
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=4 | secrets=64 (uniq=64, sha=abc123...) | OK
    """
    s = report["secrets"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (s.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | secrets={s['count']} (uniq={s['unique_count']}, sha={sha}) "
        f"| {status}"
    )
