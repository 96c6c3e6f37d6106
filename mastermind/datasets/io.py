from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from mastermind.engine import Code, code_str, parse_code


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_codes(p: Path | str) -> List[Code]:
    """
    Parse a secrets file (one code per line, e.g. "red red blue white").
    Blank lines are skipped; a bad line raises InvalidInput.
    """
    return [parse_code(ln) for ln in read_lines(p) if ln.strip()]


def write_codes(codes: Iterable[Code], p: Path | str) -> str:
    return write_lines((code_str(c) for c in codes), p)
