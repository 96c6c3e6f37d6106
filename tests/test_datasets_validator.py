from pathlib import Path

import pytest

from mastermind.datasets import load_codes, pretty_summary, validate_codelist, write_codes
from mastermind.engine import InvalidInput, make_code

SAMPLE = Path(__file__).resolve().parents[1] / "mastermind" / "datasets" / "data" / "secrets_sample.txt"


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_codelist_happy_path(tmp_path: Path):
    p = tmp_path / "secrets.txt"
    _write(p, ["red red blue white", "black yellow green green", "white white white white"])

    rep = validate_codelist(str(p))
    assert rep["passed"] is True
    assert rep["secrets"]["count"] == 3
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "N=4" in s and "secrets=3" in s and s.endswith("OK")


def test_validate_codelist_flags_errors(tmp_path: Path):
    p = tmp_path / "secrets.txt"
    # too short, unknown color, uppercase, blank line
    p.write_text("red red blue\nred red blue purple\nRed red blue white\n\n"
                 "red red blue white\n", encoding="utf-8")

    rep = validate_codelist(str(p))
    assert rep["passed"] is False
    assert rep["secrets"]["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_codelist_duplicates_and_missing(tmp_path: Path):
    p = tmp_path / "secrets.txt"
    _write(p, ["red red blue white", "red red blue white"])
    rep = validate_codelist(str(p))
    assert rep["passed"] is True
    assert rep["secrets"]["unique_count"] == 1
    assert any("duplicate" in msg for msg in rep["issues"])

    missing = validate_codelist(str(tmp_path / "nope.txt"))
    assert missing["passed"] is False
    assert "FAIL" in pretty_summary(missing)


def test_write_and_load_codes(tmp_path: Path):
    codes = [make_code(["red", "green", "blue", "white"]), make_code(["black"] * 4)]
    path = write_codes(codes, tmp_path / "out" / "codes.txt")
    assert load_codes(path) == codes


def test_load_codes_bad_line(tmp_path: Path):
    p = tmp_path / "secrets.txt"
    _write(p, ["red red blue white", "red red"])
    with pytest.raises(InvalidInput):
        load_codes(p)


def test_bundled_sample_is_valid():
    rep = validate_codelist(str(SAMPLE))
    assert rep["passed"] is True
    assert rep["secrets"]["count"] == rep["secrets"]["unique_count"] == 32


def test_gen_secrets_draw_codes(tmp_path: Path):
    from script.gen_secrets import draw_codes

    codes = draw_codes(50, seed=7, unique=True)
    assert len(set(codes)) == 50
    assert draw_codes(50, seed=7, unique=True) == codes
    rep = validate_codelist(write_codes(codes, tmp_path / "gen.txt"))
    assert rep["passed"] is True and rep["issues"] == []
    with pytest.raises(ValueError):
        draw_codes(2000, seed=1, unique=True)
