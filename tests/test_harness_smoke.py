import pytest
from mastermind.engine import Color, is_solved, make_code
from mastermind.harness import random_secrets, run_batch, run_case
from mastermind.solvers import create_solver, get_solver_ids


def test_run_case_smoke():
    solver = create_solver("random_consistent")
    secret = make_code(["red", "red", "blue", "yellow"])
    r = run_case(solver, secret, max_turns=12, seed=42)
    assert "success" in r and "history" in r
    # Consistent guessing cracks a 4x6 board well within 12 guesses
    assert r["success"] is True
    assert r["guesses"] == len(r["history"])
    assert is_solved(r["history"][-1][1])
    assert r["secret"] == secret


def test_run_case_loss_uses_all_guesses():
    solver = create_solver("random")
    secret = make_code([Color.BLACK] * 4)
    r = run_case(solver, secret, max_turns=2, seed=0)
    if not r["success"]:
        assert r["guesses"] == 2
        assert len(r["history"]) == 2


def test_run_case_rejects_bad_limit():
    with pytest.raises(ValueError):
        run_case(create_solver("memory"), make_code(["red"] * 4), max_turns=0)


def test_run_batch_reproducible():
    secrets = random_secrets(20, seed=3)
    a = run_batch(create_solver("memory"), secrets, seed=11)
    b = run_batch(create_solver("memory"), secrets, seed=11)
    assert [r["history"] for r in a] == [r["history"] for r in b]
    assert all(r["solver_id"] == "memory" for r in a)


def test_run_batch_sample_prefix():
    secrets = random_secrets(10, seed=1)
    out = run_batch(create_solver("random_consistent"), secrets, seed=1, sample=4)
    assert [r["secret"] for r in out] == secrets[:4]


def test_registry():
    assert {"memory", "random", "random_consistent"} <= set(get_solver_ids())
    with pytest.raises(ValueError, match="Unknown solver id"):
        create_solver("knuth")
