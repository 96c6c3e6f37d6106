from mastermind.harness import pretty_stats, summarize


def _r(success, guesses):
    return {"success": success, "guesses": guesses}


def test_summarize_basic():
    results = [_r(True, 3), _r(True, 5), _r(False, 12), _r(True, 5)]
    s = summarize(results, max_turns=12)
    assert s["games"] == 4
    assert s["solved"] == 3
    assert s["success_rate"] == 0.75
    assert abs(s["mean_guesses"] - 13 / 3) < 1e-9
    assert s["median_guesses"] == 5.0
    assert len(s["histogram"]) == 13
    assert s["histogram"][3] == 1 and s["histogram"][5] == 2 and s["histogram"][12] == 0
    assert "solved=3 (75.0%)" in pretty_stats(s)


def test_summarize_no_wins():
    s = summarize([_r(False, 12)] * 3, max_turns=12)
    assert s["success_rate"] == 0.0
    assert s["mean_guesses"] is None
    assert sum(s["histogram"]) == 0
    assert pretty_stats(s).endswith("no solved rounds")


def test_summarize_empty():
    s = summarize([], max_turns=12)
    assert s["games"] == 0 and s["success_rate"] == 0.0
