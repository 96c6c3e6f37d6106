import pytest

from mastermind.engine import Color, make_code
from mastermind.match import AIPlayer, Board, Game, HumanPlayer
from mastermind.solvers import create_solver


def _scripted(answers):
    answers = list(answers)
    return lambda prompt: answers.pop(0)


def test_board_breaker_victory():
    b = Board(make_code(["red", "green", "blue", "white"]), max_guesses=3)
    b.make_attempt(make_code(["red"] * 4))
    assert not b.is_over and b.remaining() == 2
    b.make_attempt(make_code(["red", "green", "blue", "white"]))
    assert b.breaker_victory and not b.maker_victory and b.is_over
    assert b.guess_count == 2


def test_board_maker_victory():
    b = Board(make_code(["red"] * 4), max_guesses=2)
    b.make_attempt(make_code(["blue"] * 4))
    b.make_attempt(make_code(["green"] * 4))
    assert b.maker_victory and not b.breaker_victory
    assert b.remaining() == 0
    assert len(b.history()) == 2


def test_human_player_reasks_on_bad_input():
    said = []
    human = HumanPlayer("Ada", ask=_scripted(["purple red red red", "red red", "red red red red"]),
                        say=said.append)
    assert human.make_code() == make_code([Color.RED] * 4)
    assert sum("Invalid input" in line for line in said) == 2


def test_game_human_breaks_first_round():
    said = []
    human = HumanPlayer("Ada", ask=_scripted(["yellow yellow black white"]), say=said.append)
    ai = AIPlayer("Mastermind", create_solver("memory"), say=said.append, seed=1)
    ai.make_code = lambda: make_code(["yellow", "yellow", "black", "white"])

    verdict = Game(human, ai, rounds=1, say=said.append, seed=1).play()
    assert verdict == "Ada wins! 1/1 rounds"
    assert human.score == 1 and ai.score == 0
    assert "Code breaker wins!" in said


def test_game_swaps_roles_and_resets_ai_memory():
    said = []
    human = HumanPlayer("Ada", ask=_scripted(["red green blue white", "black black black black"]),
                        say=said.append)
    solver = create_solver("memory")
    resets = []
    original_reset = solver.reset

    def spy_reset(**kwargs):
        resets.append(kwargs)
        original_reset(**kwargs)

    solver.reset = spy_reset
    ai = AIPlayer("Mastermind", solver, say=said.append, seed=4)
    ai.make_code = lambda: make_code([Color.BLACK] * 4)

    game = Game(human, ai, rounds=2, human_role="maker", say=said.append, seed=4)
    verdict = game.play()

    # round 1: AI breaks the human's code; round 2: human breaks in one guess
    assert game.rounds_played == 2
    assert len(resets) == 1
    assert human.score >= 1
    assert human.score + ai.score == 2
    assert verdict in ("Draw!", "Ada wins! 2/2 rounds")


def test_ai_random_consistent_breaker_solves():
    said = []
    human = HumanPlayer("Ada", ask=_scripted(["green green yellow blue"]), say=said.append)
    ai = AIPlayer("Mastermind", create_solver("random_consistent"), say=said.append, seed=8)
    game = Game(human, ai, rounds=1, human_role="maker", say=said.append, seed=8)
    assert game.play() == "Mastermind wins! 1/1 rounds"


def test_game_rejects_bad_config():
    human = HumanPlayer("Ada", ask=_scripted([]))
    ai = AIPlayer("Mastermind", create_solver("memory"))
    with pytest.raises(ValueError):
        Game(human, ai, rounds=0)
    with pytest.raises(ValueError):
        Game(human, ai, rounds=1, human_role="spectator")
