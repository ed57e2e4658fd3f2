"""
Tests for the Tic-rng-toe turn loop, console output, and entry point.
"""

import builtins

import pytest

import main
from tic_rng_toe.console import ConsoleUI, render_board, render_legend, RESULT_MESSAGES
from tic_rng_toe.game_state import GameState, Owner, Outcome
from tic_rng_toe.move_validator import ValidationError
from tic_rng_toe.random_player import RandomPlayer
from tic_rng_toe.turn_controller import TurnController, Phase, GameOverError


class ScriptedRng:
    """Stands in for a numpy Generator; hands out a fixed list of picks."""

    def __init__(self, picks):
        self.picks = list(picks)

    def choice(self, candidates):
        pick = self.picks.pop(0)
        assert pick in candidates, f"scripted pick {pick} is not open"
        return pick


def make_controller(opponent_picks):
    return TurnController(opponent=RandomPlayer(ScriptedRng(opponent_picks)))


def play_moves(controller, player_moves):
    return [controller.submit(str(cell)) for cell in player_moves]


# ==================== TURN CONTROLLER ====================

def test_bad_input_then_good_input():
    controller = make_controller([1])

    report = controller.submit("x")
    assert not report.validation.is_valid
    assert report.validation.error == ValidationError.NOT_A_NUMBER
    assert report.phase == Phase.AWAITING_PLAYER_INPUT
    assert controller.state.turn == 0
    assert len(controller.state.remaining) == 9

    report = controller.submit("5")
    assert report.validation.is_valid
    assert controller.state.turn == 1
    assert report.player_cell == 5
    assert report.opponent_cell == 1
    assert controller.state.remaining == set(range(1, 10)) - {1, 5}
    assert report.phase == Phase.AWAITING_PLAYER_INPUT


def test_rejected_cells_do_not_consume_a_turn():
    controller = make_controller([9])
    controller.submit("1")

    for raw in ("0", "10", "1", "9"):
        report = controller.submit(raw)
        assert not report.validation.is_valid
        assert controller.state.turn == 1
        assert controller.state.remaining == set(range(2, 9))

    assert controller.submit("1").validation.error == ValidationError.ALREADY_TAKEN


def test_player_wins_top_row():
    controller = make_controller([7, 8])
    reports = play_moves(controller, [1, 2, 3])

    last = reports[-1]
    assert last.outcome == Outcome.PLAYER_WON
    assert last.phase == Phase.PLAYER_WON
    assert last.opponent_cell is None
    assert controller.state.occupied_by(Owner.PLAYER) == {1, 2, 3}
    assert controller.state.occupied_by(Owner.OPPONENT) == {7, 8}
    assert controller.state.turn == 3


def test_opponent_wins_middle_row():
    controller = make_controller([4, 5, 6])
    reports = play_moves(controller, [1, 2, 9])

    assert reports[-1].outcome == Outcome.OPPONENT_WON
    assert controller.phase == Phase.OPPONENT_WON
    assert controller.state.occupied_by(Owner.OPPONENT) == {4, 5, 6}


def test_full_board_without_line_is_a_draw():
    controller = make_controller([2, 5, 7, 6])
    reports = play_moves(controller, [1, 3, 4, 8, 9])

    assert reports[-1].outcome == Outcome.DRAW
    assert controller.phase == Phase.DRAW
    assert controller.state.remaining == set()
    assert controller.state.turn == 5
    assert all(owner != Owner.EMPTY for owner in controller.state.cells())


def test_win_on_last_cell_beats_draw():
    controller = make_controller([3, 5, 8, 9])
    reports = play_moves(controller, [1, 2, 4, 6, 7])

    assert controller.state.remaining == set()
    assert reports[-1].outcome == Outcome.PLAYER_WON


def test_draw_checked_after_opponent_move():
    # Opponent fills the last open cell with no line on the board
    state = GameState()
    for cell in (1, 3, 4, 8):
        state.mark(cell, Owner.PLAYER)
    for cell in (2, 5, 7):
        state.mark(cell, Owner.OPPONENT)
    state.turn = 4
    controller = TurnController(state=state, opponent=RandomPlayer(ScriptedRng([6])))

    report = controller.submit("9")
    # player's 9 did not finish the board because 6 was still open
    assert report.opponent_cell == 6
    assert report.outcome == Outcome.DRAW


def test_submit_after_game_over_raises():
    controller = make_controller([7, 8])
    play_moves(controller, [1, 2, 3])
    with pytest.raises(GameOverError):
        controller.submit("4")


def test_reports_keep_their_own_outcome():
    controller = make_controller([7, 8])
    reports = [controller.submit(raw) for raw in ("x", "1", "2", "3")]

    assert reports[0].outcome is None
    assert reports[1].outcome is None
    assert reports[2].outcome is None
    assert reports[3].outcome == Outcome.PLAYER_WON
    assert reports[3].winning_line == frozenset({1, 2, 3})
    assert reports[1].winning_line is None

    controller.reset()
    assert reports[3].outcome == Outcome.PLAYER_WON


def full_board(player_cells, opponent_cells):
    state = GameState()
    for cell in player_cells:
        state.mark(cell, Owner.PLAYER)
    for cell in opponent_cells:
        state.mark(cell, Owner.OPPONENT)
    return state


def test_full_board_handed_in_is_a_draw():
    state = full_board([1, 3, 4, 8, 9], [2, 5, 6, 7])
    controller = TurnController(state=state, opponent=RandomPlayer(ScriptedRng([])))

    assert controller.state.outcome == Outcome.DRAW
    assert controller.phase == Phase.DRAW

    lines = iter(["1", "2", "3"])
    outcome = controller.play(lambda: next(lines), lambda report: None)
    assert outcome == Outcome.DRAW
    assert next(lines) == "1"


def test_full_board_handed_in_with_a_line_is_a_win():
    state = full_board([1, 2, 4, 6, 7], [3, 5, 8, 9])
    controller = TurnController(state=state)

    assert controller.state.outcome == Outcome.PLAYER_WON
    assert controller.phase == Phase.PLAYER_WON
    assert controller.winning_line == frozenset({1, 4, 7})


def test_finished_state_handed_in_keeps_its_phase():
    state = full_board([1, 2, 3], [7, 8])
    state.outcome = Outcome.PLAYER_WON
    controller = TurnController(state=state)

    assert controller.phase == Phase.PLAYER_WON
    with pytest.raises(GameOverError):
        controller.submit("4")


def test_reset_starts_a_new_round():
    controller = make_controller([7, 8, 4])
    play_moves(controller, [1, 2, 3])
    controller.reset()

    assert controller.phase == Phase.AWAITING_PLAYER_INPUT
    assert controller.state.remaining == set(range(1, 10))
    assert controller.submit("5").validation.is_valid


@pytest.mark.parametrize("seed", range(25))
def test_random_games_never_double_assign(seed):
    controller = TurnController(opponent=RandomPlayer.from_seed(seed))

    while not controller.state.is_game_over:
        controller.submit(str(min(controller.state.remaining)))

    claimed = [move.cell for move in controller.state.moves]
    assert len(claimed) == len(set(claimed))
    assert set(claimed) | controller.state.remaining == set(range(1, 10))
    assert not set(claimed) & controller.state.remaining


def test_play_runs_to_outcome():
    controller = make_controller([7, 8])
    lines = iter(["nope", "1", "2", "3"])
    reports = []
    prompts = []

    outcome = controller.play(lambda: next(lines), reports.append, lambda: prompts.append(1))

    assert outcome == Outcome.PLAYER_WON
    assert len(reports) == 4
    assert len(prompts) == 4
    assert not reports[0].validation.is_valid


# ==================== CONSOLE ====================

def test_render_legend():
    assert render_legend() == (
        " 1 | 2 | 3\n-----------\n 4 | 5 | 6\n-----------\n 7 | 8 | 9"
    )


def test_render_board():
    cells = [Owner.PLAYER, Owner.EMPTY, Owner.OPPONENT] + [Owner.EMPTY] * 6
    assert render_board(cells).splitlines()[0] == " X |   | O"


def test_console_shows_error_and_both_half_turns():
    out = []
    ui = ConsoleUI(write=out.append)
    controller = make_controller([7])

    ui.show_report(controller.submit("abc"))
    ui.show_report(controller.submit("5"))
    text = "\n".join(out)

    assert "Not a valid input number" in text
    assert "Your turn:" in text
    assert "Computer turn:" in text
    assert " O |   |  " in text


def test_console_shows_result_banner():
    out = []
    ui = ConsoleUI(write=out.append)
    controller = make_controller([7, 8])
    for report in play_moves(controller, [1, 2, 3]):
        ui.show_report(report)

    text = "\n".join(out)
    assert RESULT_MESSAGES[Outcome.PLAYER_WON] in text
    assert "Winning line: 1 - 2 - 3" in text


def test_console_draw_has_no_winning_line():
    out = []
    ui = ConsoleUI(write=out.append)
    ui.show_result(Outcome.DRAW)

    text = "\n".join(out)
    assert RESULT_MESSAGES[Outcome.DRAW] in text
    assert "Winning line" not in text


# ==================== ENTRY POINT ====================

def test_main_plays_a_full_game(monkeypatch, capsys):
    lines = iter([str(cell) for cell in range(1, 10)] * 2)
    monkeypatch.setattr(builtins, "input", lambda: next(lines))

    main.main(["--seed", "11"])
    out = capsys.readouterr().out

    assert "Tic-rng-toe!" in out
    assert any(message in out for message in RESULT_MESSAGES.values())
    assert "Goodbye!" in out


def test_main_handles_end_of_input(monkeypatch, capsys):
    def closed_input():
        raise EOFError

    monkeypatch.setattr(builtins, "input", closed_input)

    main.main([])
    out = capsys.readouterr().out

    assert "Game interrupted." in out
    assert "Goodbye!" in out
