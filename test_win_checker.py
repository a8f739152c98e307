"""
Tests for the win checker.
"""

import pytest

from tictactoe_ai.game_state import GameState, Mark, new_board, parse_board
from tictactoe_ai.win_checker import (
    DRAW,
    NO_RESULT,
    WINNING_LINES,
    Outcome,
    OutcomeKind,
    WinChecker,
    evaluate,
)


def _board_with_line(line, mark):
    cells = list(new_board())
    for index in line:
        cells[index] = mark
    return cells


def test_line_order():
    assert WINNING_LINES == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("mark", [Mark.X, Mark.O])
def test_every_line_wins(line, mark):
    outcome = evaluate(_board_with_line(line, mark))

    assert outcome == Outcome.win(mark, line)
    assert outcome.kind == OutcomeKind.WIN
    assert outcome.winner == mark
    assert outcome.is_terminal


def test_line_with_opponent_marks_around():
    # X on the top row, O scattered without a line of its own
    board = parse_board("XXX" "OO." "..O")
    assert evaluate(board) == Outcome.win(Mark.X, (0, 1, 2))

    board = parse_board("XOX" "XO." ".OX")
    assert evaluate(board) == Outcome.win(Mark.O, (1, 4, 7))


def test_full_board_without_line_is_draw():
    board = parse_board("XOX" "XOO" "OXX")
    outcome = evaluate(board)

    assert outcome is DRAW
    assert outcome.is_terminal
    assert outcome.winner is None
    assert outcome.line is None


def test_full_board_with_line_is_win():
    board = parse_board("XXX" "OOX" "OXO")
    assert evaluate(board) == Outcome.win(Mark.X, (0, 1, 2))


@pytest.mark.parametrize("text", [
    ".........",
    "X........",
    "XO.......",
    "XOX" "XOO" "OX.",
])
def test_open_board_has_no_result(text):
    outcome = evaluate(parse_board(text))

    assert outcome is NO_RESULT
    assert not outcome.is_terminal
    assert outcome.winner is None


def test_first_line_in_order_is_reported():
    # Top row and left column both belong to X
    board = parse_board("XXX" "X.." "X..")
    assert evaluate(board).line == (0, 1, 2)


def test_evaluate_accepts_lists_and_does_not_modify_them():
    board = list(parse_board("XO." ".X." "..."))
    before = list(board)

    first = evaluate(board)
    second = evaluate(board)

    assert first == second
    assert board == before


def test_wrong_board_size_is_rejected():
    with pytest.raises(ValueError):
        evaluate([None] * 8)


def test_win_checker_helpers():
    checker = WinChecker()
    won = parse_board("O.." ".O." "XXO")
    drawn = parse_board("XOX" "XOO" "OXX")

    assert checker.check_winner(won) == Mark.O
    assert checker.get_winning_line(won) == (0, 4, 8)
    assert not checker.check_draw(won)

    assert checker.check_winner(drawn) is None
    assert checker.check_draw(drawn)
    assert checker.evaluate(drawn) is DRAW


def test_update_game_state():
    checker = WinChecker()
    game = GameState(board=list(parse_board("XX." "OO." "...")))

    checker.update_game_state(game)
    assert not game.is_game_over

    game.board[2] = Mark.X
    checker.update_game_state(game)
    assert game.is_game_over
    assert game.winner == Mark.X
    assert game.winning_line == (0, 1, 2)
    assert not game.is_draw
