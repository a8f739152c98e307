"""
Tests for the game state, board helpers and move validator.
"""

import pytest

from tictactoe_ai.game_state import (
    GameState,
    Mark,
    empty_cells,
    format_board,
    new_board,
    parse_board,
    place,
)
from tictactoe_ai.move_validator import MoveValidator


def test_mark_opposite():
    assert Mark.X.opposite() is Mark.O
    assert Mark.O.opposite() is Mark.X


def test_board_helpers():
    board = new_board()
    assert board == (None,) * 9
    assert empty_cells(board) == list(range(9))

    after = place(board, 4, Mark.X)
    assert after[4] is Mark.X
    assert board[4] is None
    assert empty_cells(after) == [0, 1, 2, 3, 5, 6, 7, 8]


@pytest.mark.parametrize("text", [
    "XO.......",
    "XO_|___|___",
    "XO-\n---\n---",
    "xo.......",
])
def test_parse_board_formats(text):
    assert parse_board(text) == (Mark.X, Mark.O) + (None,) * 7


@pytest.mark.parametrize("text", ["XO", "X" * 10, "XOZ......"])
def test_parse_board_rejects_bad_text(text):
    with pytest.raises(ValueError):
        parse_board(text)


def test_format_board():
    board = parse_board("X.." ".O." "...")
    assert format_board(board) == " X |   |  \n---+---+---\n   | O |  \n---+---+---\n   |   |  "
    assert format_board(board, show_indices=True).splitlines()[0] == " X | 1 | 2"


def test_new_game():
    game = GameState()
    assert game.current_player is Mark.X
    assert game.get_empty_cells() == list(range(9))
    assert not game.is_game_over
    assert game.status_message() == "Current player: X"


def test_make_move_switches_turns():
    game = GameState()

    assert game.make_move(4)
    assert game.board[4] is Mark.X
    assert game.current_player is Mark.O
    assert game.moves[0].mark is Mark.X
    assert game.moves[0].index == 4
    assert game.moves[0].move_number == 0

    assert game.make_move(0)
    assert game.board[0] is Mark.O
    assert game.current_player is Mark.X


def test_make_move_rejects_occupied_and_out_of_range():
    game = GameState()
    game.make_move(4)

    assert not game.make_move(4)
    assert not game.make_move(9)
    assert not game.make_move(-1)
    assert game.current_player is Mark.O
    assert len(game.moves) == 1


def test_game_ends_with_a_win():
    game = GameState()
    for index in (0, 3, 1, 4, 2):
        assert game.make_move(index)

    assert game.is_game_over
    assert game.winner is Mark.X
    assert game.winning_line == (0, 1, 2)
    assert game.status_message() == "Player X wins!"

    # No moves after the game is over
    assert not game.make_move(8)


def test_game_ends_in_a_draw():
    game = GameState()
    # X O X / X O O / O X X
    for index in (0, 1, 2, 4, 3, 5, 7, 6, 8):
        assert game.make_move(index)

    assert game.is_game_over
    assert game.is_draw
    assert game.winner is None
    assert game.status_message() == "It's a draw!"


def test_snapshot_copy_and_reset():
    game = GameState()
    game.make_move(0)

    snapshot = game.snapshot()
    clone = game.copy()
    clone.make_move(1)

    assert snapshot == (Mark.X,) + (None,) * 8
    assert game.board[1] is None
    assert len(game.moves) == 1

    game.reset()
    assert game.board == [None] * 9
    assert game.current_player is Mark.X
    assert game.moves == []


def test_validator():
    validator = MoveValidator()
    game = GameState()
    game.make_move(4)

    assert validator.validate_move(game, 0).is_valid

    result = validator.validate_move(game, 4)
    assert not result.is_valid
    assert "occupied" in result.error_message

    result = validator.validate_move(game, 12)
    assert not result.is_valid
    assert "Invalid position" in result.error_message

    assert not validator.validate_move(game, True).is_valid
    assert validator.get_valid_moves(game) == [0, 1, 2, 3, 5, 6, 7, 8]


def test_validator_after_game_over():
    validator = MoveValidator()
    game = GameState()
    for index in (0, 3, 1, 4, 2):
        game.make_move(index)

    assert validator.get_valid_moves(game) == []
    result = validator.validate_move(game, 8)
    assert not result.is_valid
    assert result.error_message == "Game is already over!"
