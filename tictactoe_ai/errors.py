"""Exceptions raised by the tic-tac-toe AI."""


class TicTacToeError(Exception):
    """Base class for all errors in this package."""


class InvalidStateError(TicTacToeError):
    """
    The AI was asked for a move on a board with no empty cell.

    The caller must check for a finished game before asking for a move.
    """

    def __init__(self, message: str = "no legal move"):
        super().__init__(message)
