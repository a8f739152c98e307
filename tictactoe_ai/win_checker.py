"""
Win checker for tic-tac-toe.
Decides whether a board is won (and on which line), drawn, or still open.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple
from dataclasses import dataclass

from .config import AIConfig
from .game_state import Cell, GameState, Mark

Line = Tuple[int, int, int]

# All possible winning lines, checked in this order
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class OutcomeKind(Enum):
    NO_RESULT = "no_result"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    A WIN carries the winning mark and its line; NO_RESULT and DRAW
    carry neither.
    """
    kind: OutcomeKind
    mark: Optional[Mark] = None
    line: Optional[Line] = None

    @classmethod
    def win(cls, mark: Mark, line: Line) -> "Outcome":
        return cls(OutcomeKind.WIN, mark, line)

    @property
    def is_terminal(self) -> bool:
        return self.kind != OutcomeKind.NO_RESULT

    @property
    def winner(self) -> Optional[Mark]:
        return self.mark if self.kind == OutcomeKind.WIN else None


NO_RESULT = Outcome(OutcomeKind.NO_RESULT)
DRAW = Outcome(OutcomeKind.DRAW)


def evaluate(board: Sequence[Cell]) -> Outcome:
    """
    Evaluate a board.

    Lines are checked first, so a full board with a line is a win,
    not a draw. With more than one line (not reachable in legal play)
    the first one in WINNING_LINES is reported.

    Args:
        board: 9 cells in row-major order.

    Returns:
        Outcome.win(mark, line), DRAW or NO_RESULT.

    Raises:
        ValueError: if the board does not have 9 cells.
    """
    if len(board) != AIConfig.CELL_COUNT:
        raise ValueError(f"Board must have {AIConfig.CELL_COUNT} cells, got {len(board)}")

    for line in WINNING_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return Outcome.win(board[a], line)

    if all(cell is not None for cell in board):
        return DRAW
    return NO_RESULT


class WinChecker:
    """
    Checks for win conditions in tic-tac-toe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def evaluate(self, board: Sequence[Cell]) -> Outcome:
        return evaluate(board)

    def check_winner(self, board: Sequence[Cell]) -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        return evaluate(board).winner

    def check_draw(self, board: Sequence[Cell]) -> bool:
        """True if the board is full and nobody has a line."""
        return evaluate(board).kind == OutcomeKind.DRAW

    def get_winning_line(self, board: Sequence[Cell]) -> Optional[Line]:
        """The winning line as a triple of indices, or None."""
        return evaluate(board).line

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        outcome = evaluate(game_state.board)

        game_state.winner = outcome.winner
        game_state.winning_line = outcome.line
        game_state.is_draw = outcome.kind == OutcomeKind.DRAW
        game_state.is_game_over = outcome.is_terminal

        return game_state
