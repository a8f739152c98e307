"""
Game state management for tic-tac-toe.
Defines the marks, the board helpers and the turn-tracking record
used by whoever drives the game (console, UI, tests).
"""

import logging
from enum import Enum
from typing import Optional, List, Sequence, Tuple
from dataclasses import dataclass, field

from .config import AIConfig

logger = logging.getLogger(__name__)


class Mark(Enum):
    """The two player marks."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X


# A board is 9 cells in row-major order, None means empty
Cell = Optional[Mark]
Board = Tuple[Cell, ...]

EMPTY_CHARS = ".-_ "


def new_board() -> Board:
    """Return an empty board."""
    return (None,) * AIConfig.CELL_COUNT


def empty_cells(board: Sequence[Cell]) -> List[int]:
    """Indices of all empty cells, ascending."""
    return [i for i, cell in enumerate(board) if cell is None]


def place(board: Sequence[Cell], index: int, mark: Mark) -> Board:
    """Return a new board with `mark` placed at `index`. The input is untouched."""
    cells = list(board)
    cells[index] = mark
    return tuple(cells)


def parse_board(text: str) -> Board:
    """
    Build a board from text.

    Accepts X/O for marks and any of ". - _ space" for empty cells.
    Row separators ("|", newlines) are ignored, so both "XX.......",
    "XX_|___|___" and a three-line grid work.

    Raises:
        ValueError: if the text does not describe exactly 9 cells.
    """
    cells: List[Cell] = []
    rows = [row for row in text.splitlines() if row] or [text]
    for row in rows:
        for ch in row.replace("|", ""):
            upper = ch.upper()
            if upper in ("X", "O"):
                cells.append(Mark(upper))
            elif ch in EMPTY_CHARS:
                cells.append(None)
            else:
                raise ValueError(f"Invalid board character {ch!r}")

    if len(cells) != AIConfig.CELL_COUNT:
        raise ValueError(f"Board must have {AIConfig.CELL_COUNT} cells, got {len(cells)}")
    return tuple(cells)


def format_board(board: Sequence[Cell], show_indices: bool = False) -> str:
    """
    Render a board as a 3-line grid.

    Args:
        board: The board to render.
        show_indices: Show the cell index in empty cells instead of a blank.
    """
    size = AIConfig.BOARD_SIZE
    lines = []
    for row in range(size):
        parts = []
        for col in range(size):
            index = row * size + col
            cell = board[index]
            if cell is not None:
                parts.append(cell.value)
            else:
                parts.append(str(index) if show_indices else " ")
        lines.append(" " + " | ".join(parts))
    return "\n---+---+---\n".join(lines)


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: Mark          # Who made the move
    index: int          # Cell (0-8)
    move_number: int    # Which move this is (0-8)


@dataclass
class GameState:
    """
    The complete state of a tic-tac-toe game.

    Tracks:
    - The board (which mark is where)
    - Current player
    - Move history
    - Game status (ongoing, won, draw) and the winning line
    """

    board: List[Cell] = field(default_factory=lambda: list(new_board()))

    # Current player's turn, X always opens
    current_player: Mark = Mark.X

    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Mark] = None
    winning_line: Optional[Tuple[int, int, int]] = None
    is_draw: bool = False
    is_game_over: bool = False

    def snapshot(self) -> Board:
        """Immutable copy of the board for handing to the AI."""
        return tuple(self.board)

    def get_empty_cells(self) -> List[int]:
        """Get all empty cell indices."""
        return empty_cells(self.board)

    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark at `index`.

        The move is validated first, then the turn passes to the other
        player and the result is refreshed.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was made, False if it was rejected.
        """
        # Local imports, both modules depend on this one
        from .move_validator import MoveValidator
        from .win_checker import WinChecker

        result = MoveValidator().validate_move(self, index)
        if not result.is_valid:
            logger.warning("Rejected move at %s: %s", index, result.error_message)
            return False

        self.board[index] = self.current_player
        self.moves.append(Move(
            mark=self.current_player,
            index=index,
            move_number=len(self.moves),
        ))
        logger.debug("%s played %d", self.current_player.value, index)

        self.current_player = self.current_player.opposite()
        WinChecker().update_game_state(self)
        return True

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            moves=list(self.moves),
            winner=self.winner,
            winning_line=self.winning_line,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over,
        )

    def reset(self):
        """Start a new game."""
        self.board = list(new_board())
        self.current_player = Mark.X
        self.moves = []
        self.winner = None
        self.winning_line = None
        self.is_draw = False
        self.is_game_over = False

    def status_message(self) -> str:
        if self.winner is not None:
            return f"Player {self.winner.value} wins!"
        if self.is_draw:
            return "It's a draw!"
        return f"Current player: {self.current_player.value}"

    def __str__(self) -> str:
        return format_board(self.board)
