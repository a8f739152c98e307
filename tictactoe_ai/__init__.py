"""
Tic-tac-toe AI
==============
Move selection for an automated tic-tac-toe player at three
difficulty levels, plus the win/draw checker it relies on.

The caller owns the board and the turn order; it asks `evaluate`
after each move and `select_move` when the computer is to play.
"""

from .errors import TicTacToeError, InvalidStateError
from .game_state import GameState, Mark, Move, new_board, empty_cells, parse_board, format_board
from .win_checker import WinChecker, Outcome, OutcomeKind, WINNING_LINES, NO_RESULT, DRAW, evaluate
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, Difficulty, select_move

__version__ = "1.0.0"
