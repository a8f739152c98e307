"""
AI player for tic-tac-toe.
Chooses a move at one of three difficulty levels: random (easy),
rule based (medium) or full minimax search (hard).
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Sequence, Union

import numpy as np

from .config import AIConfig
from .errors import InvalidStateError
from .game_state import Board, Cell, Mark, empty_cells, place
from .win_checker import OutcomeKind, WinChecker, evaluate

logger = logging.getLogger(__name__)

# Anything numpy.random.default_rng accepts: None, a seed, or a Generator
RandomSource = Union[None, int, np.random.Generator]


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = 1      # Random moves
    MEDIUM = 2    # Win, block, center, corner
    HARD = 3      # Full minimax

    @classmethod
    def parse(cls, value: Union["Difficulty", str]) -> "Difficulty":
        """
        Accept a Difficulty or its name in any case ("hard", "Hard").

        Raises:
            ValueError: for an unknown name.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            names = ", ".join(d.name.lower() for d in cls)
            raise ValueError(f"Unknown difficulty {value!r}, expected one of: {names}") from None


class AIPlayer:
    """
    An AI that picks tic-tac-toe moves.

    The player holds no game state, only a random generator for the
    easy and medium levels. The same instance can be asked for moves
    on any board, for either mark.

    At HARD it plays optimally: it wins if possible, blocks the
    opponent if needed, and never loses (at worst, draw).
    """

    def __init__(self, rng: RandomSource = None):
        """
        Initialize the AI player.

        Args:
            rng: Seed or numpy Generator used by the random choices.
                 Pass a fixed seed to make easy/medium reproducible.
        """
        self.rng = np.random.default_rng(rng)
        self.win_checker = WinChecker()

        # Positions visited by the last HARD search (for debugging)
        self.positions_evaluated = 0

        self._strategies: Dict[Difficulty, Callable[[Board, Mark, List[int]], int]] = {
            Difficulty.EASY: self._easy_move,
            Difficulty.MEDIUM: self._medium_move,
            Difficulty.HARD: self._hard_move,
        }

    def select_move(
        self,
        board: Sequence[Cell],
        mark: Union[Mark, str],
        difficulty: Union[Difficulty, str] = Difficulty.HARD
    ) -> int:
        """
        Choose a move for `mark` on `board`.

        The board is copied, never modified.

        Args:
            board: 9 cells in row-major order.
            mark: The mark to move.
            difficulty: Which strategy to use.

        Returns:
            Index (0-8) of an empty cell.

        Raises:
            InvalidStateError: if the board has no empty cell.
        """
        board = tuple(board)
        if len(board) != AIConfig.CELL_COUNT:
            raise ValueError(f"Board must have {AIConfig.CELL_COUNT} cells, got {len(board)}")

        mark = Mark(mark)
        difficulty = Difficulty.parse(difficulty)

        legal_moves = empty_cells(board)
        if not legal_moves:
            raise InvalidStateError("no legal move")

        move = self._strategies[difficulty](board, mark, legal_moves)

        logger.debug("%s (%s) plays %d", mark.value, difficulty.name.lower(), move)
        return move

    def _random_choice(self, cells: List[int]) -> int:
        return cells[int(self.rng.integers(len(cells)))]

    def _easy_move(self, board: Board, mark: Mark, legal_moves: List[int]) -> int:
        """Any empty cell, uniformly at random."""
        return self._random_choice(legal_moves)

    def _medium_move(self, board: Board, mark: Mark, legal_moves: List[int]) -> int:
        """
        First rule that applies:
        1. Win now
        2. Block the opponent's win
        3. Take the center
        4. Take a random free corner
        5. Take any random free cell
        """
        # All wins are checked before any block
        for move in legal_moves:
            if self.win_checker.check_winner(place(board, move, mark)) == mark:
                return move

        opponent = mark.opposite()
        for move in legal_moves:
            if self.win_checker.check_winner(place(board, move, opponent)) == opponent:
                return move

        if AIConfig.CENTER in legal_moves:
            return AIConfig.CENTER

        corners = [cell for cell in AIConfig.CORNERS if cell in legal_moves]
        if corners:
            return self._random_choice(corners)

        return self._random_choice(legal_moves)

    def _hard_move(self, board: Board, mark: Mark, legal_moves: List[int]) -> int:
        """
        Best move by minimax. Ties go to the lowest index.
        """
        self.positions_evaluated = 0

        best_score = float('-inf')
        best_move = legal_moves[0]

        for move in legal_moves:
            # Root children are depth 0, the opponent replies next
            score = self._minimax(
                place(board, move, mark),
                depth=0,
                is_maximizing=False,
                mark=mark,
                alpha=best_score,
            )

            if score > best_score:
                best_score = score
                best_move = move

            # Winning right now cannot be beaten
            if best_score >= AIConfig.WIN_SCORE:
                break

        logger.debug(
            "AI evaluated %d positions. Best move: %d (score: %s)",
            self.positions_evaluated, best_move, best_score
        )
        return best_move

    def _minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        mark: Mark,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Position to score.
            depth: Plies placed since the root move (0 for the root's children).
            is_maximizing: True if `mark` is to move.
            mark: The searching player; scores are from its point of view.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            WIN_SCORE - depth for a win, depth - WIN_SCORE for a loss, 0 for a draw.
        """
        self.positions_evaluated += 1

        outcome = evaluate(board)

        if outcome.kind == OutcomeKind.WIN:
            if outcome.mark == mark:
                return AIConfig.WIN_SCORE - depth  # Prefer faster wins
            return depth - AIConfig.WIN_SCORE      # Prefer slower losses
        if outcome.kind == OutcomeKind.DRAW:
            return AIConfig.DRAW_SCORE

        if is_maximizing:
            max_score = float('-inf')
            for move in empty_cells(board):
                score = self._minimax(
                    place(board, move, mark), depth + 1, False, mark, alpha, beta
                )
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            opponent = mark.opposite()
            min_score = float('inf')
            for move in empty_cells(board):
                score = self._minimax(
                    place(board, move, opponent), depth + 1, True, mark, alpha, beta
                )
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score


def select_move(
    board: Sequence[Cell],
    mark: Union[Mark, str],
    difficulty: Union[Difficulty, str] = Difficulty.HARD,
    rng: RandomSource = None
) -> int:
    """Choose a move with a throwaway AIPlayer. See AIPlayer.select_move."""
    return AIPlayer(rng).select_move(board, mark, difficulty)


def score_moves(board: Sequence[Cell], mark: Union[Mark, str]) -> Dict[int, float]:
    """
    Exact minimax score of every legal move (full search window per move).

    Useful for checking the search; HARD picks the first move with the
    highest score.

    Raises:
        InvalidStateError: if the board has no empty cell.
    """
    board = tuple(board)
    mark = Mark(mark)
    legal_moves = empty_cells(board)
    if not legal_moves:
        raise InvalidStateError("no legal move")

    ai = AIPlayer()
    return {
        move: ai._minimax(place(board, move, mark), depth=0, is_maximizing=False, mark=mark)
        for move in legal_moves
    }
