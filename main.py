"""
Console front end for the tic-tac-toe AI.

This script ties together:
- Game state (board, turns, result)
- Move validation
- The AI player at the chosen difficulty

Run this script to play tic-tac-toe against the computer, or to watch
the computer play itself with --self-play.
"""

import logging
import os
import sys
import time
from typing import Mapping, Optional, TextIO

from tictactoe_ai.ai_player import AIPlayer, Difficulty
from tictactoe_ai.config import AIConfig
from tictactoe_ai.game_state import GameState, Mark, format_board
from tictactoe_ai.logging_setup import setup_logging
from tictactoe_ai.move_validator import MoveValidator

logger = logging.getLogger(__name__)

DELAY_ENV = "TICTACTOE_COMPUTER_DELAY"
LOG_LEVEL_ENV = "TICTACTOE_LOG_LEVEL"


def env_delay(environ: Optional[Mapping[str, str]] = None) -> float:
    """
    Computer delay from TICTACTOE_COMPUTER_DELAY.

    Falls back to AIConfig.COMPUTER_DELAY_SEC when unset or not a number.
    """
    environ = os.environ if environ is None else environ
    raw = (environ.get(DELAY_ENV) or "").strip()
    if not raw:
        return AIConfig.COMPUTER_DELAY_SEC
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r, not a number", DELAY_ENV, raw)
        return AIConfig.COMPUTER_DELAY_SEC


def env_log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Log level from TICTACTOE_LOG_LEVEL.

    Falls back to AIConfig.LOG_LEVEL when unset or unknown.
    """
    environ = os.environ if environ is None else environ
    raw = (environ.get(LOG_LEVEL_ENV) or "").strip().upper()
    if not raw:
        return AIConfig.LOG_LEVEL
    if raw not in AIConfig.LOG_LEVELS:
        # Logging is not configured yet, the last-resort handler prints this
        logger.warning("Ignoring %s=%r, expected one of: %s", LOG_LEVEL_ENV, raw, ", ".join(AIConfig.LOG_LEVELS))
        return AIConfig.LOG_LEVEL
    return raw


class TicTacToeConsole:
    """
    Console controller for a game of tic-tac-toe.

    Game flow:
    1. The player to move (human or computer) picks a cell
    2. The move is validated and applied to the game state
    3. The game state checks for a winner or a draw
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.HARD,
        computer_first: bool = False,
        self_play: bool = False,
        opponent_difficulty: Optional[Difficulty] = None,
        seed: Optional[int] = None,
        delay: float = AIConfig.COMPUTER_DELAY_SEC,
        input_stream: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
    ):
        """
        Initialize the console game.

        Args:
            difficulty: Level of the computer player.
            computer_first: Let the computer play X.
            self_play: Computer against computer, no human input.
            opponent_difficulty: Level of the second computer in self-play.
            seed: Seed for the random choices of easy/medium.
            delay: Pause before each computer move (seconds).
        """
        self.difficulty = difficulty
        self.opponent_difficulty = opponent_difficulty or difficulty
        self.self_play = self_play
        self.delay = delay
        self.input_stream = input_stream or sys.stdin
        self.output = output or sys.stdout

        self.computer_player = Mark.X if computer_first else Mark.O
        self.human_player = self.computer_player.opposite()

        self.game_state = GameState()
        self.validator = MoveValidator()
        self.ai = AIPlayer(seed)

    def _print(self, text: str = ""):
        print(text, file=self.output)

    def _level_for(self, mark: Mark) -> Difficulty:
        if self.self_play and mark != self.computer_player:
            return self.opponent_difficulty
        return self.difficulty

    def _is_computer(self, mark: Mark) -> bool:
        return self.self_play or mark == self.computer_player

    def start(self) -> Optional[Mark]:
        """
        Play one game.

        Returns:
            The winning mark, or None for a draw or an aborted game.
        """
        if self.self_play:
            self._print(f"Self-play: X ({self._level_for(Mark.X).name.lower()}) "
                        f"vs O ({self._level_for(Mark.O).name.lower()})")
        else:
            self._print(f"You play {self.human_player.value}, "
                        f"computer plays {self.computer_player.value} "
                        f"({self.difficulty.name.lower()})")
        self._print("Cells are numbered 0-8, left to right, top to bottom.")

        while not self.game_state.is_game_over:
            self._print()
            self._print(format_board(self.game_state.board, show_indices=True))
            self._print(self.game_state.status_message())

            if self._is_computer(self.game_state.current_player):
                self._computer_move()
            elif not self._human_move():
                self._print("\nGame quit.")
                return None

        self._show_game_result()
        return self.game_state.winner

    def _computer_move(self):
        """Ask the AI for a move and apply it."""
        mark = self.game_state.current_player
        level = self._level_for(mark)

        if self.delay > 0:
            time.sleep(self.delay)

        move = self.ai.select_move(self.game_state.snapshot(), mark, level)
        self._print(f"Computer ({mark.value}) plays {move}")
        self.game_state.make_move(move)

    def _human_move(self) -> bool:
        """
        Read moves until a legal one is entered.

        Returns:
            False if the player quit (q or end of input).
        """
        while True:
            self.output.write(f"Your move ({self.human_player.value}) [0-8, q to quit]: ")
            self.output.flush()
            line = self.input_stream.readline()
            if not line:
                return False

            text = line.strip().lower()
            if text in ("q", "quit", "exit"):
                return False

            try:
                index = int(text)
            except ValueError:
                self._print("Please type a number 0-8.")
                continue

            result = self.validator.validate_move(self.game_state, index)
            if not result.is_valid:
                self._print(result.error_message)
                continue

            self.game_state.make_move(index)
            return True

    def _show_game_result(self):
        """Show the final game result."""
        self._print()
        self._print(format_board(self.game_state.board))
        self._print()
        self._print(self.game_state.status_message())

        if self.game_state.winning_line is not None:
            cells = ", ".join(str(i) for i in self.game_state.winning_line)
            self._print(f"Winning line: {cells}")

        if not self.self_play and self.game_state.winner is not None:
            if self.game_state.winner == self.human_player:
                self._print("Congratulations! You won!")
            else:
                self._print("Computer wins! Better luck next time!")

        logger.info(
            "Game over after %d moves: %s",
            len(self.game_state.moves), self.game_state.status_message()
        )


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="Tic-tac-toe against the computer")
    parser.add_argument(
        "--difficulty",
        choices=[d.name.lower() for d in Difficulty],
        default=AIConfig.DEFAULT_DIFFICULTY,
        help="Computer level (default: %(default)s)"
    )
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="Computer plays both sides"
    )
    parser.add_argument(
        "--opponent-difficulty",
        choices=[d.name.lower() for d in Difficulty],
        default=None,
        help="Level of the second computer in self-play (default: same as --difficulty)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for easy/medium moves"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help=f"Seconds to wait before each computer move (default: {DELAY_ENV} or {AIConfig.COMPUTER_DELAY_SEC})"
    )
    parser.add_argument(
        "--log-level",
        choices=list(AIConfig.LOG_LEVELS),
        default=None,
        help=f"Logging level (default: {LOG_LEVEL_ENV} or {AIConfig.LOG_LEVEL})"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or env_log_level())
    delay = args.delay if args.delay is not None else env_delay()

    opponent = Difficulty.parse(args.opponent_difficulty) if args.opponent_difficulty else None

    game = TicTacToeConsole(
        difficulty=Difficulty.parse(args.difficulty),
        computer_first=args.computer_first,
        self_play=args.self_play,
        opponent_difficulty=opponent,
        seed=args.seed,
        delay=delay,
    )

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
