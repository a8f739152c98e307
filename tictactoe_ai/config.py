"""
AI configuration for tic-tac-toe.
Board geometry, scoring constants and defaults for the front end.
"""


class AIConfig:
    """
    Configuration class for the game and the AI.
    The geometry values are fixed for 3x3 tic-tac-toe.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, row-major

    CENTER = 4
    CORNERS = (0, 2, 6, 8)

    # ==================== SEARCH SETTINGS ====================
    # Minimax terminal score: win = WIN_SCORE - depth, loss = depth - WIN_SCORE
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # ==================== FRONT END DEFAULTS ====================
    # The console reads overrides from the environment, see main.py
    DEFAULT_DIFFICULTY = "hard"

    # Pause before showing the computer's move (seconds)
    COMPUTER_DELAY_SEC = 0.5

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL = "WARNING"
    LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
    LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
