"""
Game configuration for TicTacToe.
All the fixed rules and defaults in one place.
"""

from .board import BOARD_SIZE, Cell


class GameConfig:
    """
    Configuration class for game and search settings.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid (not configurable)
    BOARD_SIZE = BOARD_SIZE

    # The player who "moved last" before round 1.
    # CIRCLE here means CROSS plays the first move.
    INITIAL_LAST_MOVER = Cell.CIRCLE

    # ==================== SEARCH SETTINGS ====================
    # A win found at depth d scores WIN_SCORE - d, a loss d - WIN_SCORE
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # Worker processes for scoring the top-level moves.
    # 0 or 1 runs the search in the calling process.
    SEARCH_WORKERS = 0

    # ==================== LOGGING SETTINGS ====================
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    LOG_LEVEL = "WARNING"
    VERBOSE_LOG_LEVEL = "DEBUG"
