"""
Game configuration for Tic-rng-toe.
Board geometry, turn rules, and console symbols.
"""


class GameConfig:
    """
    Configuration class for game settings.
    The board is always 3x3; these values are shared, not tunable.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # Cell identifiers the player types in
    MIN_CELL = 1
    MAX_CELL = CELL_COUNT

    # ==================== TURN RULES ====================
    # A side needs 3 marks before a win is possible
    MIN_TURNS_FOR_WIN = 3

    # ==================== CONSOLE SETTINGS ====================
    PLAYER_MARK = "X"
    OPPONENT_MARK = "O"
    EMPTY_MARK = " "

    ROW_SEPARATOR = "-----------"

    # ==================== LOGGING SETTINGS ====================
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
