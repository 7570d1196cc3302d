"""
Game configuration for TicTacToe.
All the settings for players, the AI opponent and console output.
"""

from .board import BOARD_SIZE, CELL_COUNT


class GameConfig:
    """
    Configuration class for game settings.
    Override on an instance (or via command line flags in main.py).
    """

    # ==================== BOARD SETTINGS ====================
    # Fixed 3x3 board, 3 in a row wins
    BOARD_SIZE = BOARD_SIZE
    CELL_COUNT = CELL_COUNT

    # ==================== PLAYER SETTINGS ====================
    # X always moves first. If the human goes first they play X, otherwise O.
    # After every restart the first mover swaps.
    HUMAN_FIRST = True

    # ==================== AI SETTINGS ====================
    # "Easy" (random legal move) or "Hard" (full minimax)
    DEFAULT_DIFFICULTY = "Hard"

    # Base score of a win; the search subtracts the depth so faster wins
    # score higher and slower losses score less negative
    WIN_SCORE = 10

    # Pause before the AI moves so it looks like it is "thinking" (seconds)
    AI_MOVE_DELAY = 0.3

    # Seed for the Easy mode random generator (None = fresh entropy)
    RANDOM_SEED = None

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
