"""
TicTacToe
=========
Play TicTacToe against the computer.

The game logic handles the board, win/draw detection, and an AI opponent
with two difficulty levels: Easy (random moves) and Hard (minimax with
alpha-beta pruning, never loses).
"""

__version__ = "1.0.0"

from .errors import TicTacToeError, InvalidState, InvalidConfiguration
from .board import Board, Mark, WIN_LINES, BOARD_SIZE, CELL_COUNT
from .config import GameConfig
from .win_checker import Win, Draw, DRAW, evaluate, WinChecker
from .search import score, best_move
from .move_selector import Difficulty, select_move
from .move_validator import MoveValidator, ValidationResult
from .game_state import GameState, Move
from .ai_player import AIPlayer
