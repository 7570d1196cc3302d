"""
AI player for TicTacToe.
Wraps move selection for the game controller.
"""

from typing import Optional, Union

import numpy as np

from .board import Mark
from .config import GameConfig
from .move_selector import Difficulty, select_move
from .search import INFINITY, score


class AIPlayer:
    """
    The computer opponent.

    On Hard it plays optimally - it will win if possible, block the
    opponent if needed, and never lose (at worst, draw). On Easy it plays
    a random empty cell.
    """

    def __init__(
        self,
        player: Mark = Mark.O,
        difficulty: Union[Difficulty, str] = GameConfig.DEFAULT_DIFFICULTY,
        rng: Optional[np.random.Generator] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O).
            difficulty: Easy or Hard.
            rng: Random generator used on Easy.
            config: Game configuration.
        """
        self.config = config or GameConfig()
        self.player = player
        self.difficulty = Difficulty.parse(difficulty)
        self.rng = rng if rng is not None else np.random.default_rng(self.config.RANDOM_SEED)

        # Last decision (for debugging)
        self.last_move: Optional[int] = None
        self.last_score: Optional[int] = None

    def set_difficulty(self, difficulty: Union[Difficulty, str]):
        """Change the difficulty level."""
        self.difficulty = Difficulty.parse(difficulty)

    def get_best_move(self, game_state) -> Optional[int]:
        """
        Get the AI's move for the current position.

        Args:
            game_state: Current game state.

        Returns:
            Cell index of the move, or None if it's not the AI's turn or
            the game is over.

        Both difficulties go through select_move(), so they share the same
        board checks. On Hard with DEBUG_MODE on, the chosen move is scored
        once more for the debug print.
        """
        if game_state.current_player != self.player:
            print(f"Warning: It's not {self.player.value}'s turn!")
            return None

        if game_state.is_game_over:
            return None

        board = game_state.board
        move = select_move(board, self.difficulty, self.rng, self.player)
        self.last_move = move
        self.last_score = None

        if self.config.DEBUG_MODE and self.difficulty == Difficulty.HARD:
            child = board.place(move, self.player)
            self.last_score = score(child, 1, -INFINITY, INFINITY, False, self.player)

        if self.config.DEBUG_MODE:
            print(f"AI ({self.difficulty.value}) best move: {move} (score: {self.last_score})")

        return move

    def get_move_suggestion(self, game_state) -> str:
        """
        Get a human-readable move suggestion.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(game_state)

        if move is None:
            return "No moves available!"

        row, col = divmod(move, GameConfig.BOARD_SIZE)
        return f"Place {self.player.value} at cell {move} (row {row}, col {col})"
