"""
Move selection for the AI opponent.
Easy picks a random legal move, Hard plays the minimax move.
"""

from enum import Enum
from typing import Optional, Union

import numpy as np

from .board import Board, Mark
from .errors import InvalidConfiguration, InvalidState
from .search import best_move
from .win_checker import evaluate


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "Easy"      # Random moves
    HARD = "Hard"      # Full minimax

    @classmethod
    def parse(cls, value: Union["Difficulty", str]) -> "Difficulty":
        """
        Accept a Difficulty or its literal ("Easy", "hard", "HARD", ...).

        Raises:
            InvalidConfiguration: for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for difficulty in cls:
                if value.strip().lower() == difficulty.value.lower():
                    return difficulty
        choices = ", ".join(d.value for d in cls)
        raise InvalidConfiguration(f"Unknown difficulty {value!r}. Choose one of: {choices}")


def select_move(
    board,
    difficulty: Union[Difficulty, str],
    rng: Optional[np.random.Generator] = None,
    player: Mark = Mark.O
) -> int:
    """
    Choose the AI's next move.

    Args:
        board: A Board, or any 9-item sequence Board.from_cells() accepts.
        difficulty: Difficulty.EASY / Difficulty.HARD or their literals.
        rng: Random generator for Easy mode. A fresh default_rng() is used
            when none is given; pass a seeded one for repeatable games.
        player: The mark the AI plays.

    Returns:
        Index (0-8) of the chosen cell.

    Raises:
        InvalidConfiguration: unknown difficulty.
        InvalidState: malformed board, finished game, or no empty cell.
    """
    difficulty = Difficulty.parse(difficulty)
    board = Board.from_cells(board)

    empty_cells = board.get_empty_cells()
    if not empty_cells:
        raise InvalidState("No legal moves: the board is full")
    if evaluate(board) is not None:
        raise InvalidState("No legal moves: the game is already over")

    if difficulty == Difficulty.EASY:
        if rng is None:
            rng = np.random.default_rng()
        return empty_cells[int(rng.integers(len(empty_cells)))]

    index, _ = best_move(board, is_maximizing=True, player=player)
    return index
