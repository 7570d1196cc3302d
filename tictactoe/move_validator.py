"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .board import Board, BOARD_SIZE, CELL_COUNT


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Index must be 0-8
    3. Can only place on empty cells
    """

    def validate_move(self, game_state, index) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Must be 0-{CELL_COUNT - 1}."
            )

        # Check if cell is empty
        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        # All checks passed!
        return ValidationResult(is_valid=True)

    def parse_move(self, text: str) -> Optional[int]:
        """
        Parse player input into a cell index.

        Accepts a single index ("4") or a row and column ("1 1" or "1,1").

        Returns:
            The cell index, or None if the text can't be understood.
        """
        parts = text.replace(",", " ").split()
        try:
            numbers = [int(p) for p in parts]
        except ValueError:
            return None

        if len(numbers) == 1:
            return numbers[0]
        if len(numbers) == 2:
            row, col = numbers
            if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
                return Board.to_index(row, col)
        return None

    def get_valid_moves(self, game_state) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of valid cell indices.
        """
        if game_state.is_game_over:
            return []
        return game_state.board.get_empty_cells()
