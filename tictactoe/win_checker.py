"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple, Union
from dataclasses import dataclass

from .board import Board, Mark, WIN_LINES


@dataclass(frozen=True)
class Win:
    """A finished game with a winner."""
    mark: Mark                      # Who won
    line: Tuple[int, int, int]      # The winning cells, in catalogue order


@dataclass(frozen=True)
class Draw:
    """A finished game with a full board and no winner."""
    pass


DRAW = Draw()

# None means the game goes on
TerminalResult = Optional[Union[Win, Draw]]


def evaluate(board) -> TerminalResult:
    """
    Work out whether the game on `board` is over.

    Lines are checked rows first, then columns, then diagonals, and the
    first complete line wins. Only a malformed board can hold two complete
    lines of different marks, and this order decides which one is reported.

    Args:
        board: A Board, or any 9-item sequence Board.from_cells() accepts.

    Returns:
        Win(mark, line), DRAW, or None if the game is still going.

    Raises:
        InvalidState: if the board is malformed.
    """
    cells = Board.from_cells(board).cells

    for line in WIN_LINES:
        a, b, c = line
        mark = cells[a]
        if mark is not None and mark == cells[b] == cells[c]:
            return Win(mark, line)

    if None in cells:
        return None

    return DRAW


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WIN_LINES

    def check_winner(self, board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        result = evaluate(board)
        return result.mark if isinstance(result, Win) else None

    def check_draw(self, board) -> bool:
        """True if the board is full and nobody has won."""
        return isinstance(evaluate(board), Draw)

    def get_winning_line(self, board) -> Optional[Tuple[int, int, int]]:
        """The winning line as a triple of indices, or None."""
        result = evaluate(board)
        return result.line if isinstance(result, Win) else None

    def update_game_state(self, game_state):
        """
        Update a GameState with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        result = evaluate(game_state.board)

        if isinstance(result, Win):
            game_state.winner = result.mark
            game_state.winning_line = result.line
            game_state.is_game_over = True
        elif isinstance(result, Draw):
            game_state.is_draw = True
            game_state.is_game_over = True

        return game_state
