"""
Errors raised by the TicTacToe game logic.
Everything here is local to a single call; nothing is retried.
"""


class TicTacToeError(Exception):
    """Base class for all game logic errors."""
    pass


class InvalidState(TicTacToeError):
    """
    Raised when a board or move cannot be used.

    Examples: a board with the wrong number of cells, an unknown mark,
    asking for a move on a full board, or playing an occupied cell.
    """
    pass


class InvalidConfiguration(TicTacToeError, ValueError):
    """Raised for an unrecognised difficulty or other bad setting."""
    pass
