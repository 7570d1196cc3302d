"""
Minimax search with alpha-beta pruning for TicTacToe.

Scores are from the point of view of `player` (the maximizing mark):
a win scores WIN_SCORE - depth, a loss -(WIN_SCORE - depth), a draw 0.
Subtracting the depth makes the search prefer the quickest win and the
slowest loss.
"""

from typing import Tuple

from .board import Board, Mark
from .config import GameConfig
from .errors import InvalidState
from .win_checker import Win, evaluate

INFINITY = float('inf')


def score(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    is_maximizing: bool,
    player: Mark = Mark.O
) -> int:
    """
    Score a position with minimax and alpha-beta pruning.

    Args:
        board: Position to score.
        depth: Plies already played since the root.
        alpha: Best score the maximizer is already assured of.
        beta: Best score the minimizer is already assured of.
        is_maximizing: True if `player` is the one to move.
        player: The maximizing mark.

    Returns:
        The score of the position for `player`.
    """
    result = evaluate(board)
    if result is not None:
        if isinstance(result, Win):
            if result.mark == player:
                return GameConfig.WIN_SCORE - depth
            return -(GameConfig.WIN_SCORE - depth)
        return 0  # Draw

    mover = player if is_maximizing else player.opposite()

    if is_maximizing:
        max_score = -INFINITY
        for index in board.get_empty_cells():
            child = board.place(index, mover)
            value = score(child, depth + 1, alpha, beta, False, player)
            max_score = max(max_score, value)
            alpha = max(alpha, value)
            if beta <= alpha:
                break  # Prune
        return max_score
    else:
        min_score = INFINITY
        for index in board.get_empty_cells():
            child = board.place(index, mover)
            value = score(child, depth + 1, alpha, beta, True, player)
            min_score = min(min_score, value)
            beta = min(beta, value)
            if beta <= alpha:
                break  # Prune
        return min_score


def best_move(
    board,
    is_maximizing: bool = True,
    player: Mark = Mark.O
) -> Tuple[int, int]:
    """
    Find the best move on `board`.

    Every empty cell is tried in ascending order and scored with score().
    Ties keep the lowest index, so the same board always gives the same
    move.

    Args:
        board: A Board, or any 9-item sequence Board.from_cells() accepts.
        is_maximizing: True to pick the move that is best for `player`,
            False to pick the move that is worst for it (the opponent's
            best reply).
        player: The maximizing mark.

    Returns:
        (index, score) of the chosen move.

    Raises:
        InvalidState: if the board is malformed, already decided, or full.
    """
    board = Board.from_cells(board)

    if evaluate(board) is not None:
        raise InvalidState("Game is already over, there is no move to search")

    mover = player if is_maximizing else player.opposite()
    alpha, beta = -INFINITY, INFINITY
    best_index = None
    best_score = -INFINITY if is_maximizing else INFINITY

    for index in board.get_empty_cells():
        child = board.place(index, mover)
        value = score(child, 1, alpha, beta, not is_maximizing, player)

        if is_maximizing:
            if value > best_score:
                best_score, best_index = value, index
            alpha = max(alpha, best_score)
        else:
            if value < best_score:
                best_score, best_index = value, index
            beta = min(beta, best_score)

    return best_index, best_score
