"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and who plays which mark.
"""

from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .board import Board, Mark
from .errors import InvalidState
from .move_validator import MoveValidator
from .win_checker import WinChecker


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: Mark              # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Which move this is (0-8)


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The board
    - Current player (X always moves first)
    - Which mark the human plays
    - Move history
    - Game status (ongoing, won, draw)
    """

    board: Board = field(default_factory=Board.empty)

    # Current player's turn
    current_player: Mark = Mark.X

    # The human's mark; the AI plays the other one
    human_mark: Mark = Mark.X

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Mark] = None
    winning_line: Optional[Tuple[int, int, int]] = None
    is_draw: bool = False
    is_game_over: bool = False

    @property
    def ai_mark(self) -> Mark:
        return self.human_mark.opposite()

    @property
    def is_human_turn(self) -> bool:
        return self.current_player == self.human_mark

    def make_move(self, index: int) -> Move:
        """
        Place the current player's mark at `index`.

        Updates the winner/draw status and switches turns if the game
        goes on.

        Args:
            index: Cell index (0-8).

        Returns:
            The recorded Move.

        Raises:
            InvalidState: if the move breaks the rules.
        """
        result = MoveValidator().validate_move(self, index)
        if not result.is_valid:
            raise InvalidState(result.error_message)

        self.board = self.board.place(index, self.current_player)

        move = Move(
            mark=self.current_player,
            index=index,
            move_number=len(self.moves)
        )
        self.moves.append(move)

        WinChecker().update_game_state(self)

        if not self.is_game_over:
            self.current_player = self.current_player.opposite()

        return move

    def reset(self, swap_first: bool = True) -> "GameState":
        """
        Start a new game.

        Args:
            swap_first: If True, whoever did not open this game opens the
                next one. X always moves first, so the human switches marks.

        Returns:
            self, cleared.
        """
        if swap_first:
            self.human_mark = self.human_mark.opposite()

        self.board = Board.empty()
        self.current_player = Mark.X
        self.moves = []
        self.winner = None
        self.winning_line = None
        self.is_draw = False
        self.is_game_over = False
        return self

    def copy(self) -> "GameState":
        """Create a copy of the game state."""
        return GameState(
            board=self.board,
            current_player=self.current_player,
            human_mark=self.human_mark,
            moves=list(self.moves),
            winner=self.winner,
            winning_line=self.winning_line,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )

    def result_message(self) -> str:
        """Short message describing the result, from the human's side."""
        if not self.is_game_over:
            return f"Turn: {self.current_player.value}"
        if self.is_draw:
            return "It's a Draw!"
        if self.winner == self.human_mark:
            return "You Win!"
        return "You Lose!"

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.board.render(self.winning_line or ()))

        # Print game info
        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.value} WINS! {self.result_message()}")
            else:
                print(f"\n{self.result_message()}")
        else:
            who = "you" if self.is_human_turn else "AI"
            print(f"\nCurrent turn: {self.current_player.value} ({who})")
