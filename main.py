"""
Main orchestration script for TicTacToe.

This script ties together:
- Logic (game state, move validation, win checking)
- AI (Easy random moves or Hard minimax)
- Console input and output

Run this script to play TicTacToe against the computer!
"""

import time
from typing import Callable, Optional

import numpy as np

from tictactoe.config import GameConfig
from tictactoe.errors import InvalidConfiguration, InvalidState
from tictactoe.board import Mark
from tictactoe.game_state import GameState
from tictactoe.move_selector import Difficulty
from tictactoe.move_validator import MoveValidator
from tictactoe.ai_player import AIPlayer


class TicTacToeGame:
    """
    Main controller for a console game of TicTacToe.

    Game flow:
    1. X moves first (human on the first game, then alternating)
    2. Human types a cell index, AI replies after a short pause
    3. Repeat until someone wins or it's a draw
    4. Restarting swaps who goes first
    """

    def __init__(
        self,
        difficulty="Hard",
        config: Optional[GameConfig] = None,
        input_func: Optional[Callable[[str], str]] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize the game.

        Args:
            difficulty: "Easy" or "Hard".
            config: Game configuration.
            input_func: Where player input comes from (input() by default).
            rng: Random generator for the Easy AI.
        """
        self.config = config or GameConfig()
        self.input_func = input_func or input

        # X always moves first
        human_mark = Mark.X if self.config.HUMAN_FIRST else Mark.O
        self.game_state = GameState(human_mark=human_mark)
        self.validator = MoveValidator()
        self.ai = AIPlayer(
            self.game_state.ai_mark,
            difficulty,
            rng=rng,
            config=self.config
        )

        self.is_running = False
        self.games_played = 0

        print("\n" + "="*60)
        print("   TicTacToe - Ready!")
        print(f"   Difficulty: {self.ai.difficulty.value}")
        print(f"   You play: {self.game_state.human_mark.value}")
        print(f"   AI plays: {self.game_state.ai_mark.value}")
        print("="*60 + "\n")

    def start(self):
        """Start playing. Returns when the player quits."""
        print("Type a cell number (0-8) or 'row col', 'h' for a hint,")
        print("'d easy' or 'd hard' to change difficulty, 'r' to restart, 'q' to quit.\n")

        self.is_running = True
        while self.is_running:
            self._game_loop()
            if self.is_running:
                self._show_game_result()
                self._ask_play_again()

    def _game_loop(self):
        """Play one game."""
        self.game_state.print_board()

        while self.is_running and not self.game_state.is_game_over:
            if self.game_state.is_human_turn:
                self._human_move()
            else:
                self._ai_move()

    def _human_move(self):
        """Read and apply one human move."""
        try:
            text = self.input_func(f"Your move ({self.game_state.human_mark.value}): ")
        except EOFError:
            self.is_running = False
            return

        text = text.strip().lower()

        if text == 'q':
            print("\nGame quit by user.")
            self.is_running = False
            return
        if text == 'r':
            self._reset_game()
            self.game_state.print_board()
            return
        if text == 'h':
            self._show_hint()
            return
        if text.startswith('d '):
            self._change_difficulty(text[2:])
            return

        index = self.validator.parse_move(text)
        if index is None:
            print("Please type a number 0-8, or a row and column like '1 2'.")
            return

        result = self.validator.validate_move(self.game_state, index)
        if not result.is_valid:
            print(f"Illegal move: {result.error_message}")
            return

        print(f"\n>>> You placed {self.game_state.human_mark.value} at {index}")
        self.game_state.make_move(index)
        self.game_state.print_board()

    def _ai_move(self):
        """Execute the AI's move."""
        print("\n>>> AI is thinking...")
        if self.config.AI_MOVE_DELAY > 0:
            time.sleep(self.config.AI_MOVE_DELAY)

        move = self.ai.get_best_move(self.game_state)

        if move is None:
            print("ERROR: AI could not find a move!")
            self.is_running = False
            return

        print(f">>> AI placed {self.ai.player.value} at {move}")
        self.game_state.make_move(move)
        self.game_state.print_board()

    def _show_hint(self):
        """Suggest the best move for the human."""
        helper = AIPlayer(self.game_state.human_mark, Difficulty.HARD, config=self.config)
        print(f"Hint: {helper.get_move_suggestion(self.game_state)}")

    def _change_difficulty(self, value: str):
        """Switch the AI between Easy and Hard mid-game."""
        try:
            self.ai.set_difficulty(value)
        except InvalidConfiguration as e:
            print(f"Warning: {e}")
            return
        print(f"Difficulty set to: {self.ai.difficulty.value}")

    def _show_game_result(self):
        """Show the final game result."""
        self.games_played += 1
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        winner = self.game_state.winner
        if winner is None:
            print("\nIt's a draw! Good game!")
        elif winner == self.game_state.human_mark:
            print("\nCongratulations! You won!")
        else:
            print("\nAI wins! Better luck next time!")

        print("\n" + "="*60)

    def _ask_play_again(self):
        """Offer another game."""
        try:
            answer = self.input_func("Play again? (y/n): ")
        except EOFError:
            answer = "n"

        if answer.strip().lower() in ("y", "yes", "r"):
            self._reset_game()
        else:
            self.is_running = False

    def _reset_game(self):
        """Reset the game for a new round, swapping who goes first."""
        print("\nResetting game...")
        self.game_state.reset(swap_first=True)
        self.ai.player = self.game_state.ai_mark
        first = "You" if self.game_state.is_human_turn else "AI"
        print(f"New game! You play {self.game_state.human_mark.value}. {first} first.")


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--difficulty",
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="AI difficulty: Easy or Hard (default: %(default)s)"
    )
    parser.add_argument(
        "--robot-first",
        action="store_true",
        help="Let the AI play first (as X)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the Easy AI"
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Don't pause before AI moves"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print AI scores"
    )

    args = parser.parse_args(argv)

    config = GameConfig()
    config.HUMAN_FIRST = not args.robot_first
    config.RANDOM_SEED = args.seed
    config.DEBUG_MODE = args.debug
    if args.no_delay:
        config.AI_MOVE_DELAY = 0.0

    try:
        game = TicTacToeGame(difficulty=args.difficulty, config=config)
    except InvalidConfiguration as e:
        parser.error(str(e))

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    except InvalidState as e:
        print(f"ERROR: {e}")
        return 1
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
