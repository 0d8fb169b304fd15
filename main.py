"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.
Either way the moves come from the same engine:
- Outcome evaluation (win / draw detection)
- Move engine (easy, medium and hard opponents)
"""

import sys
from typing import Optional

from engine.board import format_board
from engine.game_session import GameSession, TurnState
from engine.move_engine import Difficulty
from display.config import DisplayConfig


class ConsoleGame:
    """
    Plays TicTacToe in the terminal.

    Game flow:
    1. Human (X) types a cell number 1-9
    2. Computer (O) replies
    3. Repeat until someone wins or it's a draw
    """

    def __init__(self, difficulty: Difficulty, verbose: bool = False):
        """
        Initialize the console game.

        Args:
            difficulty: Opponent difficulty.
            verbose: Print engine search details.
        """
        self.session = GameSession(difficulty, verbose=verbose)

        print("\n" + "="*60)
        print("   TicTacToe - Ready!")
        print(f"   Difficulty: {difficulty.value.upper()}")
        print("   You play X, the computer plays O")
        print("="*60 + "\n")

    def start(self):
        """Run games until the player quits."""
        print("Type a cell number (1-9), 'r' to restart, 'q' to quit\n")

        while True:
            print(format_board(self.session.board))

            if self.session.is_game_over:
                self._show_game_result()
                answer = input("Play again? [y/n] ").strip().lower()
                if answer != "y":
                    return
                self._reset_game()
                continue

            command = input(f"{self.session.status_message} > ").strip().lower()

            if command == "q":
                print("\nGame quit by user.")
                return
            if command == "r":
                self._reset_game()
                continue

            index = self._parse_cell(command)
            if index is None:
                print("Please type a number from 1 to 9.")
                continue

            self._play(index)

    def _parse_cell(self, command: str) -> Optional[int]:
        if not command.isdigit():
            return None
        number = int(command)
        if not 1 <= number <= 9:
            return None
        return number - 1

    def _play(self, index: int):
        result = self.session.play_player_move(index)
        if not result.is_valid:
            print(f"WARNING: {result.error_message}")
            return

        if self.session.state == TurnState.OPPONENT_TURN:
            move = self.session.play_opponent_move()
            if move is None:
                print("ERROR: Opponent could not find a move!")
            else:
                print(f">>> Computer plays {move + 1}")

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        state = self.session.state
        if state == TurnState.PLAYER_WON:
            print("\n🎉 Congratulations! You won!")
        elif state == TurnState.OPPONENT_WON:
            print("\n🤖 Computer wins! Better luck next time!")
        else:
            print("\n🤝 It's a draw! Good game!")

        scores = self.session.scores
        print(f"\nWins: {scores.wins}  Losses: {scores.losses}  Draws: {scores.draws}")
        print("\n" + "="*60)

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.session.reset()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=DisplayConfig.DEFAULT_DIFFICULTY,
        help="Opponent difficulty (default: %(default)s)"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print engine search details"
    )

    args = parser.parse_args()
    difficulty = Difficulty.from_name(args.difficulty)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(difficulty=difficulty, verbose=args.verbose)
        ui.run()
        return 0

    game = ConsoleGame(difficulty, verbose=args.verbose)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
