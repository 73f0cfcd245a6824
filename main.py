"""
Main entry point for TicTacToe.

Two ways to play:
- Tkinter window (default), with the theme picker
- Console mode (--no-ui): type 1-9 to mark a cell

Run this script to play TicTacToe!
"""

from typing import Callable, Optional

from logic.game_state import GameState, new_game, reset, format_board
from logic.move_validator import apply_move
from logic.win_checker import WinChecker, status_text

from theme.config import ThemeConfig
from theme.preferences import PreferenceStore
from theme.selector import save_theme


class ConsoleGame:
    """
    Console version of the game.

    Game flow:
    1. Board is printed with empty cells numbered 1-9
    2. Current player types a number
    3. Repeat until someone wins or it's a draw
    4. "r" restarts, "q" quits
    """

    def __init__(self, input_func: Optional[Callable[[str], str]] = None):
        """
        Initialize the console game.

        Args:
            input_func: Reads one line of player input (input() by default).
        """
        self.input_func = input_func or input
        self.game_state: GameState = new_game()
        self.win_checker = WinChecker()

    def handle_command(self, text: str) -> bool:
        """
        Handle one line of player input.

        Args:
            text: What the player typed.

        Returns:
            False if the player wants to quit, True otherwise.
        """
        text = text.strip().lower()

        if text in ("q", "quit"):
            return False

        if text in ("r", "restart"):
            print("Resetting game...")
            self.game_state = reset()
            return True

        try:
            index = int(text) - 1
        except ValueError:
            print("Please type a number 1-9, 'r' to restart or 'q' to quit.")
            return True

        new_state = apply_move(self.game_state, index)
        if new_state is None:
            print("That cell can't be played. Try again.")
            return True

        self.game_state = new_state
        return True

    def play(self):
        """Run the console game loop until the player quits."""
        while True:
            result = self.win_checker.outcome(self.game_state.board)

            print()
            print(format_board(self.game_state.board))
            print(f"\n{status_text(self.game_state, result)}")

            if result.is_terminal:
                prompt = "Type 'r' to play again or 'q' to quit: "
            else:
                prompt = f"Play {self.game_state.turn.value} at [1-9]: "

            try:
                text = self.input_func(prompt)
            except EOFError:
                break

            if not self.handle_command(text):
                break


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the console instead of a window"
    )
    parser.add_argument(
        "--theme",
        choices=ThemeConfig.THEMES,
        help="Use this theme (and remember it)"
    )
    parser.add_argument(
        "--prefs",
        default=None,
        help=f"Preferences file (default: {ThemeConfig.PREFERENCES_PATH})"
    )

    args = parser.parse_args()

    store = PreferenceStore(args.prefs)
    if args.theme:
        save_theme(store, args.theme)

    # Console mode (--no-ui)
    if args.no_ui:
        print("\n" + "="*40)
        print("   TicTacToe (console)")
        print("="*40)
        try:
            ConsoleGame().play()
        except KeyboardInterrupt:
            print("\n\nGame interrupted by user.")
        finally:
            print("Goodbye!")
        return

    # Launch UI by default
    from ui import TicTacToeUI
    print("\n" + "="*40)
    print("   TicTacToe UI")
    print("="*40 + "\n")
    ui = TicTacToeUI(store=store, theme=args.theme)
    ui.run()


if __name__ == "__main__":
    main()
