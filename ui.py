"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (click a cell to play)
- Game status and a restart button
- A winner popup with "Play Again"
- A settings button that opens the theme picker
"""

import tkinter as tk
from typing import Optional
from PIL import ImageTk

from logic.game_state import new_game, reset, index_to_cell
from logic.move_validator import apply_move
from logic.win_checker import WinChecker, GameStatus, status_text

from theme.config import ThemeConfig
from theme.preferences import PreferenceStore
from theme.selector import get_initial_theme, save_theme
from theme.icons import draw_settings_icon


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    Keeps the current GameState and swaps it for a new one after
    every legal click. Everything on screen is redrawn from that state.
    """

    def __init__(self, store: Optional[PreferenceStore] = None, theme: Optional[str] = None):
        """
        Initialize the UI.

        Args:
            store: Where the theme choice is saved. Uses the default file if not provided.
            theme: Start with this theme instead of the saved/system one.
        """
        self.store = store or PreferenceStore()
        self.win_checker = WinChecker()
        self.game_state = new_game()

        self.theme = theme if theme is not None else get_initial_theme(self.store)
        self.palette = ThemeConfig.palette(self.theme)

        self.theme_dialog: Optional[tk.Toplevel] = None
        self.settings_icon: Optional[ImageTk.PhotoImage] = None

        self._create_ui()
        self._apply_theme()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("Tic-Tac-Toe")
        self.root.resizable(False, False)

        # Settings button (top right)
        self.settings_btn = tk.Button(
            self.root,
            relief="flat",
            borderwidth=0,
            command=self._open_theme_dialog
        )
        self.settings_btn.place(relx=1.0, x=-8, y=8, anchor=tk.NE)

        # Main container
        self.main_frame = tk.Frame(self.root)
        self.main_frame.pack(fill=tk.BOTH, expand=True, padx=40, pady=(40, 24))

        self.title_label = tk.Label(self.main_frame, text="Tic-Tac-Toe", font=ThemeConfig.TITLE_FONT)
        self.title_label.pack(pady=(0, 16))

        # Board
        self.board_frame = tk.Frame(self.main_frame)
        self.board_frame.pack()

        self.board_cells = []
        for index in range(len(self.game_state.board)):
            row, col = index_to_cell(index)
            cell = tk.Button(
                self.board_frame,
                text="",
                font=ThemeConfig.CELL_FONT,
                width=ThemeConfig.CELL_WIDTH,
                height=ThemeConfig.CELL_HEIGHT,
                relief="ridge",
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        self.status_label = tk.Label(self.main_frame, text="", font=ThemeConfig.STATUS_FONT)
        self.status_label.pack(pady=(16, 8))

        self.restart_btn = tk.Button(
            self.main_frame,
            text="Restart Game",
            font=ThemeConfig.BUTTON_FONT,
            width=14,
            command=self._reset_game
        )
        self.restart_btn.pack(pady=(0, 4))

        # Winner popup, shown over the board when someone wins
        self.overlay = tk.Frame(self.root, relief="raised", borderwidth=2)
        self.badge_label = tk.Label(self.overlay, text="", font=ThemeConfig.BADGE_FONT)
        self.badge_label.pack(padx=40, pady=(20, 0))
        self.winner_message = tk.Label(self.overlay, text="Wins!", font=ThemeConfig.TITLE_FONT)
        self.winner_message.pack(padx=40)
        self.play_again_btn = tk.Button(
            self.overlay,
            text="Play Again",
            font=ThemeConfig.BUTTON_FONT,
            width=12,
            command=self._reset_game
        )
        self.play_again_btn.pack(padx=40, pady=20)

        self.root.bind("<Escape>", lambda _e: self._close_theme_dialog())
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Handle a click on a board cell."""
        new_state = apply_move(self.game_state, index)
        if new_state is None:
            return  # Illegal click, ignore it
        self.game_state = new_state
        self._render()

    def _render(self):
        """Redraw everything from the current game state."""
        board = self.game_state.board
        result = self.win_checker.outcome(board)
        winning_line = self.win_checker.get_winning_line(board) or ()

        for index, cell in enumerate(self.board_cells):
            mark = board[index]
            bg = self.palette["highlight"] if index in winning_line else self.palette["surface"]
            if mark is None:
                cell.configure(text="", bg=bg, activebackground=bg)
            else:
                fg = self.palette[mark.value.lower()]
                cell.configure(text=mark.value, bg=bg, fg=fg, activebackground=bg, activeforeground=fg)

        self.status_label.configure(text=status_text(self.game_state, result))

        if result.status == GameStatus.WIN:
            self.badge_label.configure(
                text=result.winner.value,
                fg=self.palette[result.winner.value.lower()]
            )
            self.overlay.place(relx=0.5, rely=0.5, anchor=tk.CENTER)
            self.overlay.lift()
        else:
            self.overlay.place_forget()

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self.game_state = reset()
        self._render()

    # ==================== THEMES ====================

    def _apply_theme(self):
        """Colour every widget from the current palette."""
        p = self.palette

        for widget in (self.root, self.main_frame, self.board_frame):
            widget.configure(bg=p["background"])
        for label in (self.title_label, self.status_label):
            label.configure(bg=p["background"], fg=p["text"])

        for button in (self.restart_btn, self.play_again_btn):
            button.configure(
                bg=p["accent"],
                fg=p["surface"],
                activebackground=p["accent"],
                activeforeground=p["surface"]
            )

        self.overlay.configure(bg=p["surface"])
        self.badge_label.configure(bg=p["surface"])
        self.winner_message.configure(bg=p["surface"], fg=p["text"])

        # PhotoImage must stay referenced or Tk drops it
        self.settings_icon = ImageTk.PhotoImage(
            draw_settings_icon(ThemeConfig.ICON_SIZE, p["text"]),
            master=self.root
        )
        self.settings_btn.configure(
            image=self.settings_icon,
            bg=p["background"],
            activebackground=p["background"]
        )

        self._render()

    def _open_theme_dialog(self):
        """Show the "Choose theme" dialog."""
        if self.theme_dialog is not None:
            self.theme_dialog.lift()
            return

        p = self.palette
        dialog = tk.Toplevel(self.root, bg=p["surface"])
        dialog.title("Settings")
        dialog.resizable(False, False)
        dialog.transient(self.root)

        tk.Label(
            dialog,
            text="Choose theme",
            font=ThemeConfig.TITLE_FONT,
            bg=p["surface"],
            fg=p["text"]
        ).pack(padx=24, pady=(16, 8))

        options = tk.Frame(dialog, bg=p["surface"])
        options.pack(padx=24, pady=4)

        for i, name in enumerate(ThemeConfig.THEMES):
            preview = ThemeConfig.palette(name)
            is_active = name == self.theme
            label = ThemeConfig.THEME_LABELS[name]
            tk.Button(
                options,
                text=f"✓ {label}" if is_active else label,
                font=ThemeConfig.BUTTON_FONT,
                width=12,
                relief="sunken" if is_active else "raised",
                bg=preview["background"],
                fg=preview["text"],
                activebackground=preview["accent"],
                command=lambda n=name: self._select_theme(n)
            ).grid(row=i // 2, column=i % 2, padx=4, pady=4)

        tk.Button(
            dialog,
            text="Close",
            font=ThemeConfig.BUTTON_FONT,
            width=10,
            command=self._close_theme_dialog
        ).pack(pady=(8, 16))

        dialog.protocol("WM_DELETE_WINDOW", self._close_theme_dialog)
        dialog.bind("<Escape>", lambda _e: self._close_theme_dialog())

        self.theme_dialog = dialog
        dialog.grab_set()  # Modal

    def _close_theme_dialog(self):
        """Dismiss the theme dialog if it is open."""
        if self.theme_dialog is None:
            return
        self.theme_dialog.grab_release()
        self.theme_dialog.destroy()
        self.theme_dialog = None

    def _select_theme(self, name: str):
        """Switch to a theme, remember it, and close the dialog."""
        self.theme = name
        self.palette = ThemeConfig.palette(name)
        save_theme(self.store, name)
        print(f"Theme set to: {name}")

        self._apply_theme()
        self._close_theme_dialog()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._close_theme_dialog()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
