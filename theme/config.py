"""
Theme configuration for TicTacToe.
All the settings for colours, fonts, and where the theme choice is saved.
"""

from pathlib import Path


class ThemeConfig:
    """
    Configuration class for the look of the game.
    Change these values to restyle the window!
    """

    # ==================== THEMES ====================
    # Order here is the order shown in the theme dialog
    THEMES = ("light", "dark", "ocean", "forest", "sunset", "lavender")

    THEME_LABELS = {
        "light": "Light",
        "dark": "Dark",
        "ocean": "Ocean",
        "forest": "Forest",
        "sunset": "Sunset",
        "lavender": "Lavender",
    }

    # Used when nothing is stored and the system has no dark preference
    DEFAULT_THEME = "light"
    DARK_THEME = "dark"

    # ==================== PALETTES ====================
    # background: window, surface: cells and dialog, text: labels,
    # accent: buttons, x/o: mark colours, highlight: winning cells
    PALETTES = {
        "light": {
            "background": "#f4f4f5",
            "surface": "#ffffff",
            "text": "#18181b",
            "accent": "#6366f1",
            "x": "#ef4444",
            "o": "#3b82f6",
            "highlight": "#fde68a",
        },
        "dark": {
            "background": "#1a1a2e",
            "surface": "#16213e",
            "text": "#e5e7eb",
            "accent": "#00d4ff",
            "x": "#f87171",
            "o": "#10b981",
            "highlight": "#854d0e",
        },
        "ocean": {
            "background": "#0b3954",
            "surface": "#087e8b",
            "text": "#f0f8ff",
            "accent": "#bfd7ea",
            "x": "#ff5a5f",
            "o": "#f5f749",
            "highlight": "#1b998b",
        },
        "forest": {
            "background": "#1b2d1b",
            "surface": "#2d4a2d",
            "text": "#e8f5e9",
            "accent": "#81c784",
            "x": "#ffb74d",
            "o": "#aed581",
            "highlight": "#558b2f",
        },
        "sunset": {
            "background": "#2d1b2e",
            "surface": "#4a2545",
            "text": "#fff1e6",
            "accent": "#ff8c42",
            "x": "#ff3c38",
            "o": "#fff275",
            "highlight": "#a23e48",
        },
        "lavender": {
            "background": "#f3e8ff",
            "surface": "#faf5ff",
            "text": "#3b0764",
            "accent": "#a855f7",
            "x": "#db2777",
            "o": "#7c3aed",
            "highlight": "#e9d5ff",
        },
    }

    # ==================== PREFERENCES ====================
    # Single string key holding the chosen theme
    PREFERENCE_KEY = "theme"
    PREFERENCES_PATH = Path.home() / ".tictactoe" / "preferences.json"

    # ==================== BOARD DISPLAY ====================
    CELL_WIDTH = 4          # In text units (Tk button width)
    CELL_HEIGHT = 2
    CELL_FONT = ("Segoe UI", 28, "bold")
    TITLE_FONT = ("Segoe UI", 20, "bold")
    STATUS_FONT = ("Segoe UI", 13)
    BUTTON_FONT = ("Segoe UI", 11, "bold")
    BADGE_FONT = ("Segoe UI", 48, "bold")

    # Settings gear icon size in pixels
    ICON_SIZE = 24

    @classmethod
    def is_theme(cls, name) -> bool:
        """True if name is one of the known themes."""
        return name in cls.THEMES

    @classmethod
    def palette(cls, name: str) -> dict:
        """Get the colour palette for a theme."""
        if not cls.is_theme(name):
            raise ValueError(f"Unknown theme: {name!r}")
        return cls.PALETTES[name]
