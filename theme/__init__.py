"""
Theme module for TicTacToe.
Handles colour themes, the saved theme preference, and window icons.
"""

from .config import ThemeConfig
from .preferences import PreferenceStore
from .selector import detect_system_scheme, get_initial_theme, save_theme
from .icons import draw_settings_icon
