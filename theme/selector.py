"""
Theme selection for TicTacToe.
Decides which theme to start with and saves the player's choice.

Start-up order:
    1. Theme stored in preferences (if it is a known theme)
    2. Dark theme if the operating system is in dark mode
    3. ThemeConfig.DEFAULT_THEME
"""

import os
import subprocess
import sys
from typing import Optional
from .config import ThemeConfig
from .preferences import PreferenceStore

# Sentinel so callers can pass system_scheme=None explicitly
_DETECT = object()


def _windows_scheme() -> Optional[str]:
    import winreg

    key = winreg.OpenKey(
        winreg.HKEY_CURRENT_USER,
        r"Software\Microsoft\Windows\CurrentVersion\Themes\Personalize",
    )
    try:
        value, _ = winreg.QueryValueEx(key, "AppsUseLightTheme")
    finally:
        winreg.CloseKey(key)
    return "light" if value else "dark"


def _macos_scheme() -> Optional[str]:
    # Key is only present while dark mode is on
    result = subprocess.run(
        ["defaults", "read", "-g", "AppleInterfaceStyle"],
        capture_output=True,
        text=True,
        timeout=2,
    )
    if result.returncode != 0:
        return "light"
    return "dark" if "dark" in result.stdout.lower() else "light"


def _linux_scheme() -> Optional[str]:
    gtk_theme = os.environ.get("GTK_THEME", "")
    if not gtk_theme:
        return None
    return "dark" if "dark" in gtk_theme.lower() else "light"


def detect_system_scheme() -> Optional[str]:
    """
    Ask the operating system for its light/dark preference.

    Returns:
        "dark", "light", or None if it can't be determined.
    """
    try:
        if sys.platform.startswith("win"):
            return _windows_scheme()
        if sys.platform == "darwin":
            return _macos_scheme()
        return _linux_scheme()
    except (OSError, subprocess.SubprocessError):
        return None


def get_initial_theme(store: PreferenceStore, system_scheme=_DETECT) -> str:
    """
    Pick the theme to show when the game starts.

    Args:
        store: Where the player's choice is saved.
        system_scheme: "dark"/"light"/None to skip OS detection (used by tests).

    Returns:
        A theme name from ThemeConfig.THEMES.
    """
    stored = store.get(ThemeConfig.PREFERENCE_KEY)
    if stored is not None and ThemeConfig.is_theme(stored):
        return stored

    if system_scheme is _DETECT:
        system_scheme = detect_system_scheme()

    if system_scheme == "dark":
        return ThemeConfig.DARK_THEME
    return ThemeConfig.DEFAULT_THEME


def save_theme(store: PreferenceStore, theme: str) -> bool:
    """
    Remember the player's theme.

    Returns:
        True if written to disk.
    """
    if not ThemeConfig.is_theme(theme):
        raise ValueError(f"Unknown theme: {theme!r}")
    return store.set(ThemeConfig.PREFERENCE_KEY, theme)
