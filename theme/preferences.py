"""
Preference storage for TicTacToe.
A tiny string key-value store kept in a JSON file.
"""

import json
from pathlib import Path
from typing import Dict, Optional, Union
from .config import ThemeConfig


class PreferenceStore:
    """
    Simple preference store backed by a JSON object file.

    Values are always strings. Problems with the file are
    reported and treated as "nothing stored"; they never stop the game.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Initialize the store.

        Args:
            path: JSON file to use. Uses ThemeConfig.PREFERENCES_PATH if not provided.
        """
        self.path = Path(path) if path is not None else ThemeConfig.PREFERENCES_PATH
        self._values: Dict[str, str] = {}
        self.is_loaded = False

    def load(self) -> bool:
        """
        Read preferences from disk.

        Returns:
            True if the file was read, False if it was missing or unusable.
        """
        self._values = {}
        self.is_loaded = True

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return False
        except (OSError, ValueError) as e:
            # ValueError covers bad JSON and bytes that aren't UTF-8
            print(f"WARNING: Could not read preferences from {self.path}: {e}")
            return False

        if not isinstance(data, dict):
            print(f"WARNING: Ignoring preferences in {self.path}: expected a JSON object")
            return False

        # Only string values are meaningful; skip anything else
        self._values = {str(k): v for k, v in data.items() if isinstance(v, str)}
        return True

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a stored value, or default if not set."""
        if not self.is_loaded:
            self.load()
        return self._values.get(key, default)

    def set(self, key: str, value: str) -> bool:
        """
        Store a value and write it to disk.

        Returns:
            True if saved to disk. The in-memory value is kept either way.
        """
        if not self.is_loaded:
            self.load()
        self._values[key] = value
        return self.save()

    def remove(self, key: str) -> bool:
        """Forget a value. Returns True if saved to disk."""
        if not self.is_loaded:
            self.load()
        self._values.pop(key, None)
        return self.save()

    def save(self) -> bool:
        """
        Write all preferences to disk.

        Returns:
            True on success, False if the file could not be written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self._values, f, indent=2, sort_keys=True)
        except OSError as e:
            print(f"WARNING: Could not save preferences to {self.path}: {e}")
            return False
        return True

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
