"""
Tests for the command line entry point.
Run with: pytest test_main.py
"""

import json
import sys
import types

import pytest

import main


def run_main(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["tictactoe", *args])
    main.main()


def feed_input(monkeypatch, lines):
    """Make input() return these lines, then hit end of input."""
    lines = iter(lines)

    def fake_input(_prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_console_game_with_theme_saves_preference(tmp_path, monkeypatch, capsys):
    prefs = tmp_path / "preferences.json"
    feed_input(monkeypatch, ["1", "5", "2", "6", "3", "q"])

    run_main(monkeypatch, "--no-ui", "--theme", "ocean", "--prefs", str(prefs))

    assert json.loads(prefs.read_text(encoding="utf-8")) == {"theme": "ocean"}
    out = capsys.readouterr().out
    assert "TicTacToe (console)" in out
    assert "Winner: X" in out
    assert out.rstrip().endswith("Goodbye!")


def test_console_game_without_theme_leaves_prefs_alone(tmp_path, monkeypatch, capsys):
    prefs = tmp_path / "preferences.json"
    feed_input(monkeypatch, [])

    run_main(monkeypatch, "--no-ui", "--prefs", str(prefs))

    assert not prefs.exists()
    out = capsys.readouterr().out
    assert "Next player: X" in out
    assert "Goodbye!" in out


def test_console_game_interrupted(tmp_path, monkeypatch, capsys):
    def interrupt(_prompt=""):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupt)
    run_main(monkeypatch, "--no-ui", "--prefs", str(tmp_path / "preferences.json"))

    out = capsys.readouterr().out
    assert "Game interrupted by user." in out
    assert "Goodbye!" in out


def test_unknown_theme_is_rejected(tmp_path, monkeypatch, capsys):
    prefs = tmp_path / "preferences.json"

    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, "--no-ui", "--theme", "neon", "--prefs", str(prefs))

    assert exc.value.code == 2
    assert "invalid choice" in capsys.readouterr().err
    assert not prefs.exists()


def test_window_is_launched_by_default(tmp_path, monkeypatch):
    prefs = tmp_path / "preferences.json"
    launched = {}

    class RecordingUI:
        def __init__(self, store, theme):
            launched["path"] = store.path
            launched["theme"] = theme

        def run(self):
            launched["ran"] = True

    # Stand-in for ui.py so no display is needed
    fake_ui = types.ModuleType("ui")
    fake_ui.TicTacToeUI = RecordingUI
    monkeypatch.setitem(sys.modules, "ui", fake_ui)

    run_main(monkeypatch, "--theme", "forest", "--prefs", str(prefs))

    assert launched == {"path": prefs, "theme": "forest", "ran": True}
    assert json.loads(prefs.read_text(encoding="utf-8")) == {"theme": "forest"}
