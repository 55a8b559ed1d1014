"""
Unit tests for screen control
"""

from unittest.mock import patch

import pytest

from loggit_cli.ui.screen import (
    CLEAR_AND_HOME, CLEAR_LINE, CURSOR_UP, HIDE_CURSOR, SHOW_CURSOR,
    RepaintRegion, clear_screen, hidden_cursor,
)
from loggit_cli.ui.style import STYLES

ERASE = CURSOR_UP + CLEAR_LINE


class TestClearScreen:
    """Tests for clear_screen() per platform"""

    @pytest.mark.parametrize("platform", ["linux", "darwin"])
    def test_unix_escape(self, platform, monkeypatch, capsys):
        monkeypatch.setattr("sys.platform", platform)

        clear_screen()

        assert capsys.readouterr().out == CLEAR_AND_HOME + "\n"

    def test_windows_cls(self, monkeypatch):
        monkeypatch.setattr("sys.platform", "win32")

        with patch("loggit_cli.ui.screen.subprocess.run") as mock_run:
            clear_screen()

        mock_run.assert_called_once_with(["cmd", "/c", "cls"], check=False)

    def test_unsupported_platform(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.platform", "sunos5")

        clear_screen()

        out = capsys.readouterr().out
        assert "sunos5" in out
        assert "cannot be cleared" in out


class TestCursor:
    """Tests for cursor visibility"""

    def test_hidden_cursor(self, capsys):
        with hidden_cursor():
            pass

        assert capsys.readouterr().out == HIDE_CURSOR + SHOW_CURSOR

    def test_hidden_cursor_restores_on_error(self, capsys):
        with pytest.raises(RuntimeError):
            with hidden_cursor():
                raise RuntimeError("boom")

        assert capsys.readouterr().out.endswith(SHOW_CURSOR)


class TestRepaintRegion:
    """Tests for in-place repaint"""

    def test_first_paint_does_not_erase(self, capsys):
        region = RepaintRegion()

        region.paint("[red]a[reset]\nb\n")

        assert capsys.readouterr().out == STYLES["red"] + "a" + STYLES["reset"] + "\nb\n"
        assert region.height == 2

    def test_repaint_erases_previous_lines(self, capsys):
        region = RepaintRegion()
        region.paint("a\nb\nc\n")
        capsys.readouterr()

        region.paint("x\n")

        assert capsys.readouterr().out == ERASE * 3 + "x\n"
        assert region.height == 1

    def test_clear(self, capsys):
        region = RepaintRegion()
        region.paint("a\nb\n")
        capsys.readouterr()

        region.clear()

        assert capsys.readouterr().out == ERASE * 2
        assert region.height == 0

    def test_reset_forgets_height(self, capsys):
        region = RepaintRegion()
        region.paint("a\nb\n")
        region.reset()
        capsys.readouterr()

        region.paint("c\n")

        assert capsys.readouterr().out == "c\n"
