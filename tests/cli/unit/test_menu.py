"""
Unit tests for the menu widget
"""

import pytest

from loggit_cli.ui.keys import KEY_DOWN, KEY_ENTER, KEY_SPACE, KEY_UP
from loggit_cli.ui.menu import Menu
from loggit_cli.ui.screen import CLEAR_LINE, CURSOR_UP, HIDE_CURSOR, SHOW_CURSOR
from loggit_cli.ui.style import parse


def make_menu(read_key=None):
    return (
        Menu("Pick one:", read_key)
        .add_item("First", "a")
        .add_item("Second", "b")
        .add_item("Third", "c")
    )


class TestMenuNavigation:
    """Tests for cursor movement and selection state"""

    def test_add_item_chains(self):
        menu = make_menu()

        assert [item.value for item in menu.items] == ["a", "b", "c"]
        assert menu.cursor == 0

    def test_up_clamps_at_top(self):
        """Test repeated up at index 0 stays at 0"""
        menu = make_menu()

        for _ in range(3):
            menu.move_up()

        assert menu.cursor == 0

    def test_down_clamps_at_bottom(self):
        """Test repeated down at the last index stays there"""
        menu = make_menu()

        for _ in range(5):
            menu.move_down()

        assert menu.cursor == 2

    def test_toggle_pairwise(self):
        """Test selecting then deselecting restores the selection"""
        menu = make_menu()
        menu.move_down()

        menu.toggle()
        assert menu.selected == [1]
        menu.toggle()
        assert menu.selected == []

    def test_selected_values_in_display_order(self):
        """Test values come back in menu order, not toggle order"""
        menu = make_menu()
        menu.cursor = 2
        menu.toggle()
        menu.cursor = 0
        menu.toggle()

        assert menu.selected_values() == ["a", "c"]


class TestMenuRender:
    """Tests for menu markup"""

    def test_single_select_marker(self):
        """Test the cursor row gets the > marker"""
        lines = make_menu().render().splitlines()

        assert lines[0] == "Pick one:"
        assert lines[1] == "[blue]> [reset][bold][cyan]First[reset]"
        assert lines[2] == "  [reset][bold][cyan]Second[reset]"

    def test_multi_select_checkboxes(self):
        """Test checkbox markers reflect membership"""
        menu = make_menu()
        menu.toggle()

        rendered = parse(menu.render(multi=True)).splitlines()

        assert rendered[1].startswith("> [x] ")
        assert rendered[2].startswith("  [ ] ")

    def test_item_text_is_escaped(self):
        """Test brackets in item text are shown literally"""
        menu = Menu("Pick:").add_item("Acme [EU]", "eu")

        assert "Acme [EU]" in parse(menu.render())

    def test_line_count(self):
        """Test the prompt plus one line per item"""
        assert make_menu().render().count("\n") == 4


class TestMenuSelect:
    """Tests for the key loops"""

    def test_select_returns_value(self, key_feed):
        menu = make_menu(key_feed(KEY_DOWN, KEY_ENTER))

        assert menu.select() == "b"

    def test_select_clamps_through_keys(self, key_feed):
        menu = make_menu(key_feed(KEY_UP, KEY_UP, KEY_DOWN, KEY_DOWN, KEY_DOWN, KEY_DOWN, KEY_ENTER))

        assert menu.select() == "c"

    def test_select_ignores_other_keys(self, key_feed):
        menu = make_menu(key_feed(ord("x"), KEY_SPACE, KEY_ENTER))

        assert menu.select() == "a"

    def test_select_repaints_in_place(self, key_feed, capsys):
        """Test each move erases the prompt and item lines"""
        make_menu(key_feed(KEY_DOWN, KEY_ENTER)).select()

        out = capsys.readouterr().out
        assert out.count(CURSOR_UP + CLEAR_LINE) == 4

    def test_select_restores_cursor(self, key_feed, capsys):
        make_menu(key_feed(KEY_ENTER)).select()

        out = capsys.readouterr().out
        assert out.startswith(HIDE_CURSOR)
        assert out.endswith(SHOW_CURSOR)

    def test_cursor_restored_on_interrupt(self, capsys):
        """Test the cursor comes back when a key read is interrupted"""
        def interrupted():
            raise KeyboardInterrupt()

        with pytest.raises(KeyboardInterrupt):
            make_menu(interrupted).select()

        assert capsys.readouterr().out.endswith(SHOW_CURSOR)

    def test_multi_select(self, key_feed):
        """Test space toggles and enter returns display-ordered values"""
        menu = make_menu(key_feed(KEY_DOWN, KEY_DOWN, KEY_SPACE, KEY_UP, KEY_UP, KEY_SPACE, KEY_ENTER))

        assert menu.multi_select() == ["a", "c"]

    def test_multi_select_deselect(self, key_feed):
        menu = make_menu(key_feed(KEY_SPACE, KEY_SPACE, KEY_ENTER))

        assert menu.multi_select() == []

    def test_multi_select_clears_previous_selection(self, key_feed):
        """Test a new session starts with nothing selected"""
        menu = make_menu(key_feed(KEY_ENTER))
        menu.selected = [0, 1]

        assert menu.multi_select() == []

    def test_empty_menu(self):
        with pytest.raises(ValueError, match="no items"):
            Menu("Nothing:").select()
