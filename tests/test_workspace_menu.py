"""Tests for the selection state machine and the full-screen menu loop."""
import io
from pathlib import Path

import pytest
from rich.console import Console
from rich.screen import Screen

from hyprspace.menu.workspace_menu import (
    CREATE_NEW_LABEL,
    SelectionState,
    WorkspaceMenu,
    format_entry,
)
from hyprspace.models.workspace_model import Action, WorkspaceEntry
from hyprspace.utils.terminal import KEY_DOWN, KEY_ENTER, KEY_ESC, KEY_UP


def _entry(short, num=None):
    base = f"workspace-{short}.sh"
    return WorkspaceEntry(short_name=short, base_name=base, full_path=Path("/tmp") / base, workspace_num=num)


@pytest.fixture
def three_entries():
    return [_entry("a", 1), _entry("b"), _entry("c", 3)]


def test_down_wraps_around(three_entries):
    state = SelectionState(three_entries)
    for _ in range(4):
        state.handle_key(KEY_DOWN)
    assert state.cursor == 0


def test_up_from_top_goes_to_create_item(three_entries):
    state = SelectionState(three_entries)
    state.handle_key(KEY_UP)
    assert state.cursor == 3


def test_vim_keys(three_entries):
    state = SelectionState(three_entries)
    state.handle_key("j")
    state.handle_key("j")
    state.handle_key("k")
    assert state.cursor == 1


def test_confirm_on_entry_launches(three_entries):
    state = SelectionState(three_entries)
    state.handle_key(KEY_DOWN)
    assert state.handle_key(KEY_ENTER) is True
    assert state.action == Action.launch(1)


@pytest.mark.parametrize("count", [0, 1, 5])
def test_confirm_on_last_item_creates_new(count):
    state = SelectionState([_entry(str(i)) for i in range(count)])
    state.cursor = count
    state.handle_key(KEY_ENTER)
    assert state.action == Action.create_new()
    assert state.action.is_create_new


def test_zero_entries_cursor_stays_on_create_item():
    state = SelectionState([])
    state.handle_key(KEY_DOWN)
    state.handle_key(KEY_UP)
    assert state.cursor == 0
    state.handle_key(KEY_ENTER)
    assert state.action.is_create_new


@pytest.mark.parametrize("key", ["q", KEY_ESC])
@pytest.mark.parametrize("cursor", [0, 2, 3])
def test_quit_leaves_no_action(three_entries, key, cursor):
    state = SelectionState(three_entries)
    state.cursor = cursor
    assert state.handle_key(key) is True
    assert state.action is None
    assert state.entries is three_entries


def test_other_keys_are_ignored(three_entries):
    state = SelectionState(three_entries)
    for key in ("x", " ", "Q", "LEFT", "RIGHT"):
        assert state.handle_key(key) is False
    assert state.cursor == 0
    assert state.action is None


def test_keys_after_finish_do_nothing(three_entries):
    state = SelectionState(three_entries)
    state.handle_key(KEY_ENTER)
    state.handle_key(KEY_DOWN)
    state.handle_key("q")
    assert state.cursor == 0
    assert state.action == Action.launch(0)


def test_format_entry_rows():
    assert format_entry(0, _entry("backend", 2)) == "1. [ws 2] backend (workspace-backend.sh)"
    assert format_entry(1, _entry("music")) == "2. [ws ?] music (workspace-music.sh)"


def test_view_shows_all_rows_and_marker(console, three_entries):
    menu = WorkspaceMenu(three_entries, console=console, keyboard=object())
    menu.state.cursor = 1
    console.print(menu.build_view())
    out = console.file.getvalue()

    assert "3 configuration(s) found" in out
    assert "➤ 2. [ws ?] b (workspace-b.sh)" in out
    assert "1. [ws 1] a (workspace-a.sh)" in out
    assert CREATE_NEW_LABEL in out
    assert out.count("➤") == 1


def test_loop_returns_launch_and_restores_terminal(console, scripted_keyboard, three_entries):
    keyboard = scripted_keyboard([None, KEY_DOWN, "x", KEY_ENTER])
    menu = WorkspaceMenu(three_entries, console=console, keyboard=keyboard, poll_interval=0.25)

    entries, action = menu.start()

    assert entries is three_entries
    assert action == Action.launch(1)
    assert keyboard.entered and keyboard.exited
    assert keyboard.timeouts == [0.25] * 4


def test_loop_quit_returns_no_action(console, scripted_keyboard, three_entries):
    keyboard = scripted_keyboard([KEY_DOWN, KEY_DOWN, "q"])
    entries, action = WorkspaceMenu(three_entries, console=console, keyboard=keyboard).start()
    assert action is None
    assert entries == three_entries


def test_loop_create_new_with_no_entries(console, scripted_keyboard):
    keyboard = scripted_keyboard([KEY_ENTER])
    entries, action = WorkspaceMenu([], console=console, keyboard=keyboard).start()
    assert entries == []
    assert action.is_create_new


def test_terminal_restored_when_loop_fails(console, scripted_keyboard, three_entries):
    keyboard = scripted_keyboard([KEY_DOWN])
    menu = WorkspaceMenu(three_entries, console=console, keyboard=keyboard)
    with pytest.raises(AssertionError):
        menu.start()
    assert keyboard.exited


def _short_console():
    return Console(file=io.StringIO(), force_terminal=False, width=100, height=12, color_system=None)


def test_long_list_scrolls_to_create_item():
    entries = [_entry(f"e{i:02d}") for i in range(30)]
    console = _short_console()
    menu = WorkspaceMenu(entries, console=console, keyboard=object())
    menu.state.cursor = 30

    console.print(Screen(menu.build_view()))
    out = console.file.getvalue()

    assert f"➤ {CREATE_NEW_LABEL}" in out
    assert format_entry(29, entries[29]) in out
    assert format_entry(0, entries[0]) not in out


def test_scroll_follows_cursor_back_to_top():
    entries = [_entry(f"e{i:02d}") for i in range(30)]
    menu = WorkspaceMenu(entries, console=_short_console(), keyboard=object())
    menu.state.cursor = 30
    assert list(menu.visible_range()) == list(range(23, 31))

    menu.state.handle_key(KEY_DOWN)
    assert menu.state.cursor == 0
    assert list(menu.visible_range()) == list(range(0, 8))

    menu.state.handle_key(KEY_UP)
    assert list(menu.visible_range()) == list(range(23, 31))


def test_short_list_is_not_scrolled(three_entries):
    menu = WorkspaceMenu(three_entries, console=_short_console(), keyboard=object())
    menu.state.cursor = 3
    assert list(menu.visible_range()) == [0, 1, 2, 3]


def test_alt_screen_and_cursor_restored_on_failure(scripted_keyboard, three_entries):
    console = Console(file=io.StringIO(), force_terminal=True, width=80, height=20, color_system=None)
    keyboard = scripted_keyboard([KEY_DOWN])

    with pytest.raises(AssertionError):
        WorkspaceMenu(three_entries, console=console, keyboard=keyboard).start()

    out = console.file.getvalue()
    assert "\x1b[?1049h" in out
    assert out.endswith("\x1b[?1049l\x1b[?25h")
    assert keyboard.exited


def test_alt_screen_and_cursor_restored_on_quit(scripted_keyboard, three_entries):
    console = Console(file=io.StringIO(), force_terminal=True, width=80, height=20, color_system=None)
    WorkspaceMenu(three_entries, console=console, keyboard=scripted_keyboard(["q"])).start()
    assert console.file.getvalue().endswith("\x1b[?1049l\x1b[?25h")
