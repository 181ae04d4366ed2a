"""Tests for mapping key events onto editor operations."""

from unittest.mock import Mock

from linepad.commands import (
    CommandRegistry,
    InsertCharCommand,
    SplitLineCommand,
    BackspaceCommand,
    LeftCommand,
    RightCommand,
    UpCommand,
    DownCommand,
    SaveCommand,
    QuitCommand,
)
from linepad.editor import Editor
from linepad.keyboard import KeyEvent, KeyType
from linepad.state import CursorPosition


def key(key_type, value):
    return KeyEvent(key_type=key_type, value=value, raw=value)


def regular(ch):
    return key(KeyType.REGULAR, ch)


def special(name):
    return key(KeyType.SPECIAL, name)


def test_registry_bindings():
    r = CommandRegistry()

    assert isinstance(r.get_command(KeyType.SPECIAL, 'left'), LeftCommand)
    assert isinstance(r.get_command(KeyType.SPECIAL, 'right'), RightCommand)
    assert isinstance(r.get_command(KeyType.SPECIAL, 'up'), UpCommand)
    assert isinstance(r.get_command(KeyType.SPECIAL, 'down'), DownCommand)
    assert isinstance(r.get_command(KeyType.SPECIAL, 'enter'), SplitLineCommand)
    assert isinstance(r.get_command(KeyType.SPECIAL, 'backspace'), BackspaceCommand)
    assert isinstance(r.get_command(KeyType.CTRL, 's'), SaveCommand)
    assert isinstance(r.get_command(KeyType.CTRL, 'q'), QuitCommand)
    assert r.get_command(KeyType.CTRL, 'z') is None


def test_typing_inserts_and_marks_modified():
    editor = Editor()

    for ch in "hi":
        editor._handle_key_event(regular(ch))

    assert editor.state.rows == ["hi"]
    assert editor.modified == True


def test_enter_splits_line():
    editor = Editor()
    editor.state.rows = ["ab"]
    editor.state.cursor = CursorPosition(1, 0)

    editor._handle_key_event(special('enter'))

    assert editor.state.rows == ["a", "b"]
    assert editor.state.cursor == CursorPosition(1, 1)


def test_backspace_deletes_before_cursor():
    editor = Editor()
    editor.state.rows = ["abc"]
    editor.state.cursor = CursorPosition(3, 0)

    editor._handle_key_event(special('backspace'))

    assert editor.state.rows == ["ab"]
    assert editor.modified == True


def test_backspace_at_column_zero_does_not_mark_modified():
    editor = Editor()
    editor.state.rows = ["abc"]

    editor._handle_key_event(special('backspace'))

    assert editor.state.rows == ["abc"]
    assert editor.modified == False


def test_arrows_move_without_modifying():
    editor = Editor()
    editor.state.rows = ["abc", "de"]
    editor.state.cursor = CursorPosition(1, 0)

    editor._handle_key_event(special('right'))
    assert editor.state.cursor == CursorPosition(2, 0)
    editor._handle_key_event(special('left'))
    assert editor.state.cursor == CursorPosition(1, 0)
    editor._handle_key_event(special('down'))
    assert editor.state.cursor == CursorPosition(2, 1)
    editor._handle_key_event(special('up'))
    assert editor.state.cursor == CursorPosition(3, 0)

    assert editor.modified == False


def test_ctrl_q_stops_editor():
    editor = Editor()
    editor.running = True

    editor._handle_key_event(KeyEvent(key_type=KeyType.CTRL, value='q', raw='\x11', is_ctrl=True))

    assert editor.running == False


def test_ctrl_s_saves(tmp_path):
    target = tmp_path / "doc.txt"
    editor = Editor()
    editor.load_file(str(target))
    for ch in "abc":
        editor._handle_key_event(regular(ch))

    editor._handle_key_event(KeyEvent(key_type=KeyType.CTRL, value='s', raw='\x13', is_ctrl=True))

    assert target.read_text(encoding='utf-8') == "abc"
    assert editor.modified == False
    assert editor.status_message == f"Saved to {target}"


def test_plain_q_and_s_are_inserted():
    editor = Editor()

    editor._handle_key_event(regular('q'))
    editor._handle_key_event(regular('s'))

    assert editor.state.rows == ["qs"]


def test_control_characters_are_not_inserted():
    editor = Mock()
    command = InsertCharCommand()

    assert command.execute(editor, regular('\x00')) == False
    assert command.execute(editor, regular('\x7f')) == False
    editor.state.insert_char.assert_not_called()


def test_tab_is_ignored():
    editor = Editor()
    editor.state.rows = ["ab"]
    editor.state.cursor.column = 1

    editor._handle_key_event(editor.keyboard.parse_key('<TAB>'))
    editor._handle_key_event(editor.keyboard.parse_key('\t'))

    assert editor.state.rows == ["ab"]
    assert editor.state.cursor.column == 1
    assert editor.modified == False


def test_raw_tab_character_is_not_inserted():
    editor = Editor()

    editor._handle_key_event(regular('\t'))

    assert editor.state.rows == []


def test_unbound_special_key_is_ignored():
    editor = Editor()
    editor.state.rows = ["abc"]

    editor._handle_key_event(special('escape'))
    editor._handle_key_event(key(KeyType.CTRL, 'z'))

    assert editor.state.rows == ["abc"]
    assert editor.modified == False


def test_keypress_clears_status_message():
    editor = Editor()
    editor.status_message = "Saved to doc.txt"

    editor._handle_key_event(special('left'))

    assert editor.status_message is None
