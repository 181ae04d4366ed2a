"""Tests for character insertion into the buffer."""

from linepad.state import EditorState, CursorPosition


def create_state(rows, column=0, row=0):
    """Create a state with the given rows and cursor."""
    state = EditorState(rows=list(rows))
    state.cursor = CursorPosition(column, row)
    return state


def test_insert_into_empty_buffer_creates_line():
    state = EditorState()
    assert state.rows == []

    state.insert_char('a')

    assert state.rows == ["a"]
    assert state.cursor == CursorPosition(1, 0)


def test_insert_at_end_of_line():
    state = create_state(["ab"], column=2)

    state.insert_char('c')

    assert state.rows == ["abc"]
    assert state.cursor.column == 3


def test_insert_at_start_of_line():
    state = create_state(["bc"], column=0)

    state.insert_char('a')

    assert state.rows == ["abc"]
    assert state.cursor.column == 1


def test_insert_in_middle_of_line():
    state = create_state(["ac"], column=1)

    state.insert_char('b')

    assert state.rows == ["abc"]
    assert state.cursor.column == 2


def test_insert_does_not_change_row():
    state = create_state(["first", "second"], column=3, row=1)

    state.insert_char('X')

    assert state.rows == ["first", "secXond"]
    assert state.cursor.row == 1


def test_typing_a_word():
    state = EditorState()
    for ch in "hello":
        state.insert_char(ch)

    assert state.rows == ["hello"]
    assert state.cursor == CursorPosition(5, 0)


def test_insert_then_delete_restores_line():
    """Inserting then deleting leaves the line and column as they were."""
    for column in range(4):
        state = create_state(["abc"], column=column)

        state.insert_char('z')
        state.delete_before_cursor()

        assert state.rows == ["abc"]
        assert state.cursor.column == column


def test_insert_non_ascii_character():
    state = create_state(["caf"], column=3)

    state.insert_char('é')

    assert state.rows == ["café"]
    assert state.cursor.column == 4
