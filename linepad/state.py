"""Text buffer and cursor model for the editor.

All operations keep the cursor inside the buffer. Out-of-range requests
(moving past an edge, deleting at column 0) are no-ops rather than errors.
"""

from dataclasses import dataclass, field
from typing import Optional

from .constants import EditorConstants


@dataclass
class CursorPosition:
    column: int = 0
    row: int = 0


@dataclass
class Viewport:
    width: int = EditorConstants.DEFAULT_WIDTH
    height: int = EditorConstants.DEFAULT_HEIGHT


@dataclass
class EditorState:
    """Lines of text, the cursor, and the viewport that bounds it."""

    rows: list[str] = field(default_factory=list)
    cursor: CursorPosition = field(default_factory=CursorPosition)
    viewport: Viewport = field(default_factory=Viewport)
    path: Optional[str] = None

    def has_content(self) -> bool:
        return len(self.rows) > 0

    def current_line(self) -> str:
        if not self.has_content():
            return ""
        return self.rows[self.cursor.row]

    def text(self) -> str:
        """Return the document as it is written to disk."""
        return "\n".join(self.rows)

    def visible_rows(self) -> list[str]:
        return self.rows[: self.viewport.height]

    def set_path(self, path: str):
        """Associate the buffer with a file. The first path wins."""
        if self.path is None:
            self.path = path

    def load(self, contents: str):
        """Replace the buffer with the lines of ``contents``.

        Lines end only at ``\\n``; one trailing ``\\r`` per line is dropped
        and a final newline adds no empty row. Other characters that
        ``str.splitlines`` would break on, such as form feeds, stay in the
        row. The cursor is left alone; callers load before any interaction,
        while it is still at (0, 0).
        """
        rows = contents.split("\n")
        if rows[-1] == "":
            rows.pop()
        self.rows = [row[:-1] if row.endswith("\r") else row for row in rows]

    def update_viewport(self, width: int, height: int):
        self.viewport.width = width
        self.viewport.height = height

    def insert_char(self, char: str):
        if not self.has_content():
            self.rows.append("")
        row = self.cursor.row
        column = self.cursor.column
        line = self.rows[row]
        self.rows[row] = line[:column] + char + line[column:]
        self.cursor.column += 1

    def split_line_at_cursor(self):
        """Break the current line at the cursor.

        The cursor follows the carried text and ends up at the end of the
        new line.
        """
        if not self.has_content():
            self.rows.append("")
        row = self.cursor.row
        line = self.rows[row]
        left = line[: self.cursor.column]
        right = line[self.cursor.column :]

        self.rows[row] = left
        self.rows.insert(row + 1, right)

        self.cursor.row = row + 1
        self.cursor.column = len(right)

    def delete_before_cursor(self):
        # No join with the previous line at column 0.
        if not self.has_content() or self.cursor.column == 0:
            return

        row = self.cursor.row
        line = self.rows[row]
        if self.cursor.column == len(line):
            self.rows[row] = line[:-1]
        else:
            column = self.cursor.column
            self.rows[row] = line[: column - 1] + line[column:]
        self.cursor.column -= 1

    def move_up(self):
        if not self.has_content() or self.cursor.row == 0:
            return

        self.cursor.row -= 1
        self.cursor.column = len(self.rows[self.cursor.row])

    def move_down(self):
        if (
            not self.has_content()
            or self.cursor.row >= self.viewport.height - 1
            or self.cursor.row == len(self.rows) - 1
        ):
            return

        self.cursor.row += 1
        self.cursor.column = len(self.rows[self.cursor.row])

    def move_left(self):
        if self.cursor.column == 0:
            return

        self.cursor.column -= 1

    def move_right(self):
        if not self.has_content() or self.cursor.column == len(self.current_line()):
            return

        self.cursor.column += 1
