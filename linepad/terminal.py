"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
from collections import deque
from typing import Optional

import blessed
from curtsies.events import PasteEvent

from .constants import EditorConstants
from .state import CursorPosition

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None, status_line: bool = True):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.status_line = status_line
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        self._pending_keys: deque = deque()

    def setup(self):
        """Enter fullscreen mode and put the terminal into raw input mode.

        Raises whatever curtsies raises when the terminal cannot be put
        into raw mode; the caller treats that as a startup failure.
        """
        from curtsies import Input  # type: ignore

        print(self.term.enter_fullscreen, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            curtsies_input = Input(keynames='curtsies')  # type: ignore
            curtsies_input.__enter__()
            self._curtsies_input = curtsies_input
            logger.debug("Entered raw input mode")

    def cleanup(self):
        """Exit fullscreen mode and restore terminal. Safe to call twice."""
        self._pending_keys.clear()
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)  # type: ignore
            finally:
                self._curtsies_input = None
                logger.debug("Left raw input mode")
        if self.is_fullscreen:
            print(self.term.clear, end='')
            print(self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False

    def clear_screen(self):
        """Clear the entire screen."""
        print(self.term.home + self.term.clear, end='')

    def draw(self, rows: list[str], cursor: CursorPosition, gutter_width: int = EditorConstants.GUTTER_WIDTH,
             status: Optional[str] = None):
        """Redraw every row and place the terminal cursor.

        Args:
            rows: Lines to display, top to bottom
            cursor: Position of the cursor within ``rows``
            gutter_width: Columns reserved for line numbers (0 hides them)
            status: Text for the bottom status line, or None for no status line
        """
        width = self.width
        self.clear_screen()

        for y, line in enumerate(rows):
            if gutter_width:
                number = str(y + 1).rjust(gutter_width - 1)
                display_line = f"{number} {line}"
            else:
                display_line = line
            print(self.term.move(y, 0) + display_line[:width], end='')

        if status is not None:
            print(self.term.move(self.term.height - 1, 0) + self.term.reverse
                  + status[:width].ljust(width) + self.term.normal, end='')

        if cursor.row >= self.height:
            # Past the text area; keep the cursor off the status line
            print(self.term.hide_cursor, end='', flush=True)
        else:
            self.move_cursor(cursor.row, cursor.column + gutter_width)

    def move_cursor(self, y: int, x: int):
        """Move the cursor to a position without redrawing the screen."""
        print(self.term.move(y, x) + self.term.normal_cursor, end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Pasted text arrives from curtsies as one event; its keys are queued
        and handed out one per call.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key token as a string, or None if no key arrived.
        """
        if self._pending_keys:
            return self._pending_keys.popleft()
        if self._curtsies_input is None:
            return None
        # send() serves bytes curtsies has already buffered before polling stdin
        evt = self._curtsies_input.send(timeout)  # type: ignore
        if evt is None:
            return None
        if isinstance(evt, PasteEvent):
            self._pending_keys.extend(str(key) for key in evt.events)
            logger.debug("Pasted %d keys", len(evt.events))
            return self._pending_keys.popleft() if self._pending_keys else None
        return str(evt)

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows (excluding status line)."""
        if self.status_line:
            return self.term.height - 1  # Reserve one line for status
        return self.term.height
