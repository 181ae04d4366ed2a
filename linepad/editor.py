"""Main editor controller."""

import errno
import logging
import os
import select
import shutil
import signal
import sys
import tempfile
import termios
from typing import Optional

from .commands import CommandRegistry
from .config import EditorConfig
from .constants import EditorConstants
from .keyboard import KeyboardHandler, KeyEvent
from .state import EditorState
from .terminal import TerminalInterface

logger = logging.getLogger(__name__)


class Editor:
    """Owns the editor state and runs the input/redraw loop."""

    def __init__(self, config: Optional[EditorConfig] = None, terminal: Optional[TerminalInterface] = None):
        """Initialize the editor components."""
        self.config = config or EditorConfig()
        self.terminal = terminal or TerminalInterface(status_line=self.config.status_line)
        self.keyboard = KeyboardHandler(self.terminal)
        self.state = EditorState()
        self.command_registry = CommandRegistry()  # Command pattern for key handling
        self.running = False
        self.modified = False
        self.status_message: Optional[str] = None
        # Create pipe for resize signaling
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()

    @property
    def gutter_width(self) -> int:
        return EditorConstants.GUTTER_WIDTH if self.config.line_numbers else 0

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, EditorConstants.RESIZE_PIPE_MARKER)

    def _update_viewport(self):
        width = max(1, self.terminal.width)
        height = max(1, self.terminal.height)
        self.state.update_viewport(width, height)
        logger.debug("Viewport is %dx%d", width, height)

    def _disable_flow_control(self):
        """Let Ctrl-S and Ctrl-Q reach the editor instead of the tty.

        Returns the previous termios settings, or None if they could not
        be changed.
        """
        try:
            old_settings = termios.tcgetattr(sys.stdin)
            new_settings = list(old_settings)
            # Disable IXON/IXOFF in input flags (index 0)
            new_settings[0] &= ~(termios.IXON | termios.IXOFF)
            termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
            return old_settings
        except (termios.error, AttributeError, OSError, ValueError) as e:
            logger.debug("Could not disable flow control: %s", e)
            return None

    def run(self):
        """Run the main editor loop until Ctrl-Q.

        The terminal is restored on every exit path.
        """
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)
        try:
            self.terminal.setup()
            self.running = True
            old_settings = self._disable_flow_control()
            try:
                self._update_viewport()
                self._draw()

                while self.running:
                    # Wait for input on stdin or resize pipe
                    ready, _, _ = select.select([0, self._resize_pipe_r], [], [])

                    if self._resize_pipe_r in ready:
                        # Clear the pipe
                        os.read(self._resize_pipe_r, 1024)
                        self._update_viewport()
                    elif 0 in ready:
                        # One read can carry several keys; apply them all before redrawing
                        while self.running:
                            key_event = self.keyboard.get_key_event(timeout=0)
                            if key_event is None:
                                break
                            self._handle_key_event(key_event)

                    if self.running:
                        self._draw()
            finally:
                if old_settings is not None:
                    try:
                        termios.tcsetattr(sys.stdin, termios.TCSANOW, old_settings)
                    except (termios.error, OSError) as e:
                        logger.warning("Could not restore terminal settings: %s", e)
        except KeyboardInterrupt:
            logger.info("Interrupted, leaving editor")
        finally:
            self.running = False
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self.terminal.cleanup()

    def _status_text(self) -> Optional[str]:
        if not self.config.status_line:
            return None
        name = self.state.path or EditorConstants.NO_NAME
        if self.modified:
            name += EditorConstants.MODIFIED_MARKER
        cursor = self.state.cursor
        message = self.status_message or EditorConstants.STATUS_KEYS
        return f" {name}  Ln {cursor.row + 1}, Col {cursor.column + 1}  {message}"

    def _draw(self):
        """Draw the current editor state to terminal."""
        self.terminal.draw(
            self.state.visible_rows(),
            self.state.cursor,
            gutter_width=self.gutter_width,
            status=self._status_text(),
        )

    def _handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        # Clear status message on any keypress
        self.status_message = None

        was_modified = self.command_registry.execute(self, key_event)
        if was_modified:
            self.modified = True

    def load_file(self, filename: str):
        """Associate a file with the editor and load its contents.

        A file that does not exist yet is created empty. Errors reading or
        creating the file propagate to the caller.

        Args:
            filename: Path to file to load
        """
        self.state.set_path(filename)
        if os.path.exists(filename):
            with open(filename, 'r', encoding=EditorConstants.FILE_ENCODING, newline='') as f:
                self.state.load(f.read())
            logger.info("Loaded %d lines from %s", len(self.state.rows), filename)
        else:
            with open(filename, 'w', encoding=EditorConstants.FILE_ENCODING):
                pass
            logger.info("Created %s", filename)
        self.modified = False

    def save_file(self, filename: Optional[str] = None) -> bool:
        """Save the current document to a file atomically.

        The whole document is written in a single write to a temporary
        file that then replaces the target.

        Args:
            filename: Path to save file to; defaults to the associated file

        Returns:
            True if save succeeded, False otherwise
        """
        if filename is None:
            filename = self.state.path
        if not filename:
            self.status_message = "Error: No file name"
            return False

        temp_filename = None
        try:
            content = self.state.text()

            # Temp file in the same directory so the rename stays on one filesystem
            dir_name = os.path.dirname(filename) or '.'
            suffix = os.path.splitext(filename)[1]
            with tempfile.NamedTemporaryFile(mode='w', encoding=EditorConstants.FILE_ENCODING,
                                             dir=dir_name, suffix=suffix,
                                             delete=False) as temp_file:
                temp_filename = temp_file.name
                temp_file.write(content)
                temp_file.flush()
                os.fsync(temp_file.fileno())

            if os.path.exists(filename):
                shutil.copymode(filename, temp_filename)
            os.replace(temp_filename, filename)

            self.state.set_path(filename)
            self.modified = False
            logger.info("Saved %d lines to %s", len(self.state.rows), filename)
            return True

        except PermissionError:
            self.status_message = f"Error: Permission denied saving {filename}"
        except OSError as e:
            if e.errno == errno.ENOSPC:  # No space left on device
                self.status_message = "Error: No space left on device"
            else:
                self.status_message = f"Error: Cannot save to {filename}"

        logger.warning("Saving %s failed: %s", filename, self.status_message)
        if temp_filename is not None and os.path.exists(temp_filename):
            try:
                os.remove(temp_filename)
            except OSError as e:
                logger.warning("Could not remove temporary file %s: %s", temp_filename, e)
        return False

    def handle_save(self):
        """Handle Ctrl-S save command."""
        if self.save_file():
            self.status_message = f"Saved to {self.state.path}"
