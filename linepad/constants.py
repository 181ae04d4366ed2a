"""Constants and configuration for the linepad editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    APP_NAME = "linepad"

    # Line-number gutter: "{:>4} " before each row
    LINE_NUMBER_WIDTH = 4
    GUTTER_WIDTH = LINE_NUMBER_WIDTH + 1

    # Viewport used until the terminal reports its size
    DEFAULT_WIDTH = 80
    DEFAULT_HEIGHT = 24

    # File operations
    FILE_ENCODING = "utf-8"

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize

    # Files under the platformdirs config/log directories
    CONFIG_FILENAME = "config.json"
    LOG_FILENAME = "linepad.log"

    # Status line
    STATUS_KEYS = "Ctrl-S save | Ctrl-Q quit"
    NO_NAME = "[No Name]"
    MODIFIED_MARKER = " [+]"

    USAGE = "usage: linepad [-h] [-V] [FILE]"
    HELP = """linepad - a minimal terminal text editor.

usage: linepad [-h] [-V] [FILE]

Opens FILE for editing, creating it if it does not exist.

options:
  -h, --help     show this help message and exit
  -V, --version  print version information and exit

keys:
  Arrow keys     Move the cursor
  Enter          Split the line at the cursor
  Backspace      Delete the character before the cursor
  Ctrl-S         Save
  Ctrl-Q         Quit"""
