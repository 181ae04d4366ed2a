#!/usr/bin/env python3
"""Linepad - a minimal terminal text editor.

Usage:
    python main.py [filename]

Controls:
    Arrow keys: Move the cursor
    Ctrl-S: Save file
    Ctrl-Q: Quit
    Type to insert text
    Backspace: Delete character before the cursor
    Enter: Split the line at the cursor
"""

import sys
from linepad.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
