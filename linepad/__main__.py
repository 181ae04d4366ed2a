"""Linepad CLI entry point.

Allows running via `python -m linepad` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
import termios
from typing import Optional

from .constants import EditorConstants

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> int:
    # Very small arg parsing: help, version, and a single filename
    args = sys.argv[1:] if argv is None else argv
    if not args or args[0] in ("-h", "--help"):
        print(EditorConstants.HELP)
        return 0
    if args[0] in ("--version", "-V"):
        from .version import get_version_string
        print(get_version_string())
        return 0
    if len(args) > 1:
        print(EditorConstants.USAGE, file=sys.stderr)
        print("linepad: expected at most one file argument", file=sys.stderr)
        return 2

    # Lazy import to avoid importing UI deps for --help/--version
    from .config import load_config
    from .editor import Editor
    from .logging_setup import configure_logging

    config = load_config()
    configure_logging(config.log_level)

    editor = Editor(config)
    try:
        editor.load_file(args[0])
        editor.run()
    except (OSError, UnicodeDecodeError, termios.error) as e:
        logger.exception("linepad stopped on an unrecoverable error")
        print(f"linepad: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
