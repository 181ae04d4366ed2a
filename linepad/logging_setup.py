"""Log file setup.

The editor owns the screen while it runs, so log records go to a file in
the user log directory instead of stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import platformdirs

from .constants import EditorConstants

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_log_path() -> Path:
    return Path(platformdirs.user_log_dir(EditorConstants.APP_NAME)) / EditorConstants.LOG_FILENAME


def configure_logging(level: str = "WARNING", log_path: Optional[Path] = None) -> logging.Handler:
    """Attach a handler for the ``linepad`` logger and return it.

    Falls back to a NullHandler when the log directory cannot be created.
    """
    if log_path is None:
        log_path = default_log_path()

    package_logger = logging.getLogger(EditorConstants.APP_NAME)
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    handler: logging.Handler
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding='utf-8')
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    except OSError:
        handler = logging.NullHandler()

    package_logger.addHandler(handler)
    package_logger.debug("Logging to %s at level %s", log_path, level)
    return handler
