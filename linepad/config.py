"""User configuration for the editor.

Settings are read from ``config.json`` in the platform's user config
directory. A missing file means defaults; a broken file or bad values are
logged and ignored so the editor always starts.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EditorConfig:
    """Editor preferences."""
    line_numbers: bool = True
    status_line: bool = True
    log_level: str = "WARNING"


def default_config_path() -> Path:
    """Return the platform-appropriate location of the config file."""
    return Path(platformdirs.user_config_dir(EditorConstants.APP_NAME)) / EditorConstants.CONFIG_FILENAME


def validate_setting(key: str, value: Any) -> bool:
    """Validate a setting value.

    Args:
        key: Setting key name.
        value: Setting value to validate.

    Returns:
        True if setting is valid, False otherwise.
    """
    if key in ('line_numbers', 'status_line'):
        return isinstance(value, bool)

    if key == 'log_level':
        return isinstance(value, str) and value.upper() in LOG_LEVELS

    # Unknown settings are considered valid (forward compatibility)
    return True


def _read_settings(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load config from {path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning("Config file has invalid format (not a dict), ignoring")
        return {}
    return data


def load_config(path: Optional[Path] = None) -> EditorConfig:
    """Load the editor configuration.

    Args:
        path: Config file to read. Defaults to the user config directory.

    Returns:
        An EditorConfig with every valid setting from the file applied.
    """
    if path is None:
        path = default_config_path()

    settings = _read_settings(Path(path))
    config = EditorConfig()
    known = {f.name for f in fields(EditorConfig)}

    for key, value in settings.items():
        if key not in known:
            logger.debug(f"Ignoring unknown config key {key!r}")
            continue
        if not validate_setting(key, value):
            logger.warning(f"Invalid value {value!r} for {key!r} in {path}, using default")
            continue
        if key == 'log_level':
            value = value.upper()
        setattr(config, key, value)

    return config
