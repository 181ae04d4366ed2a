from __future__ import annotations

import importlib.metadata
import subprocess
from pathlib import Path
from typing import Optional

from . import __version__


def _run_git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
        return out.decode().strip() or None
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None


def get_version() -> str:
    """Return the installed distribution version, or the package version."""
    try:
        return importlib.metadata.version("linepad")
    except importlib.metadata.PackageNotFoundError:
        return __version__


def get_commit() -> Optional[str]:
    """Return the short commit hash when running from a git checkout."""
    here = Path(__file__).resolve().parent
    commit = _run_git(["rev-parse", "--short=7", "HEAD"], cwd=here)
    if commit is None:
        return None
    status = _run_git(["status", "--porcelain"], cwd=here)
    return f"{commit}-dirty" if status else commit


def get_version_string() -> str:
    commit = get_commit()
    if commit:
        return f"linepad {get_version()} ({commit})"
    return f"linepad {get_version()}"
