"""Environment utilities for status-line."""

from __future__ import annotations

import os
from pathlib import Path


def is_debug_mode() -> bool:
    """Check if debug mode is enabled.

    Returns:
        True if STATUSLINE_DEBUG is set to a truthy value
    """
    val = os.environ.get("STATUSLINE_DEBUG", "").lower()
    return val in ("1", "true", "yes", "on")


def get_home_dir() -> Path | None:
    """Get user home directory.

    Returns:
        Path to home directory, or None if it cannot be resolved
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def get_global_statusline_dir() -> Path | None:
    """Get global status-line directory (~/.statusline).

    Returns:
        Path to global config directory, or None without a home directory
    """
    home = get_home_dir()
    return home / ".statusline" if home is not None else None


def get_config_path() -> Path | None:
    """Get the config file path.

    STATUSLINE_CONFIG overrides the default ~/.statusline/config.json.
    """
    val = os.environ.get("STATUSLINE_CONFIG")
    if isinstance(val, str) and val.strip():
        return Path(val.strip()).expanduser()
    base = get_global_statusline_dir()
    return base / "config.json" if base is not None else None
