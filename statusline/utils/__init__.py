"""Utility modules for status-line."""

from .fs import read_lines, safe_json_load
from .env import get_config_path, get_global_statusline_dir, get_home_dir, is_debug_mode

__all__ = [
    "read_lines",
    "safe_json_load",
    "get_config_path",
    "get_global_statusline_dir",
    "get_home_dir",
    "is_debug_mode",
]
