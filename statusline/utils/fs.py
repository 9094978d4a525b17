"""File system utilities for status-line."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def safe_json_load(file_path: Path | str, default: Any = None) -> Any:
    """Safely load JSON file with fallback.

    Args:
        file_path: Path to JSON file
        default: Default value if file doesn't exist or is invalid

    Returns:
        Parsed JSON or default value
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError):
        return default if default is not None else {}


def read_lines(file_path: Path | str) -> list[str]:
    """Read a text file fully and return its lines.

    Lines are split on LF only, as in JSONL; other Unicode line breaks stay
    inside the line. Undecodable bytes are replaced rather than raised.

    Raises:
        OSError: If the file cannot be opened or read
    """
    with open(file_path, encoding="utf-8", errors="replace", newline="") as f:
        return f.read().split("\n")
