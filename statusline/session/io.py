"""I/O utilities for the statusline command.

Protocol:
- Stdout: exactly one rendered line
- Exit 0: line printed
- Exit 1: input could not be read or parsed (stderr shown to user)
"""

from __future__ import annotations

import json
import sys
from typing import NoReturn

from ..utils.env import is_debug_mode
from .types import InputSnapshot


class SnapshotInputError(Exception):
    """Raised when statusline input cannot be read or parsed."""


def read_snapshot() -> InputSnapshot:
    """Read and parse the session descriptor from stdin.

    Returns:
        InputSnapshot built from the JSON object

    Raises:
        SnapshotInputError: If input cannot be read or parsed
    """
    try:
        raw = sys.stdin.read().strip()
    except (OSError, UnicodeDecodeError) as e:
        raise SnapshotInputError(f"Unable to read stdin: {e}") from e

    if not raw:
        raise SnapshotInputError("No input received on stdin")

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as e:
        raise SnapshotInputError(f"Invalid JSON: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SnapshotInputError("Statusline input must be a JSON object")

    return InputSnapshot.from_dict(data)


def emit_line(line: str) -> None:
    """Write the rendered status line to stdout."""
    print(line)


def exit_error(message: str) -> NoReturn:
    """Exit with an error.

    Message goes to stderr and nothing is printed on stdout.
    """
    print(message, file=sys.stderr)
    sys.exit(1)


def log_debug(message: str) -> None:
    """Log debug message to stderr.

    Only outputs if STATUSLINE_DEBUG is set.
    """
    if is_debug_mode():
        print(f"[statusline] {message}", file=sys.stderr)
