"""Working directory display for status-line.

The path and git sections read the same directory, so the resolution rule
lives here next to the home-directory abbreviation.
"""

from __future__ import annotations

import os
from pathlib import Path

from ..session.types import InputSnapshot
from ..utils.env import get_home_dir

HOME_GLYPH = "\uf07b"


def resolve_working_dir(snapshot: InputSnapshot) -> str:
    """Directory shown by the path and git sections.

    Workspace current_dir wins; the raw cwd is the fallback.
    """
    return snapshot.workspace.current_dir or snapshot.cwd


def format_path(snapshot: InputSnapshot, home: Path | str | None = None) -> str:
    """Render the working directory with the home directory abbreviated.

    Args:
        snapshot: Session descriptor
        home: Home directory override (defaults to the user's home)

    Returns:
        "<glyph> ~/rest" under the home directory, "~" when no directory is
        known, otherwise the path unchanged
    """
    work_dir = resolve_working_dir(snapshot)
    if not work_dir:
        return "~"

    home_dir = str(home) if home is not None else str(get_home_dir() or "")
    home_dir = home_dir.rstrip(os.sep)
    if not home_dir:
        return work_dir

    if work_dir == home_dir or work_dir.startswith(home_dir + os.sep):
        return f"{HOME_GLYPH} ~{work_dir[len(home_dir):]}"
    return work_dir
