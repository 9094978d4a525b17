"""Configuration schemas for status-line.

Defines dataclasses for the color table and the rendering thresholds.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

RESET = "\033[0m"

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def truecolor(hex_color: str) -> str | None:
    """Convert a #RRGGBB color to a 24-bit ANSI foreground sequence.

    Returns:
        Escape sequence, or None if the value is not a hex color
    """
    match = _HEX_COLOR.match(hex_color.strip())
    if not match:
        return None
    r, g, b = (int(part, 16) for part in match.groups())
    return f"\033[38;2;{r};{g};{b}m"


@dataclass(frozen=True, slots=True)
class Theme:
    """Escape sequences used by the sections."""
    reset: str = RESET
    path: str = "\033[38;2;12;160;216m"             # #0CA0D8
    git: str = "\033[38;2;20;165;174m"              # #14A5AE
    context_ok: str = "\033[38;2;69;241;194m"       # #45F1C2
    context_warning: str = "\033[38;2;205;66;119m"  # #CD4277

    @classmethod
    def from_dict(cls, data: dict) -> Theme:
        """Create Theme from a dictionary of hex colors."""
        default = cls()

        def color(key: str, fallback: str) -> str:
            val = data.get(key)
            if not isinstance(val, str):
                return fallback
            return truecolor(val) or fallback

        return cls(
            path=color("path", default.path),
            git=color("git", default.git),
            context_ok=color("contextOk", default.context_ok),
            context_warning=color("contextWarning", default.context_warning),
        )


@dataclass(frozen=True, slots=True)
class StatuslineConfig:
    """Main status-line configuration."""
    theme: Theme = field(default_factory=Theme)
    git_timeout_seconds: float | None = 2.0

    @classmethod
    def from_dict(cls, data: dict) -> StatuslineConfig:
        """Create StatuslineConfig from dictionary."""
        default = cls()

        colors = data.get("colors", {})
        theme = Theme.from_dict(colors) if isinstance(colors, dict) else default.theme

        timeout = data.get("gitTimeoutSeconds", default.git_timeout_seconds)
        if timeout is None or isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            timeout = default.git_timeout_seconds
        elif timeout <= 0:
            timeout = None  # disabled
        else:
            timeout = float(timeout)

        return cls(theme=theme, git_timeout_seconds=timeout)
