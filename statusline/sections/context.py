"""Context window usage section."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config.types import Theme
from ..core.transcript import compute_token_usage
from ..session.types import InputSnapshot

CONTEXT_LIMIT = 90_000
LIMIT_MARKER = "/90k"


def format_size(size: int) -> str:
    """Format a token count: bare integer below 2000, otherwise "X.XK"."""
    if size >= 2000:
        return f"{size / 1000:.1f}K"
    return str(size)


def context_color(tokens: int, theme: Theme) -> str:
    """Warning color once usage goes past CONTEXT_LIMIT."""
    return theme.context_warning if tokens > CONTEXT_LIMIT else theme.context_ok


@dataclass(frozen=True, slots=True)
class ContextSection:
    """Tokens in use by the most recent assistant turn, against the limit."""

    snapshot: InputSnapshot
    theme: Theme = field(default_factory=Theme)

    def render(self) -> str:
        tokens = compute_token_usage(self.snapshot.transcript_path)
        return f"{context_color(tokens, self.theme)}{format_size(tokens)}{LIMIT_MARKER}"
