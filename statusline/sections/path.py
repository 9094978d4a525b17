"""Working directory section."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config.types import Theme
from ..core.paths import format_path
from ..session.types import InputSnapshot


@dataclass(frozen=True, slots=True)
class PathSection:
    """Working directory, home abbreviated."""

    snapshot: InputSnapshot
    theme: Theme = field(default_factory=Theme)

    def render(self) -> str:
        return f"{self.theme.path}{format_path(self.snapshot)}"
