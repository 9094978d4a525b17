"""Status line composition.

Renders the sections in order and joins them into the final line. A section
that fails is left out; the rest of the line is still produced.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..config.types import RESET, StatuslineConfig
from ..sections.base import Section
from ..sections.context import ContextSection
from ..sections.git import GitBranchSection
from ..sections.path import PathSection
from ..session.io import log_debug
from ..session.types import InputSnapshot
from .git import GitBranchResolver


def default_sections(snapshot: InputSnapshot, config: StatuslineConfig | None = None) -> list[Section]:
    """Path, git branch, context - in display order."""
    config = config or StatuslineConfig()
    return [
        PathSection(snapshot, config.theme),
        GitBranchSection(
            snapshot,
            config.theme,
            GitBranchResolver(timeout=config.git_timeout_seconds),
        ),
        ContextSection(snapshot, config.theme),
    ]


class StatusLineComposer:
    """Joins rendered sections into one line."""

    def __init__(self, sections: Iterable[Section], reset: str | None = None):
        """Initialize composer.

        Args:
            sections: Sections in display order
            reset: Reset sequence written before and after every section
        """
        self.sections = list(sections)
        self.reset = reset if reset is not None else RESET

    @classmethod
    def for_snapshot(cls, snapshot: InputSnapshot, config: StatuslineConfig | None = None) -> StatusLineComposer:
        config = config or StatuslineConfig()
        return cls(default_sections(snapshot, config), reset=config.theme.reset)

    def compose(self) -> str:
        parts = [self.reset]
        for section in self.sections:
            try:
                rendered = section.render()
            except Exception as e:
                log_debug(f"{type(section).__name__} failed: {e}")
                continue
            parts.append(f" {rendered}{self.reset}")
        return "".join(parts)
