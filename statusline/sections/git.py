"""Git branch section."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config.types import Theme
from ..core.git import GitBranchResolver
from ..core.paths import resolve_working_dir
from ..session.types import InputSnapshot

BRANCH_GLYPHS = "\uf09b \ue0a0"


@dataclass(frozen=True, slots=True)
class GitBranchSection:
    """Current branch; tags and detached commits are shown by label."""

    snapshot: InputSnapshot
    theme: Theme = field(default_factory=Theme)
    resolver: GitBranchResolver = field(default_factory=GitBranchResolver)

    def render(self) -> str:
        ref = self.resolver.resolve_ref(resolve_working_dir(self.snapshot))
        text = f"{BRANCH_GLYPHS}{ref.label}" if ref.kind == "branch" else ref.label
        return f"{self.theme.git}{text}"
