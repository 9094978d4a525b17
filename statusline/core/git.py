"""Git branch resolution for status-line.

Runs a short, ordered chain of git commands in the working directory and
takes the first one that answers. Every failure (no git executable, not a
repository, detached HEAD without a tag, a hung command) only moves on to
the next probe; nothing is raised to the caller.
"""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Literal

from ..session.io import log_debug
from ..session.types import InputSnapshot
from .paths import resolve_working_dir

NO_GIT = "No Git"

RefKind = Literal["branch", "tag", "detached", "none"]

# (args, cwd, timeout) -> trimmed stdout, or None when the command gave nothing
GitRunner = Callable[[tuple[str, ...], Path, float | None], str | None]


@dataclass(frozen=True, slots=True)
class GitRef:
    """What HEAD points at."""

    kind: RefKind
    name: str = ""

    @property
    def label(self) -> str:
        if self.kind == "branch":
            return self.name
        if self.kind == "tag":
            return f"tag:{self.name}"
        if self.kind == "detached":
            return f"detached:{self.name}"
        return NO_GIT


NO_REF = GitRef(kind="none")


@dataclass(frozen=True, slots=True)
class GitProbe:
    kind: RefKind
    args: tuple[str, ...]


PROBES: tuple[GitProbe, ...] = (
    GitProbe("branch", ("branch", "--show-current")),
    # older git, or branch --show-current printing nothing
    GitProbe("branch", ("symbolic-ref", "--short", "HEAD")),
    GitProbe("tag", ("describe", "--tags", "--exact-match")),
    GitProbe("detached", ("rev-parse", "--short", "HEAD")),
)


def run_git(args: tuple[str, ...], cwd: Path, timeout: float | None = None) -> str | None:
    """Run git and return its trimmed stdout.

    Returns:
        Output, or None on a missing executable, non-zero exit, timeout or
        empty output
    """
    try:
        proc = subprocess.run(
            ["git", *args],
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        log_debug(f"git {' '.join(args)} timed out after {timeout}s")
        return None
    except (OSError, subprocess.SubprocessError) as e:
        log_debug(f"git {' '.join(args)} failed: {e}")
        return None

    if proc.returncode != 0:
        return None
    out = proc.stdout.strip()
    return out or None


class GitBranchResolver:
    """Resolves the current branch, tag or commit of a directory."""

    def __init__(
        self,
        runner: GitRunner = run_git,
        *,
        timeout: float | None = 2.0,
        probes: tuple[GitProbe, ...] = PROBES,
    ):
        """Initialize resolver.

        Args:
            runner: Command runner (replaced in tests)
            timeout: Per-command timeout in seconds, None to wait forever
            probes: Ordered probe chain
        """
        self.runner = runner
        self.timeout = timeout
        self.probes = probes

    def resolve_ref(self, work_dir: Path | str) -> GitRef:
        """Resolve what HEAD points at in work_dir."""
        if not work_dir:
            return NO_REF

        path = Path(work_dir)
        if not path.is_dir():
            return NO_REF
        if not os.path.lexists(path / ".git"):
            return NO_REF

        for probe in self.probes:
            out = self.runner(probe.args, path, self.timeout)
            if out:
                return GitRef(kind=probe.kind, name=out)

        log_debug(f"No git ref found in {path}")
        return NO_REF

    def resolve_branch(self, snapshot: InputSnapshot) -> str:
        """Display label for the snapshot's working directory.

        Returns:
            Branch name, "tag:<tag>", "detached:<hash>" or "No Git"
        """
        return self.resolve_ref(resolve_working_dir(snapshot)).label
