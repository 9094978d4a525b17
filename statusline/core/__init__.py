"""Core modules for status-line."""

from .git import GitBranchResolver, GitProbe, GitRef, NO_GIT, run_git
from .paths import format_path, resolve_working_dir
from .transcript import TokenUsage, TranscriptRecord, compute_token_usage, parse_record

__all__ = [
    "GitBranchResolver",
    "GitProbe",
    "GitRef",
    "NO_GIT",
    "run_git",
    "format_path",
    "resolve_working_dir",
    "TokenUsage",
    "TranscriptRecord",
    "compute_token_usage",
    "parse_record",
]
