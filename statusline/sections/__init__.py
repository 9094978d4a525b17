"""Status line sections."""

from .base import Section
from .context import ContextSection, context_color, format_size
from .git import GitBranchSection
from .path import PathSection

__all__ = [
    "Section",
    "ContextSection",
    "GitBranchSection",
    "PathSection",
    "context_color",
    "format_size",
]
