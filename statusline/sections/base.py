"""Section protocol.

A section is anything that turns the session snapshot into one styled piece
of the status line. Sections keep no state beyond what they are built with.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Section(Protocol):
    def render(self) -> str:
        """Return the color sequence and text for this section."""
        ...
