"""Configuration management for status-line."""

from .types import (
    RESET,
    Theme,
    StatuslineConfig,
    truecolor,
)
from .loader import ConfigLoader

__all__ = [
    "RESET",
    "Theme",
    "StatuslineConfig",
    "truecolor",
    "ConfigLoader",
]
