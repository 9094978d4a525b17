"""Configuration loader for status-line."""

from __future__ import annotations

from pathlib import Path

from ..utils.env import get_config_path
from ..utils.fs import safe_json_load
from .types import StatuslineConfig


class ConfigLoader:
    """Loads the optional user configuration file."""

    def __init__(self, config_path: Path | None = None):
        """Initialize config loader.

        Args:
            config_path: Explicit config file (defaults to ~/.statusline/config.json)
        """
        self.config_path = config_path
        self._config: StatuslineConfig | None = None

    @property
    def config(self) -> StatuslineConfig:
        """Get loaded configuration, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self) -> StatuslineConfig:
        """Load configuration.

        A missing or unreadable file, or one that does not hold a JSON object,
        yields the defaults.

        Returns:
            StatuslineConfig
        """
        path = self.config_path or get_config_path()
        if path is None or not path.exists():
            return StatuslineConfig()

        data = safe_json_load(path, {})
        if not isinstance(data, dict):
            return StatuslineConfig()
        return StatuslineConfig.from_dict(data)
