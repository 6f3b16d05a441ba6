"""Configuration loader for SVCS.

Reads and writes the per-repository user config (`vcs/config.txt`).
"""

from __future__ import annotations

from pathlib import Path

from ..utils.env import log_debug
from ..utils.fs import atomic_write, read_text_or_none
from .types import UserConfig


class ConfigStore:
    """Loads and persists the user config of one repository."""

    def __init__(self, config_file: Path):
        """Initialize config store.

        Args:
            config_file: Path to the `<key>: <value>` config file
        """
        self.config_file = Path(config_file)
        self._config: UserConfig | None = None

    @property
    def config(self) -> UserConfig:
        """Get loaded configuration, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self) -> UserConfig:
        """Load configuration from disk.

        Returns:
            UserConfig, empty if no config file exists yet
        """
        text = read_text_or_none(self.config_file)
        if text is None:
            return UserConfig()
        return UserConfig.from_text(text)

    def reload(self) -> UserConfig:
        """Force reload configuration."""
        self._config = None
        return self.config

    def get_author(self) -> str | None:
        """Return the configured username, if any."""
        return self.config.name

    def set_author(self, name: str) -> None:
        """Store the username, keeping any other keys."""
        config = self.config
        config.values[UserConfig.NAME_KEY] = name
        atomic_write(self.config_file, config.to_text(), mode="w")
        log_debug(f"config: name set in {self.config_file}")
