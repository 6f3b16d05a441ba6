"""Configuration schemas for SVCS.

Defines dataclasses for the on-disk repository layout and the user config.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class RepoLayout:
    """Locations of the repository state files, relative to the root."""
    root: Path
    vcs_dir_name: str = "vcs"
    index_name: str = "index.txt"
    log_name: str = "log.txt"
    head_name: str = "head.txt"
    config_name: str = "config.txt"
    commits_dir_name: str = "commits"

    @property
    def vcs_dir(self) -> Path:
        return self.root / self.vcs_dir_name

    @property
    def index_file(self) -> Path:
        return self.vcs_dir / self.index_name

    @property
    def log_file(self) -> Path:
        return self.vcs_dir / self.log_name

    @property
    def head_file(self) -> Path:
        return self.vcs_dir / self.head_name

    @property
    def config_file(self) -> Path:
        return self.vcs_dir / self.config_name

    @property
    def commits_dir(self) -> Path:
        return self.vcs_dir / self.commits_dir_name


@dataclass
class UserConfig:
    """User settings stored as `<key>: <value>` lines."""
    values: dict[str, str] = field(default_factory=dict)

    NAME_KEY = "name"

    @property
    def name(self) -> str | None:
        name = self.values.get(self.NAME_KEY)
        return name if name else None

    @classmethod
    def from_text(cls, text: str) -> UserConfig:
        """Parse config text, skipping lines without a `: ` separator."""
        values: dict[str, str] = {}
        for line in text.split("\n"):
            key, sep, value = line.partition(": ")
            if not sep or not key:
                continue
            values[key] = value
        return cls(values=values)

    def to_text(self) -> str:
        return "".join(f"{key}: {value}\n" for key, value in self.values.items())
