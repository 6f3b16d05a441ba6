"""Value types shared by the SVCS core."""

from __future__ import annotations

import re
from dataclasses import dataclass, field


LATEST = "latest"

_HEX_RE = re.compile(r"[0-9a-f]+")


@dataclass(frozen=True, slots=True)
class CommitHash:
    """Lowercase hex digest identifying a commit."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _HEX_RE.fullmatch(self.value):
            raise ValueError(f"Invalid commit hash: {self.value!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One commit record in the log."""

    author: str
    commit_hash: CommitHash
    message: str

    def format(self) -> str:
        return f"{self.commit_hash} | {self.author}: {self.message}"


@dataclass(frozen=True, slots=True)
class Diff:
    """Working-tree path -> commit whose stored copy should be restored."""

    file_diffs: dict[str, CommitHash] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.file_diffs

    def __len__(self) -> int:
        return len(self.file_diffs)
