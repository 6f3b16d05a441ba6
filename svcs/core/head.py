"""Pointer to the currently checked-out commit."""

from __future__ import annotations

from pathlib import Path

from ..utils.fs import atomic_write, read_text_or_none
from .errors import CorruptLogError
from .types import CommitHash


class Head:
    """The head file holds a single commit hash."""

    def __init__(self, head_file: Path):
        self.head_file = Path(head_file)

    def get(self) -> CommitHash | None:
        """Return the current commit, or None before the first commit."""
        text = read_text_or_none(self.head_file)
        if text is None or not text.strip():
            return None
        try:
            return CommitHash(text.strip())
        except ValueError as e:
            raise CorruptLogError(f"Head file is corrupt: {e}") from e

    def set(self, commit_hash: CommitHash) -> None:
        atomic_write(self.head_file, f"{commit_hash}\n", mode="w")
