"""The index of tracked files.

Stores, for every tracked path, the fingerprint of its last committed
content. An empty fingerprint marks a file that was added but never
committed, so it is always staged.
"""

from __future__ import annotations

from pathlib import Path

from ..utils.env import log_debug
from ..utils.fs import atomic_write, read_text_or_none
from .hashing import file_fingerprint


class Index:
    """Tracked paths and their last committed fingerprints."""

    def __init__(self, index_file: Path, root: Path, entries: dict[str, str] | None = None):
        """Initialize index.

        Args:
            index_file: File the index is persisted to
            root: Repository root; tracked paths are relative to it
            entries: Initial path -> fingerprint mapping
        """
        self.index_file = Path(index_file)
        self.root = Path(root)
        self._entries: dict[str, str] = dict(entries or {})

    @classmethod
    def load(cls, index_file: Path, root: Path) -> Index:
        """Load the index from disk (empty if the file doesn't exist)."""
        text = read_text_or_none(index_file)
        entries: dict[str, str] = {}
        if text:
            for line in text.split("\n"):
                if not line.strip():
                    continue
                # Fingerprints never contain ':', paths might.
                path, _, fingerprint = line.rpartition(":")
                entries[path] = fingerprint

        log_debug(f"index: loaded {len(entries)} entries from {index_file}")
        return cls(index_file, root, entries)

    def add(self, path: str) -> bool:
        """Track a path.

        Returns:
            True if the path was newly tracked, False if already tracked
        """
        if path in self._entries:
            return False
        self._entries[path] = ""
        return True

    def staged_files(self) -> set[str]:
        """Tracked paths whose current content differs from the last commit."""
        return {
            path
            for path, committed in self._entries.items()
            if file_fingerprint(self.root / path) != committed
        }

    def tracked_files(self) -> set[str]:
        return set(self._entries)

    def fingerprint(self, path: str) -> str | None:
        return self._entries.get(path)

    def update_version(self, path: str, fingerprint: str) -> None:
        """Record the committed fingerprint of a tracked path."""
        if path not in self._entries:
            raise KeyError(path)
        self._entries[path] = fingerprint

    def is_empty(self) -> bool:
        return not self._entries

    def save(self) -> None:
        """Persist the whole mapping, replacing the previous file."""
        content = "".join(f"{path}:{fingerprint}\n" for path, fingerprint in self._entries.items())
        atomic_write(self.index_file, content, mode="w")
        log_debug(f"index: saved {len(self._entries)} entries")

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)
