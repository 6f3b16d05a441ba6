"""Content fingerprints for files and commits."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from pathlib import Path

from .types import CommitHash


CHUNK_SIZE = 64 * 1024


def _feed_file(digest, path: Path) -> None:
    with open(path, "rb") as f:
        while True:
            chunk = f.read(CHUNK_SIZE)
            if not chunk:
                break
            digest.update(chunk)


def file_fingerprint(path: Path | str) -> str:
    """SHA-256 of the file's bytes as lowercase hex.

    Raises:
        OSError: If the file cannot be read
    """
    digest = hashlib.sha256()
    _feed_file(digest, Path(path))
    return digest.hexdigest()


def commit_fingerprint(staged_paths: Iterable[str], message: str, root: Path | str) -> CommitHash:
    """Hash a commit from its message and staged file contents.

    The message is fed first, then each path (sorted) followed by the file
    bytes, so the result doesn't depend on the order files were staged in.

    Args:
        staged_paths: Paths relative to root
        message: Commit message
        root: Repository root the paths are relative to

    Returns:
        CommitHash of the combined digest
    """
    root = Path(root)
    digest = hashlib.sha256()
    digest.update(message.encode("utf-8"))

    for rel_path in sorted(staged_paths):
        digest.update(rel_path.encode("utf-8"))
        _feed_file(digest, root / rel_path)

    return CommitHash(digest.hexdigest())
