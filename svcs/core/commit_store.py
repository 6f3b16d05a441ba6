"""Commit storage for SVCS.

Each commit is a directory named after its hash holding full copies of
every file tracked at commit time, laid out like the working tree.
"""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from pathlib import Path

from ..utils.env import log_debug
from ..utils.fs import iter_relative_files
from .hashing import file_fingerprint
from .types import CommitHash


class CommitStore:
    """Manages commit snapshot directories."""

    def __init__(self, commits_dir: Path, project_root: Path):
        """Initialize commit store.

        Args:
            commits_dir: Directory holding one subdirectory per commit
            project_root: Working tree root that tracked paths are relative to
        """
        self.commits_dir = Path(commits_dir)
        self.project_root = Path(project_root)

    def commit_dir(self, commit_hash: CommitHash) -> Path:
        return self.commits_dir / commit_hash.value

    def exists(self, commit_hash: CommitHash) -> bool:
        return self.commit_dir(commit_hash).is_dir()

    def snapshot(self, commit_hash: CommitHash, paths: Iterable[str]) -> dict[str, str]:
        """Copy the given working-tree files into the commit's directory.

        An existing directory for the same hash is written over.

        Args:
            commit_hash: Commit to store the files under
            paths: Tracked paths relative to the project root

        Returns:
            Mapping of path -> fingerprint of the copied content
        """
        target_dir = self.commit_dir(commit_hash)
        if target_dir.exists():
            log_debug(f"commit {commit_hash} already exists; overwriting its files")

        fingerprints = {}
        for rel_path in sorted(paths):
            src = self.project_root / rel_path
            dst = target_dir / rel_path
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src, dst)
            fingerprints[rel_path] = file_fingerprint(dst)

        return fingerprints

    def list_files(self, commit_hash: CommitHash) -> list[str]:
        """All files stored for a commit, as sorted relative paths."""
        return iter_relative_files(self.commit_dir(commit_hash))

    def restore_file(self, commit_hash: CommitHash, rel_path: str) -> Path:
        """Copy one stored file back over the working tree.

        Returns:
            The working-tree path that was written
        """
        src = self.commit_dir(commit_hash) / rel_path
        dst = self.project_root / rel_path
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dst)
        return dst
