"""SVCS controller - main orchestrator.

Coordinates the index, log, head and commit store for the add, commit,
log, checkout and config operations. Every operation loads state fresh
from disk and raises an SvcsError subclass on user-facing failures.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ..config import ConfigStore, RepoLayout
from ..utils.env import log_debug
from ..utils.fs import ensure_dir
from .commit_store import CommitStore
from .diff import apply_diff, compute_diff
from .errors import (
    DetachedHeadError,
    NothingToCommitError,
    NotFoundError,
    UnconfiguredError,
    UsageError,
)
from .hashing import commit_fingerprint
from .head import Head
from .index import Index
from .log import CommitLog
from .types import CommitHash, LogEntry


@dataclass(frozen=True)
class CommitResult:
    """Outcome of a successful commit."""
    commit_hash: CommitHash
    file_count: int
    staged_count: int


@dataclass(frozen=True)
class CheckoutResult:
    """Outcome of a successful checkout."""
    commit_hash: CommitHash
    files_written: int


class SvcsController:
    """Main controller for SVCS operations."""

    def __init__(self, project_root: Path | str | None = None):
        """Initialize controller.

        Args:
            project_root: Repository root directory (defaults to cwd)
        """
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.layout = RepoLayout(root=self.project_root)
        self._config_store: ConfigStore | None = None
        self._store: CommitStore | None = None

    @property
    def config_store(self) -> ConfigStore:
        """Get config store (lazy init)."""
        if self._config_store is None:
            self._config_store = ConfigStore(self.layout.config_file)
        return self._config_store

    @property
    def store(self) -> CommitStore:
        """Get commit store (lazy init)."""
        if self._store is None:
            self._store = CommitStore(
                commits_dir=self.layout.commits_dir,
                project_root=self.project_root,
            )
        return self._store

    @property
    def log(self) -> CommitLog:
        return CommitLog(self.layout.log_file)

    @property
    def head(self) -> Head:
        return Head(self.layout.head_file)

    def init(self) -> Path:
        """Create the vcs directory layout if it doesn't exist yet.

        Returns:
            Path to the vcs directory
        """
        if not self.layout.commits_dir.exists():
            ensure_dir(self.layout.commits_dir)
            log_debug(f"initialized repository at {self.layout.vcs_dir}")
        return self.layout.vcs_dir

    def load_index(self) -> Index:
        return Index.load(self.layout.index_file, self.project_root)

    # -- config --------------------------------------------------------

    def get_author(self) -> str | None:
        return self.config_store.get_author()

    def set_author(self, name: str) -> str:
        """Store the username used as commit author."""
        name = name.strip()
        if not name:
            raise UsageError("The username must not be empty.")
        if ":" in name or "\n" in name or "\r" in name:
            raise UsageError("The username must be a single line without ':'.")

        self.init()
        self.config_store.set_author(name)
        return name

    # -- add -----------------------------------------------------------

    def tracked_files(self) -> list[str]:
        return sorted(self.load_index().tracked_files())

    def add(self, paths: list[str]) -> list[str]:
        """Track files.

        All paths are checked before the index is touched, so a missing
        file leaves the index unchanged.

        Args:
            paths: File paths, relative to the project root or absolute

        Returns:
            The normalized paths, in the order given
        """
        normalized = [self._normalize_path(p) for p in paths]

        self.init()
        index = self.load_index()
        for rel_path in normalized:
            if index.add(rel_path):
                log_debug(f"add: tracking {rel_path}")
        index.save()
        return normalized

    def _normalize_path(self, path: str) -> str:
        # The index stores one path per line.
        if "\n" in path or "\r" in path:
            raise UsageError(f"{path!r} can't be tracked: line breaks aren't allowed in paths.")

        root = self.project_root.absolute()
        full = Path(os.path.normpath(root / path))

        try:
            rel = full.relative_to(root)
        except ValueError:
            raise UsageError(f"'{path}' is outside the repository.") from None

        if not rel.parts or rel.parts[0] == self.layout.vcs_dir_name:
            raise UsageError(f"'{path}' can't be tracked.")
        if not full.exists():
            raise NotFoundError(f"Can't find '{path}'.")
        if not full.is_file():
            raise UsageError(f"'{path}' is not a file.")

        return rel.as_posix()

    # -- commit --------------------------------------------------------

    def commit(self, message: str | None) -> CommitResult:
        """Snapshot every tracked file into a new commit.

        Raises:
            UsageError: If the message is missing or spans several lines
            UnconfiguredError: If no username is configured
            NothingToCommitError: If no tracked file changed
            DetachedHeadError: If an older commit is checked out
        """
        if not message or not message.strip():
            raise UsageError("Message was not passed.")
        if "\n" in message or "\r" in message:
            raise UsageError("The commit message must be a single line.")

        author = self.get_author()
        if author is None:
            raise UnconfiguredError(
                "Please configure your name first.",
                hint="Run 'svcs config <name>' to set your username.",
            )

        index = self.load_index()
        staged = index.staged_files()
        if not staged:
            raise NothingToCommitError("Nothing to commit.")

        self._require_latest_version()

        commit_hash = commit_fingerprint(staged, message, self.project_root)
        self.init()
        fingerprints = self.store.snapshot(commit_hash, index.tracked_files())
        for rel_path, fingerprint in fingerprints.items():
            index.update_version(rel_path, fingerprint)

        index.save()
        self.log.append(commit_hash, message, author)
        self.head.set(commit_hash)
        log_debug(f"commit {commit_hash}: {len(staged)} staged, {len(fingerprints)} stored")

        return CommitResult(
            commit_hash=commit_hash,
            file_count=len(fingerprints),
            staged_count=len(staged),
        )

    def _require_latest_version(self) -> None:
        """Refuse to commit on top of an older, checked-out commit."""
        latest = self.log.latest()
        if latest is None:
            return
        if self.head.get() != latest:
            raise DetachedHeadError(latest.value)

    # -- log -----------------------------------------------------------

    def list_log(self) -> list[LogEntry]:
        """Log entries, newest first."""
        return list(reversed(self.log.load_all()))

    # -- checkout ------------------------------------------------------

    def checkout(self, ref: str | None) -> CheckoutResult:
        """Move the working tree to another commit.

        Args:
            ref: A commit hash from the log, or `latest`

        Raises:
            UsageError: If no reference was given
            NotFoundError: If the reference doesn't resolve
            CorruptLogError: If the diff can't be computed from the log
        """
        if not ref or not ref.strip():
            raise UsageError("Commit id was not passed.")

        target = self.log.resolve(ref)
        current = self.head.get()

        diff = compute_diff(current, target, self.log.load_all(), self.store)
        written = apply_diff(diff, self.store)
        self.head.set(target)

        return CheckoutResult(commit_hash=target, files_written=written)
