"""Diff computation and checkout application.

Commits store full snapshots rather than deltas, so the changes between
two commits are rebuilt from the log: walking from one commit towards the
other, every file found in a visited commit's directory is assigned to that
commit, and later visits win. The result points each path at the stored
copy closest to the target.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..utils.env import log_debug
from .commit_store import CommitStore
from .errors import CorruptReferenceError
from .types import CommitHash, Diff, LogEntry


def _position(entries: Sequence[LogEntry], commit_hash: CommitHash | None) -> int:
    if commit_hash is not None:
        for i, entry in enumerate(entries):
            if entry.commit_hash == commit_hash:
                return i
    raise CorruptReferenceError(
        "Log file is corrupt.",
        hint=f"Commit {commit_hash} is not in the log.",
    )


def compute_diff(
    from_hash: CommitHash | None,
    to_hash: CommitHash,
    entries: Sequence[LogEntry],
    store: CommitStore,
) -> Diff:
    """Compute which stored copies turn the `from_hash` tree into `to_hash`.

    Args:
        from_hash: Currently checked-out commit
        to_hash: Commit to move to
        entries: The full log, oldest first
        store: Commit store holding the snapshots

    Returns:
        Diff mapping each path to the commit to restore it from;
        empty when both hashes are equal

    Raises:
        CorruptReferenceError: If either hash is missing from the log
    """
    if from_hash == to_hash:
        return Diff()

    walk = list(entries)
    from_pos = _position(walk, from_hash)
    to_pos = _position(walk, to_hash)

    # Going back in history: walk the reversed log so we always move forward.
    if from_pos > to_pos:
        walk.reverse()
        from_pos = len(walk) - 1 - from_pos
        to_pos = len(walk) - 1 - to_pos

    file_diffs: dict[str, CommitHash] = {}
    for entry in walk[from_pos + 1:to_pos + 1]:
        for rel_path in store.list_files(entry.commit_hash):
            file_diffs[rel_path] = entry.commit_hash

    log_debug(f"diff {from_hash} -> {to_hash}: {len(file_diffs)} files")
    return Diff(file_diffs)


def apply_diff(diff: Diff, store: CommitStore) -> int:
    """Overwrite working-tree files with the stored copies named in the diff.

    Files not in the diff are left alone, including uncommitted edits.

    Returns:
        Number of files written
    """
    written = 0
    for rel_path, commit_hash in sorted(diff.file_diffs.items()):
        store.restore_file(commit_hash, rel_path)
        log_debug(f"checkout: {rel_path} <- {commit_hash}")
        written += 1
    return written
