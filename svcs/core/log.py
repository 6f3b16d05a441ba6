"""Append-only commit log.

Each line is `<hash> | <author>: <message>`, oldest first. The log is
all-or-nothing: a single malformed line makes the whole log unreadable.
"""

from __future__ import annotations

import re
from pathlib import Path

from ..utils.fs import append_line, read_text_or_none
from .errors import CorruptLogError, NotFoundError
from .types import LATEST, CommitHash, LogEntry


LOG_LINE_RE = re.compile(r"(?P<hash>[a-f0-9]+) \| (?P<author>[^:]+): (?P<message>.*)")


class CommitLog:
    """Reads and appends commit records."""

    def __init__(self, log_file: Path):
        self.log_file = Path(log_file)

    def append(self, commit_hash: CommitHash, message: str, author: str) -> LogEntry:
        """Append one entry; durable when this returns."""
        entry = LogEntry(author=author, commit_hash=commit_hash, message=message)
        append_line(self.log_file, entry.format())
        return entry

    def load_all(self) -> list[LogEntry]:
        """Parse every entry, oldest first.

        Raises:
            CorruptLogError: If any line doesn't match the log grammar
        """
        text = read_text_or_none(self.log_file)
        if text is None:
            return []

        text = text.rstrip("\n")
        if not text:
            return []

        entries = []
        for lineno, line in enumerate(text.split("\n"), 1):
            match = LOG_LINE_RE.fullmatch(line)
            if match is None:
                raise CorruptLogError(
                    "Log file is corrupt.",
                    hint=f"Line {lineno} doesn't match '<hash> | <author>: <message>'.",
                )
            entries.append(LogEntry(
                author=match.group("author"),
                commit_hash=CommitHash(match.group("hash")),
                message=match.group("message"),
            ))
        return entries

    def latest(self) -> CommitHash | None:
        entries = self.load_all()
        return entries[-1].commit_hash if entries else None

    def resolve(self, ref: str) -> CommitHash:
        """Resolve a user reference (a hash or `latest`) to a logged commit.

        Raises:
            NotFoundError: If the reference doesn't name a commit in the log
        """
        entries = self.load_all()
        ref = ref.strip()

        if ref == LATEST:
            if not entries:
                raise NotFoundError("Commit does not exist.", hint="No commits yet.")
            return entries[-1].commit_hash

        for entry in entries:
            if entry.commit_hash.value == ref:
                return entry.commit_hash
        raise NotFoundError("Commit does not exist.")
