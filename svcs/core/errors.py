"""Error types raised by SVCS core operations.

Every user-facing failure is an SvcsError subclass. The CLI catches them at
the command boundary, prints the message (and hint) and exits with 1.
"""

from __future__ import annotations


class SvcsError(Exception):
    """Base class for user-facing SVCS failures."""

    def __init__(self, message: str, hint: str | None = None):
        super().__init__(message)
        self.message = message
        self.hint = hint


class UsageError(SvcsError):
    """A required argument is missing or malformed."""


class NotFoundError(SvcsError):
    """A file or commit reference does not exist."""


class UnconfiguredError(SvcsError):
    """A commit was attempted before a username was configured."""


class NothingToCommitError(SvcsError):
    """No tracked file has changed since the last commit."""


class DetachedHeadError(SvcsError):
    """Head is behind the latest commit in the log."""

    def __init__(self, latest: str):
        super().__init__(
            f"You need to checkout the latest version ({latest}) before you can commit new changes"
        )
        self.latest = latest


class CorruptLogError(SvcsError):
    """The log file does not match the expected grammar."""


class CorruptReferenceError(CorruptLogError):
    """A commit hash needed for a diff is missing from the log."""
