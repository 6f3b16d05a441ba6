"""Core modules for SVCS."""

from .commit_store import CommitStore
from .controller import CheckoutResult, CommitResult, SvcsController
from .errors import SvcsError
from .types import CommitHash, Diff, LogEntry

__all__ = [
    "CommitStore",
    "CheckoutResult",
    "CommitResult",
    "SvcsController",
    "SvcsError",
    "CommitHash",
    "Diff",
    "LogEntry",
]
