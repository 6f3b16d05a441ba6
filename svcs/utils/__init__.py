"""Utility modules for SVCS."""

from .fs import append_line, atomic_write, ensure_dir, iter_relative_files, read_text_or_none
from .env import get_repo_root, is_debug_mode, log_debug

__all__ = [
    "append_line",
    "atomic_write",
    "ensure_dir",
    "iter_relative_files",
    "read_text_or_none",
    "get_repo_root",
    "is_debug_mode",
    "log_debug",
]
