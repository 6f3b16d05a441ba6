"""Environment utilities for SVCS."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def is_debug_mode() -> bool:
    """Check if debug mode is enabled.

    Returns:
        True if SVCS_DEBUG is set to a truthy value
    """
    val = os.environ.get("SVCS_DEBUG", "").lower()
    return val in ("1", "true", "yes", "on")


def log_debug(message: str) -> None:
    """Log debug message to stderr.

    Only outputs if SVCS_DEBUG is set.
    """
    if is_debug_mode():
        print(f"[svcs] {message}", file=sys.stderr)


def get_repo_root() -> Path:
    """Get the repository root.

    Returns:
        SVCS_ROOT if set, otherwise the current working directory
    """
    val = os.environ.get("SVCS_ROOT")
    if isinstance(val, str) and val.strip():
        return Path(val.strip()).expanduser()
    return Path.cwd()
