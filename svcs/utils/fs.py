"""File system utilities for SVCS.

Provides atomic writes, durable appends, and directory helpers.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def atomic_write(file_path: Path | str, content: str | bytes, mode: str = "w") -> None:
    """Write content atomically using tempfile + rename pattern.

    Args:
        file_path: Target file path
        content: Content to write
        mode: Write mode ('w' for text, 'wb' for binary)
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Create temp file in same directory for atomic rename
    fd, tmp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp"
    )

    try:
        encoding = None if "b" in mode else "utf-8"
        with os.fdopen(fd, mode, encoding=encoding) as f:
            f.write(content)
        os.replace(tmp_path, path)
    except Exception:
        # Clean up temp file on failure
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def append_line(file_path: Path | str, line: str) -> None:
    """Append a single line and flush it to disk before returning.

    Args:
        file_path: Target file path
        line: Line to append (a trailing newline is added if missing)
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if not line.endswith("\n"):
        line += "\n"

    with open(path, "a", encoding="utf-8") as f:
        f.write(line)
        f.flush()
        os.fsync(f.fileno())


def ensure_dir(dir_path: Path | str) -> Path:
    """Ensure directory exists, creating it if necessary.

    Args:
        dir_path: Directory path to create

    Returns:
        Path object for the directory
    """
    path = Path(dir_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def read_text_or_none(file_path: Path | str) -> str | None:
    """Read a UTF-8 text file, returning None if it doesn't exist."""
    try:
        return Path(file_path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def iter_relative_files(base_dir: Path | str) -> list[str]:
    """List every file below base_dir as a sorted POSIX relative path.

    Args:
        base_dir: Directory to walk

    Returns:
        Relative paths, or an empty list if base_dir doesn't exist
    """
    base = Path(base_dir)
    if not base.is_dir():
        return []

    found = []
    for root, _, files in os.walk(base):
        root_path = Path(root)
        for file in files:
            found.append((root_path / file).relative_to(base).as_posix())

    return sorted(found)
