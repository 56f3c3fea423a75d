"""Filesystem access used by the stampers.

Stampers talk to a ``FileSystem`` so tests can swap in failing or
in-memory implementations. All methods raise ``OSError`` on failure;
callers translate that into typed errors.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

__all__ = ["FileSystem", "LocalFileSystem"]


class FileSystem(Protocol):
    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, content: str) -> None: ...

    def exists(self, path: Path) -> bool: ...

    def touch(self, path: Path) -> None: ...


class LocalFileSystem:
    """UTF-8 text files on the local disk."""

    def read_text(self, path: Path) -> str:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()

    def write_text(self, path: Path, content: str) -> None:
        # Overwrite in place: keeps the file's mode and follows symlinks.
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)

    def exists(self, path: Path) -> bool:
        return path.exists()

    def touch(self, path: Path) -> None:
        # Create empty; no parent dirs, a missing project dir is an error.
        with path.open("w", encoding="utf-8"):
            pass
