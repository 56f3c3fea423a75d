"""Behaviour shared by every stamper.

A stamper reads or modifies the changelog in some fashion. All paths are
resolved against ``options.project_root`` before any I/O.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from changelog_version.core.options import ResolvedOptions
from changelog_version.core.result import Err, Ok, Result
from changelog_version.output.console import ConsoleProtocol, RichConsole, Style
from changelog_version.platform.files import FileSystem, LocalFileSystem

from .errors import FileReadFailed, FileWriteFailed


class BaseStamper:
    def __init__(
        self,
        options: ResolvedOptions,
        *,
        fs: FileSystem | None = None,
        console: ConsoleProtocol | None = None,
    ) -> None:
        self.options = options
        self.fs: FileSystem = fs or LocalFileSystem()
        self.console: ConsoleProtocol = console or RichConsole()

    def _read_file(
        self, path: Path, role: Literal["changelog", "package"]
    ) -> Result[str, FileReadFailed]:
        try:
            return Ok(self.fs.read_text(path))
        except OSError as e:
            self.console.print(f"read failed: {path}: {e}", Style.DIM)
            return Err(FileReadFailed(path=path, role=role, reason=str(e)))

    def _read_changelog(self) -> Result[str, FileReadFailed]:
        return self._read_file(self.options.changelog_path, "changelog")

    def _write_changelog(self, data: str) -> Result[None, FileWriteFailed]:
        path = self.options.changelog_path
        try:
            self.fs.write_text(path, data)
        except OSError as e:
            self.console.print(f"write failed: {path}: {e}", Style.DIM)
            return Err(FileWriteFailed(path=path, reason=str(e)))
        return Ok(None)
