"""Facade over config resolution and the three stampers.

Each operation resolves configuration first, then delegates to its
stamper. Errors come back unchanged as ``Err`` values; the CLI maps them
to exit codes.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime

from changelog_version.core.config import ConfigProvider, parse_config
from changelog_version.core.options import ReleaseInfo, ResolvedOptions
from changelog_version.core.result import Err, Result
from changelog_version.output.console import ConsoleProtocol, RichConsole
from changelog_version.platform.files import FileSystem, LocalFileSystem
from changelog_version.stampers import (
    ChangelogError,
    ChangelogStamper,
    EntryVerifier,
    UnreleasedMarkerManager,
)


class ChangelogVersion:
    def __init__(
        self,
        options: Mapping[str, object] | None = None,
        *,
        console: ConsoleProtocol | None = None,
        fs: FileSystem | None = None,
        provider: ConfigProvider | None = None,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._explicit: dict[str, object] = dict(options or {})
        self._console: ConsoleProtocol = console or RichConsole()
        self._fs: FileSystem = fs or LocalFileSystem()
        self._provider = provider
        self._now = now or datetime.now

    def resolve_options(self) -> Result[ResolvedOptions, ChangelogError]:
        """Resolve explicit options against the project config source."""
        return parse_config(self._explicit, console=self._console, provider=self._provider)

    def prepare(self) -> Result[bool, ChangelogError]:
        """Prepend a fresh unreleased marker; Ok(False) when already present."""
        options = self.resolve_options()
        if isinstance(options, Err):
            return options
        stamper = UnreleasedMarkerManager(options.value, fs=self._fs, console=self._console)
        return stamper.stamp_unreleased()

    def release(self) -> Result[ReleaseInfo, ChangelogError]:
        """Replace the unreleased tag with the version / date stamp."""
        options = self.resolve_options()
        if isinstance(options, Err):
            return options
        stamper = ChangelogStamper(
            options.value, fs=self._fs, console=self._console, now=self._now
        )
        return stamper.release()

    def verify(self) -> Result[None, ChangelogError]:
        """Fail with UnreleasedEntryNotFound when the tag is missing."""
        options = self.resolve_options()
        if isinstance(options, Err):
            return options
        verifier = EntryVerifier(options.value, fs=self._fs, console=self._console)
        return verifier.verify()
