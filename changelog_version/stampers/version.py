from __future__ import annotations

import json
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from changelog_version.core.options import ReleaseInfo, ResolvedOptions
from changelog_version.core.result import Err, Ok, Result
from changelog_version.core.structured import as_str_dict, get_present
from changelog_version.core.values import call_hook
from changelog_version.output.console import ConsoleProtocol, Style
from changelog_version.platform.dates import MASKS, format_date
from changelog_version.platform.files import FileSystem

from .base import BaseStamper
from .errors import ChangelogError, MetadataParseFailed, MissingVersionField
from .verify import EntryVerifier


class ChangelogStamper(BaseStamper):
    """Finds the unreleased tag in the changelog and stamps it with version / date.

    Options used:
        package_file: JSON file holding a "version" field.
        unreleased_tag: Text replaced by the release stamp (first occurrence).
        unreleased_tag_format: Stamp template with "{version}" and "{date}".
        date_format: Mask passed to ``format_date``.
        require_unreleased_entry: Refuse to release when the tag is missing.
        on_before_release / on_after_release: Lifecycle hooks. The latter
            receives the ReleaseInfo that was stamped.
    """

    def __init__(
        self,
        options: ResolvedOptions,
        *,
        fs: FileSystem | None = None,
        console: ConsoleProtocol | None = None,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(options, fs=fs, console=console)
        self._now = now

    def release(self) -> Result[ReleaseInfo, ChangelogError]:
        """Stamp the changelog.

        Exceptions raised by the hooks propagate unchanged.
        """
        call_hook(self.options.on_before_release)

        changelog = self._read_changelog()
        if isinstance(changelog, Err):
            return changelog
        package = self._read_file(self.options.package_path, "package")
        if isinstance(package, Err):
            return package

        if self.options.require_unreleased_entry:
            verifier = EntryVerifier(self.options, fs=self.fs, console=self.console)
            gate = verifier.check_contents(changelog.value)
            if isinstance(gate, Err):
                return gate

        date = self._release_date()
        version = self._version(package.value, self.options.package_path)
        if isinstance(version, Err):
            return version

        release_stamp = self._release_stamp(version.value, date)
        updated = self._replace_unreleased_tag(changelog.value, release_stamp)

        written = self._write_changelog(updated)
        if isinstance(written, Err):
            return written

        info = ReleaseInfo(version=version.value, date=date, release_stamp=release_stamp)
        call_hook(self.options.on_after_release, info)
        return Ok(info)

    def _release_date(self) -> str:
        mask = self.options.date_format
        if mask not in MASKS and "%" not in mask:
            self.console.print(f"date format has no strftime directives: {mask}", Style.DIM)
        return format_date(self._now(), mask)

    def _release_stamp(self, version: str, date: str) -> str:
        stamp = self.options.unreleased_tag_format.replace("{version}", version, 1)
        return stamp.replace("{date}", date, 1)

    def _replace_unreleased_tag(self, changelog: str, release_stamp: str) -> str:
        tag = self.options.unreleased_tag
        if tag not in changelog:
            self.console.print(f"unreleased tag not found: {tag}", Style.DIM)
        return changelog.replace(tag, release_stamp, 1)

    def _version(
        self, json_data: str, path: Path
    ) -> Result[str, MetadataParseFailed | MissingVersionField]:
        try:
            data_obj: object = json.loads(json_data)
        except json.JSONDecodeError as e:
            return Err(MetadataParseFailed(path=path, reason=str(e)))

        data = as_str_dict(data_obj) or {}
        version = get_present(data, "version")
        if version is None:
            return Err(MissingVersionField(path=path))
        return Ok(str(version))
