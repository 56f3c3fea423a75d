from __future__ import annotations

from changelog_version.core.result import Err, Ok, Result

from .base import BaseStamper
from .errors import FileReadFailed, UnreleasedEntryNotFound


class EntryVerifier(BaseStamper):
    """Checks that the changelog still carries the unreleased tag.

    Read-only; used directly by ``verify`` and as the gate in front of a
    release when ``require_unreleased_entry`` is set.
    """

    def verify(self) -> Result[None, FileReadFailed | UnreleasedEntryNotFound]:
        contents = self._read_changelog()
        if isinstance(contents, Err):
            return contents
        return self.check_contents(contents.value)

    def check_contents(self, changelog: str) -> Result[None, UnreleasedEntryNotFound]:
        tag = self.options.unreleased_tag
        if tag in changelog:
            return Ok(None)
        return Err(
            UnreleasedEntryNotFound(
                tag=tag,
                override=self.options.require_unreleased_entry_fail_msg,
            )
        )
