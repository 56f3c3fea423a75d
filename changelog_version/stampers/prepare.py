from __future__ import annotations

from changelog_version.core.result import Err, Ok, Result
from changelog_version.output.console import Style

from .base import BaseStamper
from .errors import FileCreateFailed, FileReadFailed, FileWriteFailed


class UnreleasedMarkerManager(BaseStamper):
    """Prepends ``new_unreleased_text`` to the changelog, creating it if needed."""

    def stamp_unreleased(
        self,
    ) -> Result[bool, FileCreateFailed | FileReadFailed | FileWriteFailed]:
        """Add the unreleased marker unless it is already there.

        Returns:
            Ok(True) when the file was rewritten, Ok(False) when the marker
            was already present.
        """
        created = self._create_changelog_if_missing()
        if isinstance(created, Err):
            return created

        contents = self._read_changelog()
        if isinstance(contents, Err):
            return contents

        marker = self.options.new_unreleased_text
        if marker in contents.value:
            self.console.print("unreleased marker already present", Style.DIM)
            return Ok(False)

        written = self._write_changelog(marker + contents.value)
        if isinstance(written, Err):
            return written
        return Ok(True)

    def _create_changelog_if_missing(self) -> Result[None, FileCreateFailed]:
        path = self.options.changelog_path
        if self.fs.exists(path):
            return Ok(None)

        try:
            self.fs.touch(path)
        except OSError as e:
            self.console.print(f"create failed: {path}: {e}", Style.DIM)
            return Err(FileCreateFailed(path=path, reason=str(e)))
        return Ok(None)
