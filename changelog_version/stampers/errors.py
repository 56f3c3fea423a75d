from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from changelog_version.core.config import ConfigParseFailed

__all__ = [
    "ChangelogError",
    "ConfigParseFailed",
    "FileCreateFailed",
    "FileReadFailed",
    "FileWriteFailed",
    "MetadataParseFailed",
    "MissingVersionField",
    "UnreleasedEntryNotFound",
]


@dataclass(frozen=True, slots=True)
class FileReadFailed:
    path: Path
    role: Literal["changelog", "package"]
    reason: str = ""

    @property
    def message(self) -> str:
        return f"Unable to read the {self.role} file at: {self.path}"


@dataclass(frozen=True, slots=True)
class FileWriteFailed:
    path: Path
    reason: str = ""

    @property
    def message(self) -> str:
        return f"Unable to write the changelog file at: {self.path}"


@dataclass(frozen=True, slots=True)
class FileCreateFailed:
    path: Path
    reason: str = ""

    @property
    def message(self) -> str:
        return f"Unable to create the changelog file: {self.path}"


@dataclass(frozen=True, slots=True)
class MetadataParseFailed:
    path: Path
    reason: str = ""

    @property
    def message(self) -> str:
        return f"Unable to JSON parse the package file data: {self.path}"


@dataclass(frozen=True, slots=True)
class MissingVersionField:
    path: Path

    @property
    def message(self) -> str:
        return f'Package file data is missing the "version" field: {self.path}'


@dataclass(frozen=True, slots=True)
class UnreleasedEntryNotFound:
    """The unreleased tag was required but the changelog does not contain it.

    ``override`` replaces the generated message verbatim when set.
    """

    tag: str
    override: str | None = None

    @property
    def message(self) -> str:
        if self.override:
            return self.override
        return (
            f'The changelog file did not contain the specified unreleasedTag: "{self.tag}".\n'
            'Run "changelog-version prepare" first, then edit the changelog file '
            "with your release notes."
        )


ChangelogError = (
    FileReadFailed
    | FileWriteFailed
    | FileCreateFailed
    | MetadataParseFailed
    | MissingVersionField
    | ConfigParseFailed
    | UnreleasedEntryNotFound
)
