"""Stampers: classes that read or modify the changelog."""

from .errors import (
    ChangelogError,
    ConfigParseFailed,
    FileCreateFailed,
    FileReadFailed,
    FileWriteFailed,
    MetadataParseFailed,
    MissingVersionField,
    UnreleasedEntryNotFound,
)
from .prepare import UnreleasedMarkerManager
from .verify import EntryVerifier
from .version import ChangelogStamper

__all__ = [
    # engines
    "ChangelogStamper",
    "EntryVerifier",
    "UnreleasedMarkerManager",
    # errors
    "ChangelogError",
    "ConfigParseFailed",
    "FileCreateFailed",
    "FileReadFailed",
    "FileWriteFailed",
    "MetadataParseFailed",
    "MissingVersionField",
    "UnreleasedEntryNotFound",
]
