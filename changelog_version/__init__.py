"""Stamp changelogs with release version / date and manage unreleased markers."""

__version__ = "0.1.0"

from changelog_version.service import ChangelogVersion  # noqa: E402

__all__ = ["ChangelogVersion", "__version__"]
