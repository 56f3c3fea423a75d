"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from changelog_version.core.errors import ErrorCode
from changelog_version.output.console import Style
from changelog_version.stampers.errors import ChangelogError, UnreleasedEntryNotFound

if TYPE_CHECKING:
    from changelog_version.output.console import ConsoleProtocol

__all__ = ["changelog_error_exit_code", "print_changelog_error"]


def print_changelog_error(error: ChangelogError, console: ConsoleProtocol) -> None:
    """Print a stamper error, with its underlying cause as a dim note."""
    console.error(error.message)
    reason: str = getattr(error, "reason", "")
    if reason:
        console.print(f"cause: {reason}", Style.DIM)


def changelog_error_exit_code(error: ChangelogError) -> int:
    """Get exit code for a stamper error."""
    match error:
        case UnreleasedEntryNotFound():
            return int(ErrorCode.ENTRY_NOT_FOUND)
        case _:
            return int(ErrorCode.FAILURE)
