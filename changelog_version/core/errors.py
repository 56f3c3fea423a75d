"""Error codes for CLI exit status.

Automation branches on these values: a missing unreleased entry means
"write release notes first", anything else means a broken environment.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable.
    - 0: Success
    - 1: No command given
    - 2: The unreleased tag was required but not found
    - 3: Any other failure (I/O, bad metadata, broken config)
    """

    OK = 0
    NO_COMMAND = 1
    ENTRY_NOT_FOUND = 2
    FAILURE = 3

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")
