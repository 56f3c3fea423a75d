"""Result type for explicit error handling.

Stampers report expected failures (unreadable files, missing tags, broken
package metadata) as values instead of raising. Callers branch on the
variant and decide how to present it.

Usage:
    result = stamper.release()
    match result:
        case Ok(info):
            console.success(f"stamped {info.release_stamp}")
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Represents a successful result containing a value.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Represents a failed result containing an error.

    Attributes:
        error: The error value (one of the stamper error dataclasses).
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
