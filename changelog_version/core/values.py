"""Value-or-producer resolution for configuration options.

A config option may be a literal (``str`` / ``bool``) or a producer
function returning one. Producers may be plain functions or coroutine
functions; coroutines are driven to completion before the value is used.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from typing import Final

__all__ = ["UNRESOLVED", "Unresolved", "call_hook", "resolve_value"]


class Unresolved:
    """Marker for a value that is neither a literal nor a producer."""

    _instance: Unresolved | None = None

    def __new__(cls) -> Unresolved:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNRESOLVED"

    def __bool__(self) -> bool:
        return False


UNRESOLVED: Final = Unresolved()


async def _wait_for[T](awaitable: Awaitable[T]) -> T:
    return await awaitable


def _settle(result: object) -> object:
    if inspect.isawaitable(result):
        return asyncio.run(_wait_for(result))
    return result


def _accepts_argument(fn: Callable[..., object]) -> bool:
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return False
    for p in params:
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD, p.VAR_POSITIONAL):
            return True
    return False


def resolve_value(value: object, context: object = None) -> object:
    """Resolve an option value.

    Args:
        value: A literal or a producer function.
        context: Passed to producers that take a positional argument.

    Returns:
        The producer's (awaited) result, the literal itself, or UNRESOLVED
        for any other type.
    """
    if callable(value):
        if _accepts_argument(value):
            return _settle(value(context))
        return _settle(value())

    if isinstance(value, (str, bool)):
        return value

    return UNRESOLVED


def call_hook(hook: Callable[..., object], *args: object) -> object:
    """Invoke a lifecycle hook, awaiting it when it is a coroutine function.

    Hooks that take no positional parameters are called bare, so
    ``def onAfterRelease(): ...`` is as valid as ``def onAfterRelease(info): ...``.
    """
    if args and not _accepts_argument(hook):
        return _settle(hook())
    return _settle(hook(*args))
