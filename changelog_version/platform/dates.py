"""Release date formatting.

Named masks follow the ``dateformat`` conventions used by JavaScript
changelog tooling, so existing configs keep producing the same stamps.
Any other mask is treated as a ``strftime`` pattern.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

__all__ = ["MASKS", "format_date"]


def _hour12(dt: datetime) -> str:
    return str(dt.hour % 12 or 12)


def _meridiem(dt: datetime) -> str:
    return "AM" if dt.hour < 12 else "PM"


MASKS: dict[str, Callable[[datetime], str]] = {
    "default": lambda dt: dt.strftime("%a %b %d %Y %H:%M:%S"),
    "shortDate": lambda dt: f"{dt.month}/{dt.day}/{dt:%y}",
    "mediumDate": lambda dt: f"{dt:%b} {dt.day}, {dt:%Y}",
    "longDate": lambda dt: f"{dt:%B} {dt.day}, {dt:%Y}",
    "fullDate": lambda dt: f"{dt:%A}, {dt:%B} {dt.day}, {dt:%Y}",
    "shortTime": lambda dt: f"{_hour12(dt)}:{dt:%M} {_meridiem(dt)}",
    "mediumTime": lambda dt: f"{_hour12(dt)}:{dt:%M:%S} {_meridiem(dt)}",
    "isoDate": lambda dt: dt.strftime("%Y-%m-%d"),
    "isoTime": lambda dt: dt.strftime("%H:%M:%S"),
    "isoDateTime": lambda dt: dt.astimezone().strftime("%Y-%m-%dT%H:%M:%S%z"),
    "isoUtcDateTime": lambda dt: dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
}


def format_date(timestamp: datetime | float, mask: str | None = None) -> str:
    """Format a timestamp with a named mask or a strftime pattern.

    Args:
        timestamp: A datetime, or seconds since the epoch (local time).
        mask: Mask name (see MASKS) or strftime pattern. Empty means "default".
    """
    dt = timestamp if isinstance(timestamp, datetime) else datetime.fromtimestamp(timestamp)
    named = MASKS.get(mask or "default")
    if named is not None:
        return named(dt)
    return dt.strftime(mask or "")
