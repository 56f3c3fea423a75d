"""Helpers for safely working with dynamic (untyped) structures.

Use these helpers at boundaries where we ingest JSON, TOML or values
exported by a config module. They provide runtime validation and static
type narrowing.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    """Return obj as StrDict if it matches, else None."""
    if is_str_dict(obj):
        return obj
    return None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys) from a mapping."""
    value = table.get(key)
    return as_str_dict(value)


def get_present(table: Mapping[str, object], key: str) -> object | None:
    """Get a value that counts as present.

    Missing keys, None, empty strings and False are all treated as absent,
    mirroring a truthiness check on the raw field.
    """
    value = table.get(key)
    if not value:
        return None
    return value
