"""Core domain types and logic."""

from .errors import ErrorCode
from .options import ReleaseInfo, ResolvedOptions
from .result import Err, Ok, Result
from .values import UNRESOLVED, resolve_value

__all__ = [
    # errors
    "ErrorCode",
    # options
    "ReleaseInfo",
    "ResolvedOptions",
    # result
    "Err",
    "Ok",
    "Result",
    # values
    "UNRESOLVED",
    "resolve_value",
]
