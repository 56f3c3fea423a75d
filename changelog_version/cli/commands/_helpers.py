"""Shared helpers for CLI commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn

import typer

from changelog_version.core.errors import ErrorCode
from changelog_version.core.result import Err, Result
from changelog_version.output.errors import changelog_error_exit_code, print_changelog_error
from changelog_version.stampers.errors import ChangelogError

if TYPE_CHECKING:
    from changelog_version.cli.context import CLIContext


def run_or_exit[T](
    operation: Callable[[], Result[T, ChangelogError]],
    ctx: CLIContext,
) -> T:
    """Run a facade operation, exiting with the mapped code on failure.

    Errors from user hooks or config producers are printed and reported as a
    generic failure.
    """
    try:
        result = operation()
    except Exception as e:
        ctx.console.error(str(e) or type(e).__name__)
        raise typer.Exit(code=int(ErrorCode.FAILURE)) from e

    if isinstance(result, Err):
        print_changelog_error(result.error, ctx.console)
        raise typer.Exit(code=changelog_error_exit_code(result.error))
    return result.value


def exit_with_code(code: int) -> NoReturn:
    """Exit with given code. Explicit helper for clarity."""
    raise typer.Exit(code=code)
