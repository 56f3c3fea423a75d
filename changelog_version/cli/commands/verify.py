from __future__ import annotations

import typer

from changelog_version.cli.commands._helpers import run_or_exit
from changelog_version.cli.context import build_context


def verify(
    ctx: typer.Context,
    unreleased_tag: str | None = typer.Option(
        None,
        "--unreleased-tag",
        "--unreleasedTag",
        help='Text that must be present in the changelog. Default is "[UNRELEASED]".',
    ),
    fail_msg: str | None = typer.Option(
        None,
        "--fail-msg",
        "--requireUnreleasedEntryFailMsg",
        help="Message to show instead of the default when the tag is missing.",
    ),
) -> None:
    """Check that the changelog has an unreleased entry (for pre-commit hooks)."""
    cli = build_context(ctx)
    service = cli.service(
        unreleasedTag=unreleased_tag,
        requireUnreleasedEntryFailMsg=fail_msg,
    )

    run_or_exit(service.verify, cli)
    cli.console.success("Changelog has an unreleased entry.")
