from __future__ import annotations

import typer

from changelog_version.cli.commands._helpers import run_or_exit
from changelog_version.cli.context import build_context


def prepare(
    ctx: typer.Context,
    new_unreleased_text: str | None = typer.Option(
        None,
        "--new-unreleased-text",
        "--newUnreleasedText",
        help='Text to prepend to the changelog. Default is "# [UNRELEASED]\\n\\n".',
    ),
) -> None:
    """Prepend an unreleased entry to the changelog (creates the file if needed)."""
    cli = build_context(ctx)
    service = cli.service(newUnreleasedText=new_unreleased_text)

    changed = run_or_exit(service.prepare, cli)
    if changed:
        cli.console.success("Added unreleased entry to changelog.")
    else:
        cli.console.success("Changelog already has an unreleased entry.")
