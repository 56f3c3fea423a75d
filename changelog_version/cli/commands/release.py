from __future__ import annotations

import typer

from changelog_version.cli.commands._helpers import run_or_exit
from changelog_version.cli.context import build_context


def release(
    ctx: typer.Context,
    package_file: str | None = typer.Option(
        None,
        "--package-file",
        "--packageFile",
        help='JSON file with the "version" field, relative to the project root.',
    ),
    unreleased_tag: str | None = typer.Option(
        None,
        "--unreleased-tag",
        "--unreleasedTag",
        help='Text replaced with the release stamp. Default is "[UNRELEASED]".',
    ),
    unreleased_tag_format: str | None = typer.Option(
        None,
        "--unreleased-tag-format",
        "--unreleasedTagFormat",
        "--tag-format",
        "--tagFormat",
        help='Stamp template with "{version}" and "{date}". Default is "{version} - {date}".',
    ),
    date_format: str | None = typer.Option(
        None,
        "--date-format",
        "--dateFormat",
        help='Date mask name (e.g. "isoDate") or strftime pattern. Default is "default".',
    ),
    require_unreleased_entry: bool = typer.Option(
        False,
        "--require-unreleased-entry",
        "--requireUnreleasedEntry",
        help="Fail if the changelog has no unreleased tag.",
    ),
    fail_msg: str | None = typer.Option(
        None,
        "--require-unreleased-entry-fail-msg",
        "--requireUnreleasedEntryFailMsg",
        help="Message to show instead of the default when the tag is missing.",
    ),
) -> None:
    """Stamp the unreleased tag with the package version and date."""
    cli = build_context(ctx)
    service = cli.service(
        packageFile=package_file,
        unreleasedTag=unreleased_tag,
        unreleasedTagFormat=unreleased_tag_format,
        dateFormat=date_format,
        # False means "not given" so the config file can still turn it on.
        requireUnreleasedEntry=True if require_unreleased_entry else None,
        requireUnreleasedEntryFailMsg=fail_msg,
    )

    info = run_or_exit(service.release, cli)
    cli.console.success(f"Updated changelog: {info.release_stamp}")
