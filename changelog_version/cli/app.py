from __future__ import annotations

from pathlib import Path

import typer

from changelog_version import __version__
from changelog_version.cli.commands._helpers import exit_with_code
from changelog_version.cli.commands.prepare import prepare
from changelog_version.cli.commands.release import release
from changelog_version.cli.commands.verify import verify
from changelog_version.cli.context import CLIContext
from changelog_version.core.errors import ErrorCode
from changelog_version.output.console import RichConsole


app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
)


# Commands
app.command()(prepare)
app.command()(release)
app.command()(verify)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    project_root: Path | None = typer.Option(
        None,
        "--project-root",
        "--projectRoot",
        help="Where the package file and changelog are found. Default is the cwd.",
    ),
    config_file: str | None = typer.Option(
        None,
        "--config-file",
        "--configFile",
        help='Config file relative to the project root. Default is ".changelog.py".',
    ),
    changelog_file: str | None = typer.Option(
        None,
        "--changelog-file",
        "--changelogFile",
        help='Changelog relative to the project root. Default is "CHANGELOG.md".',
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show diagnostic notes."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        exit_with_code(int(ErrorCode.NO_COMMAND))

    options: dict[str, object] = {}
    if project_root is not None:
        try:
            options["projectRoot"] = project_root.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --project-root: {e}", err=True)
            exit_with_code(int(ErrorCode.FAILURE))
    if config_file is not None:
        options["configFile"] = config_file
    if changelog_file is not None:
        options["changelogFile"] = changelog_file

    ctx.obj = CLIContext(options=options, console=RichConsole(verbose=verbose))


def main() -> None:
    app()
