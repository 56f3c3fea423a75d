from __future__ import annotations

from dataclasses import dataclass, field

import typer

from changelog_version.output.console import ConsoleProtocol, RichConsole
from changelog_version.service import ChangelogVersion


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global flags shared by every command."""

    options: dict[str, object] = field(default_factory=dict)
    console: ConsoleProtocol = field(default_factory=RichConsole)

    def service(self, **command_options: object) -> ChangelogVersion:
        """Facade for one command; unset (None) flags are left to the config file."""
        merged = {**self.options, **command_options}
        return ChangelogVersion(
            {k: v for k, v in merged.items() if v is not None},
            console=self.console,
        )


def build_context(ctx: typer.Context) -> CLIContext:
    obj = ctx.find_root().obj
    if isinstance(obj, CLIContext):
        return obj
    return CLIContext()
