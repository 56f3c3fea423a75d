"""Console output abstraction.

Stampers and the config layer report progress and diagnostic notes through
``ConsoleProtocol`` instead of ``print`` or ``logging``. The CLI uses the
Rich backend; tests use ``MockConsole`` and assert on what was captured.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    DIM = auto()  # Diagnostic notes


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling.

        Args:
            message: The text to print
            style: The style to apply
        """
        ...

    def success(self, message: str) -> None:
        """Print a success message."""
        ...

    def error(self, message: str) -> None:
        """Print an error message."""
        ...


class RichConsole:
    """Console implementation using Rich library.

    Messages are escaped: changelog tags such as ``[unreleased]`` must not be
    read as Rich markup.
    """

    def __init__(self, *, stderr: bool = False, verbose: bool = False) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self._console = Console(stderr=stderr, highlight=False)
        self._verbose = verbose
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.ERROR: "red bold",
            Style.DIM: "dim",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        from rich.markup import escape

        # Dim notes are diagnostics; only shown with --verbose.
        if style == Style.DIM and not self._verbose:
            return
        rich_style = self._style_map.get(style, "")
        if rich_style:
            self._console.print(escape(message), style=rich_style)
        else:
            self._console.print(escape(message))

    def success(self, message: str) -> None:
        from rich.markup import escape

        self._console.print(f"[green]OK[/green] {escape(message)}")

    def error(self, message: str) -> None:
        from rich.markup import escape

        self._console.print(f"[red bold]error:[/red bold] {escape(message)}")


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"OK {message}", Style.SUCCESS))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    # Test helper methods

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]
