"""Tests for changelog_version.output.console module."""

from __future__ import annotations

import pytest

from changelog_version.output.console import MockConsole, RichConsole, Style


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_error(self) -> None:
        console = MockConsole()
        console.error("something failed")
        assert console.messages == ["error: something failed"]
        assert console.has_error()

    def test_find(self) -> None:
        console = MockConsole()
        console.print("No config file found", Style.DIM)
        console.success("done")
        assert len(console.find("config")) == 1
        assert console.text == "No config file found\nOK done"


class TestRichConsole:
    def test_tags_are_not_treated_as_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().print("## [unreleased] stays")
        assert "[unreleased]" in capsys.readouterr().out

    def test_dim_notes_need_verbose(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().print("hidden note", Style.DIM)
        assert "hidden note" not in capsys.readouterr().out

        RichConsole(verbose=True).print("shown note", Style.DIM)
        assert "shown note" in capsys.readouterr().out

    def test_error_prefix(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().error("broken [thing]")
        assert "error: broken [thing]" in capsys.readouterr().out
