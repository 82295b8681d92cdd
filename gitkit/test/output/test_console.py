"""Tests for gitkit.output.console module."""

from __future__ import annotations

import pytest

from gitkit.output.console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
)


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.DIM) == "dim"

    def test_all_styles_exist(self) -> None:
        expected = {"DEFAULT", "SUCCESS", "ERROR", "WARNING", "DIM", "BOLD", "HEADER"}
        assert {s.name for s in Style} == expected


class TestMockConsole:
    """Test MockConsole for testing purposes."""

    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("main")

        assert console.outputs == [OutputRecord("main", Style.DEFAULT)]

    def test_levels(self) -> None:
        console = MockConsole()
        console.success("deleted")
        console.error("boom")
        console.print("careful", Style.WARNING)

        assert console.messages == ["OK deleted", "error: boom", "careful"]
        assert console.has_error()
        assert console.has_success()

    def test_header_and_newline(self) -> None:
        console = MockConsole()
        console.header("commit abc")
        console.newline()

        assert console.outputs[0].style == Style.HEADER
        assert console.outputs[1].message == ""

    def test_find_and_text(self) -> None:
        console = MockConsole()
        console.print("* main [main]")
        console.print("  feature")

        assert len(console.find("main")) == 1
        assert console.text == "* main [main]\n  feature"

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.print("x")


class TestRichConsole:
    def test_brackets_are_not_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.print("* fix/[bug] [main]")
        console.error("could not find local branch [wip]")

        out = capsys.readouterr().out
        assert "fix/[bug] [main]" in out
        assert "[wip]" in out

    def test_levels_render(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.success("deleted Local branch feature")
        console.print("feature is not merged into main", Style.WARNING)
        console.header("commit abc1234")

        out = capsys.readouterr().out
        assert "OK deleted Local branch feature" in out
        assert "feature is not merged into main" in out
        assert "commit abc1234" in out
