"""Tests for rpr.output.console module."""

from __future__ import annotations

import pytest

from rpr.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_prefixes(self) -> None:
        console = MockConsole()
        console.success("created")
        console.error("failed")
        console.warning("careful")
        console.info("tag: v1")

        assert console.messages == [
            "OK created",
            "error: failed",
            "warning: careful",
            "info: tag: v1",
        ]
        assert console.has_error()
        assert console.has_warning()

    def test_status_records_message(self) -> None:
        console = MockConsole()
        with console.status("listing..."):
            console.print("inside")

        assert console.messages == ["listing...", "inside"]
        assert console.outputs[0].style == Style.DIM

    def test_find(self) -> None:
        console = MockConsole()
        console.print("repository: octo/tool")
        console.print("pull request: #1")
        assert len(console.find("octo/tool")) == 1


def test_implementations_satisfy_protocol() -> None:
    def use(console: ConsoleProtocol) -> None:
        console.header("Release")

    use(MockConsole())
    use(RichConsole())


def test_rich_console_routes_errors_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    console = RichConsole()
    console.print("to stdout")
    console.error("to stderr")

    captured = capsys.readouterr()
    assert "to stdout" in captured.out
    assert "to stderr" in captured.err
    assert "to stderr" not in captured.out
