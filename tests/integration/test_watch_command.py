"""Integration tests for the `watch` command."""

import io

from pytest import MonkeyPatch
from typer.testing import CliRunner

from numeronym.cli import app


def test_watch_prints_one_result_per_input_line() -> None:
    """Each stdin line should be handled as an independent change event."""

    result = CliRunner().invoke(
        app,
        ["watch"],
        input="i\nin\nint\ninternationalization\n\nhello   world\n",
    )

    assert result.exit_code == 0
    assert result.output.splitlines() == ["i", "in", "i1t", "i18n", "", "h3o w3d"]


def test_watch_html_mode_wraps_every_line() -> None:
    """HTML mode should wrap each event's result in an escaped paragraph."""

    result = CliRunner().invoke(app, ["watch", "--html"], input="a<b>c\nok\n")

    assert result.exit_code == 0
    assert result.output.splitlines() == ["<p>a3c</p>", "<p>ok</p>"]


def test_watch_handles_windows_line_endings() -> None:
    """Carriage returns should not leak into results."""

    result = CliRunner().invoke(app, ["watch"], input="hello\r\nworld\r\n")

    assert result.output.splitlines() == ["h3o", "w3d"]


def test_watch_verbose_reports_event_count() -> None:
    """Completion log line should report how many events were handled."""

    result = CliRunner().invoke(app, ["watch", "-v"], input="one\ntwo\n")

    assert result.exit_code == 0
    assert "[phase] level=INFO stage=watch event=complete events=2" in result.output


def test_watch_reads_interactive_terminal_stdin(monkeypatch: MonkeyPatch) -> None:
    """Typed terminal input should be converted line by line, not refused."""

    class _TerminalStream(io.StringIO):
        """In-memory stream that reports itself as a terminal."""

        def isatty(self) -> bool:
            return True

    monkeypatch.setattr(
        "numeronym.cli.typer.get_text_stream",
        lambda name: _TerminalStream("hello\nworld\n"),
    )

    result = CliRunner().invoke(app, ["watch"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["h3o", "w3d"]


def test_watch_verbose_tags_event_trace_with_watch_stage() -> None:
    """Per-event trace lines should carry the `watch` stage name."""

    result = CliRunner().invoke(app, ["watch", "-v"], input="hello\n")

    assert result.exit_code == 0
    assert "[phase] level=DEBUG stage=watch event=convert result_chars=3 words=1" in (
        result.output
    )
    assert "stage=generate" not in result.output
