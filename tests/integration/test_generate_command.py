"""Integration tests for the `generate` command."""

from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from numeronym.cli import app


def test_generate_joins_arguments_into_one_input() -> None:
    """Arguments should be joined with spaces and abbreviated word by word."""

    result = CliRunner().invoke(app, ["generate", "hello", "world"])

    assert result.exit_code == 0
    assert result.output == "h3o w3d\n"


def test_generate_reads_stdin_when_no_text_given() -> None:
    """Without arguments the whole of stdin is one input value."""

    result = CliRunner().invoke(
        app, ["generate"], input="  internationalization\n\tlocalization  \n"
    )

    assert result.exit_code == 0
    assert result.output == "i18n l10n\n"


def test_generate_whitespace_only_input_prints_empty_line() -> None:
    """Input with no words should produce an empty result."""

    result = CliRunner().invoke(app, ["generate"], input="   \n")

    assert result.exit_code == 0
    assert result.output == "\n"


def test_generate_applies_rule_options() -> None:
    """Threshold, lowercasing, and joining flags should reach the generator."""

    runner = CliRunner()

    kept = runner.invoke(app, ["generate", "--min-length", "4", "the", "cat", "sat", "down"])
    joined = runner.invoke(
        app, ["generate", "--lowercase", "--join-words", "Andreessen", "Horowitz"]
    )

    assert kept.output == "the cat sat d2n\n"
    assert joined.output == "a16z\n"


def test_generate_html_output_is_escaped() -> None:
    """HTML rendering should escape markup-significant characters."""

    result = CliRunner().invoke(app, ["generate", "--html", "<script>", "&&"])

    assert result.exit_code == 0
    assert result.output == "<p>&lt;6&gt; &amp;&amp;</p>\n"


def test_generate_uses_yaml_config_with_cli_override(tmp_path: Path) -> None:
    """Config file values should apply unless a CLI option overrides them."""

    config_path = tmp_path / "numeronym.yaml"
    config_path.write_text("min_length: 6\nhtml: true\n", encoding="utf-8")
    runner = CliRunner()

    from_file = runner.invoke(app, ["generate", "--config", str(config_path), "hello", "worlds"])
    overridden = runner.invoke(
        app,
        ["generate", "--config", str(config_path), "--plain", "--min-length", "3", "hello"],
    )

    assert from_file.output == "<p>hello w4s</p>\n"
    assert overridden.output == "h3o\n"


def test_generate_reads_environment_defaults(monkeypatch: MonkeyPatch) -> None:
    """`NUMERONYM_*` variables should act as defaults below CLI options."""

    monkeypatch.setenv("NUMERONYM_LOWERCASE", "yes")
    runner = CliRunner()

    from_env = runner.invoke(app, ["generate", "TomatO"])
    overridden = runner.invoke(app, ["generate", "--no-lowercase", "TomatO"])

    assert from_env.output == "t4o\n"
    assert overridden.output == "T4O\n"


def test_generate_verbose_emits_phase_logs() -> None:
    """Verbose mode should add phase lines without echoing user text into logs."""

    result = CliRunner().invoke(app, ["generate", "--verbose", "hello"])

    assert result.exit_code == 0
    assert "h3o" in result.output
    assert "[phase] level=INFO stage=generate event=start" in result.output
    assert "[phase] level=DEBUG stage=generate event=convert result_chars=3 words=1" in (
        result.output
    )
    assert "[phase] level=INFO stage=generate event=complete words=1" in result.output
