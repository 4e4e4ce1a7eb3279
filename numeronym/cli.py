"""Command-line interface for Numeronym.

Responsibilities:
- Expose user-facing commands that act as the host for the generator.
- Convert CLI arguments, environment, and YAML defaults into `NumeronymConfig`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated, Iterator, TextIO

import typer

from .cli_rendering import echo_breakdown, echo_conversion, exit_with_command_error
from .config import ConfigLoader, NumeronymConfig, RuntimeConfigSources
from .errors import CommandStageError
from .generator import explain
from .host import LiveConverter
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="numeronym",
    no_args_is_help=True,
    help="Turn words into numeronyms (internationalization -> i18n).",
)

TextArgument = Annotated[
    list[str] | None,
    typer.Argument(help="Text to convert. Reads stdin when omitted."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
MinLengthOption = Annotated[
    int | None,
    typer.Option(
        "--min-length",
        help="Shortest word length that gets abbreviated (at least 3).",
    ),
]
LowercaseOption = Annotated[
    bool | None,
    typer.Option("--lowercase/--no-lowercase", help="Lowercase input before abbreviating."),
]
JoinWordsOption = Annotated[
    bool | None,
    typer.Option(
        "--join-words/--no-join-words",
        help="Drop whitespace and abbreviate the whole input as one word.",
    ),
]
HtmlOption = Annotated[
    bool | None,
    typer.Option("--html/--plain", help="Render results as escaped `<p>` markup."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Emit phase logs on stderr."),
]


def _load_yaml_config(config_path: Path | None) -> NumeronymConfig:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return NumeronymConfig()

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc
    except OSError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Failed to read config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    min_length: int | None,
    lowercase: bool | None,
    join_words: bool | None,
    html: bool | None,
    verbose: bool,
) -> NumeronymConfig:
    """Resolve effective config from YAML defaults, environment, and CLI overrides."""

    base_config = _load_yaml_config(config_file)
    cli_values: dict[str, object] = {
        "min_length": min_length,
        "lowercase": lowercase,
        "join_words": join_words,
        "html": html,
        "log_level": "DEBUG" if verbose else None,
    }
    try:
        return base_config.resolved(RuntimeConfigSources(cli=cli_values, env=os.environ))
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=str(exc),
            hint="Check `--min-length` and `NUMERONYM_*` environment values.",
        ) from exc


def _input_stream() -> TextIO:
    """Return stdin, refusing to block on an interactive terminal."""

    stream = typer.get_text_stream("stdin")
    if stream.isatty():
        raise CommandStageError(
            stage="input",
            detail="No text given and stdin is a terminal.",
            hint="Pass text as arguments or pipe it in, e.g. `echo hello | numeronym generate`.",
        )
    return stream


def _read_text(text: list[str] | None) -> str:
    """Join text arguments with spaces, or read all of stdin."""

    if text:
        return " ".join(text)
    try:
        return _input_stream().read()
    except OSError as exc:
        raise CommandStageError(stage="input", detail=f"Failed to read stdin: {exc}") from exc


def _iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield stdin lines without their line terminators."""

    for line in stream:
        yield line.rstrip("\r\n")


@app.command("generate")
def generate_command(
    text: TextArgument = None,
    config_file: ConfigOption = None,
    min_length: MinLengthOption = None,
    lowercase: LowercaseOption = None,
    join_words: JoinWordsOption = None,
    html: HtmlOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the numeronym for TEXT (or for all of stdin)."""

    run_logger: RunLogger | None = None
    try:
        config = _resolve_command_config(
            config_file, min_length, lowercase, join_words, html, verbose
        )
        run_logger = RunLogger(level=config.log_level)
        run_logger.log_stage_start("generate")
        converter = LiveConverter(
            display=lambda conversion: echo_conversion(conversion, as_html=config.html),
            options=config.to_options(),
            run_logger=run_logger,
        )
        conversion = converter.on_change(_read_text(text))
    except Exception as exc:
        if run_logger is not None:
            run_logger.log_stage_failure("generate", error_type=type(exc).__name__)
        exit_with_command_error("generate", exc)

    run_logger.log_stage_complete("generate", words=conversion.word_count)


@app.command("watch")
def watch_command(
    config_file: ConfigOption = None,
    min_length: MinLengthOption = None,
    lowercase: LowercaseOption = None,
    join_words: JoinWordsOption = None,
    html: HtmlOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Treat each stdin line as an input change and print its numeronym."""

    run_logger: RunLogger | None = None
    try:
        config = _resolve_command_config(
            config_file, min_length, lowercase, join_words, html, verbose
        )
        run_logger = RunLogger(level=config.log_level)
        run_logger.log_stage_start("watch")
        converter = LiveConverter(
            display=lambda conversion: echo_conversion(conversion, as_html=config.html),
            options=config.to_options(),
            run_logger=run_logger,
            stage="watch",
        )
        handled = converter.feed(_iter_lines(typer.get_text_stream("stdin")))
    except Exception as exc:
        if run_logger is not None:
            run_logger.log_stage_failure("watch", error_type=type(exc).__name__)
        exit_with_command_error("watch", exc)

    run_logger.log_stage_complete("watch", events=handled)


@app.command("explain")
def explain_command(
    text: TextArgument = None,
    config_file: ConfigOption = None,
    min_length: MinLengthOption = None,
    lowercase: LowercaseOption = None,
    join_words: JoinWordsOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Show how each word of TEXT is abbreviated."""

    run_logger: RunLogger | None = None
    try:
        config = _resolve_command_config(
            config_file, min_length, lowercase, join_words, None, verbose
        )
        run_logger = RunLogger(level=config.log_level)
        run_logger.log_stage_start("explain")
        rows = explain(_read_text(text), config.to_options())
    except Exception as exc:
        if run_logger is not None:
            run_logger.log_stage_failure("explain", error_type=type(exc).__name__)
        exit_with_command_error("explain", exc)

    echo_breakdown(rows)
    run_logger.log_stage_complete("explain", words=len(rows))


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
