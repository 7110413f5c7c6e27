"""Command-line interface for dlcnames.

Responsibilities:
- Expose each name rule as a small command for packaging scripts.
- Convert CLI options into `NamingConfig` and report failures concisely.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Annotated, Callable

import typer

from .cli_rendering import echo_result, exit_with_command_error
from .config import ConfigLoader, NamingConfig
from .errors import NamingStageError
from .io.xml_filter import filter_xml_file
from .telemetry.logger import RunLogger
from .text import (
    acronym,
    build_short_filename,
    is_six_digit_app_id,
    to_display_name,
    to_file_path,
    to_filename,
    to_inlay_name,
    to_key,
    to_sortable_name,
    valid_tempo,
    valid_version,
    valid_year,
)

app = typer.Typer(
    name="dlcnames",
    no_args_is_help=True,
    help="Canonical artist, title, key, and file names for content packages.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with naming defaults."),
]
TextArgument = Annotated[str, typer.Argument(help="Raw input text.")]


def _load_config(config_path: Path | None) -> NamingConfig:
    """Load YAML config when requested, else environment defaults."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise NamingStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the `DLCNAMES_*` environment variables.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise NamingStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise NamingStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _run_command(
    command_name: str,
    config_path: Path | None,
    produce: Callable[[NamingConfig], str | bool],
) -> None:
    """Run one command body with config loading, logging, and error rendering."""

    run_logger: RunLogger | None = None
    try:
        config = _load_config(config_path)
        run_logger = RunLogger(sink=sys.stderr, level=config.log_level)
        run_logger.log_command_start(command_name, platform=config.platform)
        result = produce(config)
        run_logger.log_command_complete(command_name)
    except Exception as exc:
        if run_logger is not None:
            run_logger.log_command_failure(command_name, error_type=type(exc).__name__)
        exit_with_command_error(command_name, exc)

    echo_result(result)


@app.command("sortable")
def sortable_command(text: TextArgument, config_file: ConfigOption = None) -> None:
    """Print the sortable form of an artist, title, or album name."""

    _run_command("sortable", config_file, lambda _config: to_sortable_name(text))


@app.command("display")
def display_command(text: TextArgument, config_file: ConfigOption = None) -> None:
    """Print the display-safe form of a name."""

    _run_command("display", config_file, lambda _config: to_display_name(text))


@app.command("key")
def key_command(
    text: TextArgument,
    title: Annotated[
        str,
        typer.Option("--title", help="Song title used to avoid key/title collisions."),
    ] = "",
    config_file: ConfigOption = None,
) -> None:
    """Print an ASCII-alphanumeric song or tone key."""

    _run_command("key", config_file, lambda _config: to_key(text, title))


@app.command("acronym")
def acronym_command(text: TextArgument, config_file: ConfigOption = None) -> None:
    """Print the acronym of a multi-word artist name."""

    _run_command("acronym", config_file, lambda _config: acronym(text))


@app.command("filename")
def filename_command(
    text: TextArgument,
    full_path: Annotated[
        bool,
        typer.Option("--path", help="Treat input as a path and clean each part."),
    ] = False,
    config_file: ConfigOption = None,
) -> None:
    """Remove characters reserved by the configured target filesystem."""

    def _produce(config: NamingConfig) -> str:
        if full_path:
            return to_file_path(text, config.charset())
        return to_filename(text, config.charset())

    _run_command("filename", config_file, _produce)


@app.command("short-name")
def short_name_command(
    artist: Annotated[str, typer.Argument(help="Artist name.")],
    title: Annotated[str, typer.Argument(help="Song title.")],
    version: Annotated[str, typer.Argument(help="Package version.")],
    use_acronym: Annotated[
        bool | None,
        typer.Option(
            "--acronym/--no-acronym",
            help="Use the artist acronym (overrides config file value).",
        ),
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Print the standard `{artist}_{title}_{version}` short file name."""

    def _produce(config: NamingConfig) -> str:
        resolved_acronym = config.use_acronym if use_acronym is None else use_acronym
        return build_short_filename(
            artist,
            title,
            version,
            resolved_acronym,
            config.charset(),
        )

    _run_command("short-name", config_file, _produce)


@app.command("inlay")
def inlay_command(
    text: TextArgument,
    frets24: Annotated[
        bool, typer.Option("--frets24", help="Append the 24-fret marker.")
    ] = False,
    config_file: ConfigOption = None,
) -> None:
    """Print an underscore-separated inlay asset name."""

    _run_command("inlay", config_file, lambda _config: to_inlay_name(text, frets24))


@app.command("tempo")
def tempo_command(text: TextArgument, config_file: ConfigOption = None) -> None:
    """Print a validated tempo, defaulting to 120 BPM."""

    _run_command("tempo", config_file, lambda _config: valid_tempo(text))


@app.command("year")
def year_command(text: TextArgument, config_file: ConfigOption = None) -> None:
    """Print the year when valid, else an empty line."""

    _run_command("year", config_file, lambda _config: valid_year(text))


@app.command("version")
def version_command(text: TextArgument, config_file: ConfigOption = None) -> None:
    """Print the leading numeric version, defaulting to 1."""

    _run_command("version", config_file, lambda _config: valid_version(text))


@app.command("app-id")
def app_id_command(text: TextArgument, config_file: ConfigOption = None) -> None:
    """Print whether the input is a six-digit app id starting with 2."""

    _run_command("app-id", config_file, lambda _config: is_six_digit_app_id(text))


@app.command("strip-xml")
def strip_xml_command(
    source: Annotated[Path, typer.Argument(help="Path to the XML content file.")],
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write cleaned UTF-8 bytes here instead of stdout."),
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Remove XML-illegal control characters from a content file."""

    def _produce(_config: NamingConfig) -> str:
        payload = filter_xml_file(source).getvalue()
        if out is None:
            return payload.decode("utf-8")
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_bytes(payload)
        return f"Wrote: {out}"

    _run_command("strip-xml", config_file, _produce)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
