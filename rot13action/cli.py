"""Command-line interface for rot13action.

Responsibilities:
- Run the action against the GitHub Actions runner environment.
- Expose local `encode`/`decode` commands for ad-hoc ROT-13 conversion.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from . import __version__
from .action import run_action
from .cli_rendering import exit_with_command_error
from .config import ActionConfig, ConfigLoader
from .core import GitHubActionsCore
from .errors import ActionStageError
from .telemetry.logger import ActionLogger
from .text.rot13 import rot13

app = typer.Typer(
    name="rot13action",
    no_args_is_help=True,
    help="ROT-13 text action CLI.",
)


def _version_callback(value: bool) -> None:
    """Print the package version and stop option processing."""

    if value:
        typer.echo(f"rot13action {__version__}")
        raise typer.Exit()


@app.callback()
def _root(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """ROT-13 text action CLI."""


def _load_action_config(config_path: Path | None) -> ActionConfig:
    """Load YAML config when requested, else environment config; map failures to stage errors."""

    if config_path is None:
        try:
            return ConfigLoader.from_env(os.environ)
        except ValueError as exc:
            raise ActionStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix the `ROT13_*` environment variables and rerun.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise ActionStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise ActionStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise ActionStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify the file permissions.",
        ) from exc


@app.command("run")
def run_command(
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to YAML config file (defaults to `ROT13_*` environment variables).",
        ),
    ] = None,
) -> None:
    """Run the action: read the input, write its ROT-13 image as the output."""

    try:
        config = _load_action_config(config_file)
        logger = ActionLogger()
        core = GitHubActionsCore(logger=logger, trim_whitespace=config.trim_whitespace)
        logger.log_stage_start("action", input=config.input_name)
        try:
            succeeded = run_action(core, config)
        except (OSError, ValueError) as exc:
            logger.log_stage_failure("action", type(exc).__name__)
            raise ActionStageError(
                stage="output",
                detail=f"Failed to write output `{config.output_name}`: {exc}",
                hint="Check that `GITHUB_OUTPUT` points to a writable file.",
            ) from exc
    except Exception as exc:
        exit_with_command_error("run", exc)

    if not succeeded:
        logger.log_stage_failure("action", "ValidationError")
        raise typer.Exit(code=core.exit_code)
    logger.log_stage_complete("action", output=config.output_name)


def _echo_rot13(text: str | None) -> None:
    """Print the ROT-13 image of `text`, or of stdin when no text is given."""

    if text is not None:
        typer.echo(rot13(text))
        return
    stdin_text = typer.get_text_stream("stdin").read()
    typer.echo(rot13(stdin_text), nl=False)


@app.command("encode")
def encode_command(
    text: Annotated[
        str | None,
        typer.Argument(help="Text to encode. Reads standard input when omitted."),
    ] = None,
) -> None:
    """Print the ROT-13 encoding of TEXT."""

    _echo_rot13(text)


@app.command("decode")
def decode_command(
    text: Annotated[
        str | None,
        typer.Argument(help="Text to decode. Reads standard input when omitted."),
    ] = None,
) -> None:
    """Print the ROT-13 decoding of TEXT (the same rotation as `encode`)."""

    _echo_rot13(text)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
