# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_goolog

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger
from pydantic import ValidationError

from coreason_goolog import __version__
from coreason_goolog.errors import GoologError
from coreason_goolog.helpers import debug, error, fatal, info, trace, warn
from coreason_goolog.installer import install
from coreason_goolog.schemas import LoggerConfig

EMITTERS = {
    "trace": trace,
    "debug": debug,
    "info": info,
    "warn": warn,
    "warning": warn,
    "error": error,
    "fatal": fatal,
}

app = typer.Typer(
    name="goolog",
    help="CLI for coreason-goolog: an opinionated, target-aligned application logger.",
    add_completion=False,
)


@app.command()
def emit(
    message: Annotated[str, typer.Argument(help="Message to log")],
    target: Annotated[str, typer.Option("--target", "-t", help="Logical sender of the message")] = "Main",
    level: Annotated[str, typer.Option("--level", "-l", help="trace, debug, info, warn, error or fatal")] = "info",
    threshold: Annotated[
        Optional[str], typer.Option("--threshold", envvar="GOOLOG_LEVEL", help="Minimum level to log, or off")
    ] = None,
    width: Annotated[
        Optional[int], typer.Option("--width", "-w", envvar="GOOLOG_TARGET_WIDTH", help="Target width, 0 disables")
    ] = None,
    file: Annotated[
        Optional[Path], typer.Option("--file", "-f", envvar="GOOLOG_FILE", help="Also append lines to this file")
    ] = None,
    timestamp: Annotated[
        bool, typer.Option("--timestamp/--no-timestamp", help="Prefix lines with date and time")
    ] = True,
    color: Annotated[
        Optional[bool], typer.Option("--color/--no-color", help="Force or disable ANSI colors on stdout")
    ] = None,
) -> None:
    """
    Install the goolog logger and log a single message.
    """
    emitter = EMITTERS.get(level.lower())
    if emitter is None:
        typer.echo(f"Unknown level: {level}", err=True)
        raise typer.Exit(code=2)

    try:
        config = LoggerConfig.from_env(
            threshold=threshold, fixed_width=width, file_path=file, colorize=color, timestamps=timestamp
        )
        install(config)
    except (GoologError, ValidationError) as e:
        typer.echo(str(e), err=True)
        sys.exit(1)
    except Exception:
        logger.exception("Logger installation failed")
        sys.exit(1)

    emitter(target, message)


@app.command()
def version() -> None:
    """Print the version of coreason-goolog."""
    typer.echo(f"coreason-goolog v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()  # pragma: no cover
