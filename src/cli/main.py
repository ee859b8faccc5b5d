"""CLI entry point (Typer).

Running the command with no arguments prints the example document to stdout
and exits with status 0.
"""

from __future__ import annotations

import logging
import sys

import typer
from pydantic import ValidationError

from cli.ui_components import build_stderr_console, build_stdout_console, print_config_error
from core.config import AppSettings
from core.document import print_document

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Print a structured example document with console text decorations.",
)


def _configure_logging(level: str) -> None:
    # force: rebind to the current stderr on every invocation.
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"]) or "settings"
        parts.append(f"{field}: {error['msg']}")
    return "; ".join(parts)


@app.command()
def show() -> None:
    """Print the example document."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_config_error(build_stderr_console(), _format_validation_error(exc))
        raise typer.Exit(code=2) from exc

    _configure_logging(settings.log_level)
    logger.debug("Settings loaded: %s", settings.model_dump())

    print_document(build_stdout_console(), settings)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
