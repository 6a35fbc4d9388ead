"""CLI de iseven-api (Typer + Rich).

Por qué tan delgada:
- Toda la lógica (URL, request, parseo, errores) vive en `adapters.iseven_api`.
- Aquí solo se parsean argumentos, se configura logging y se imprime.
"""

from __future__ import annotations

import logging
from importlib import metadata

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.iseven_api import iseven_get_blocking
from cli.ui_components import print_error, print_result, result_json
from core.config import AppSettings
from core.errors import IsEvenError

app = typer.Typer(add_completion=False, help="Ask the isEven API whether a number is even.")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _package_version() -> str:
    try:
        return metadata.version("iseven-api")
    except metadata.PackageNotFoundError:
        return "0.0.0+local"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"iseven-api {_package_version()}")
        raise typer.Exit()


def _configure_logging(level: str) -> None:
    """Instala un único RichHandler en stderr (idempotente entre invocaciones)."""

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.addHandler(
        RichHandler(console=_err_console, show_time=False, show_path=False, rich_tracebacks=False)
    )
    root.setLevel(level)


@app.command(
    # Permite números negativos como argumento posicional (`iseven-api -3`).
    context_settings={"ignore_unknown_options": True, "help_option_names": ["-h", "--help"]},
)
def check(
    number: int = typer.Argument(..., help="Integer to classify; negative values are accepted."),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the service response as JSON instead of a sentence.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Check whether NUMBER is even or odd using https://isevenapi.xyz."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=2) from exc
    _configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        result = iseven_get_blocking(number, settings=settings)
    except IsEvenError as exc:
        logger.debug("query for %s failed", number, exc_info=exc)
        print_error(_err_console, exc)
        raise typer.Exit(code=1) from exc

    if json_output:
        typer.echo(result_json(result))
        return
    print_result(_console, number, result)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
