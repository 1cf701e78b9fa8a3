"""CLI principal (Typer).

Subcomandos:
- `downloadSchema`: descarga el esquema vía introspection.
- `generate`: genera el cliente tipado desde esquema + operaciones.
- `all`: ambos, en ese orden.

Los settings se cargan antes que nada: si falta una variable de entorno, el
comando aborta antes de cualquier I/O de red o de disco.
"""

from __future__ import annotations

from typing import Callable, TypeVar

import typer
from rich.console import Console

from cli.ui_components import build_results_table, configure_logging, print_error
from core.config import AppSettings, load_settings
from core.errors import ConfigurationError
from core.services import codegen_pipeline

T = TypeVar("T")

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Utility for GraphQL schema download and typed client generation.\n\n"
        "NOTE: `all` needs network access and takes longer than `generate` alone."
    ),
)

_console = Console()
_err_console = Console(stderr=True)


def _run(step: Callable[[AppSettings], T]) -> T:
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        print_error(_err_console, "Configuration error", exc)
        raise typer.Exit(code=1) from exc

    configure_logging(_err_console, settings.log_level)
    try:
        return step(settings)
    except Exception as exc:
        print_error(_err_console, exc.__class__.__name__, exc)
        raise typer.Exit(code=1) from exc


@app.command(name="downloadSchema")
def download_schema() -> None:
    """Downloads the schema from API_BASE_URL into the target folder."""

    schema_path = _run(codegen_pipeline.download_schema)
    _console.print(build_results_table(schema_path=schema_path))


@app.command(name="generate")
def generate() -> None:
    """Generates the typed client from the schema and the operations in the target folder."""

    generated = _run(codegen_pipeline.generate_code)
    _console.print(build_results_table(generated=generated))


@app.command(name="all")
def download_and_generate() -> None:
    """Downloads the schema, then generates code. Not meant for every build."""

    schema_path, generated = _run(codegen_pipeline.download_and_generate)
    _console.print(build_results_table(schema_path=schema_path, generated=generated))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
