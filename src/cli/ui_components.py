"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en los tres subcomandos.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table


def configure_logging(console: Console, level: str = "INFO") -> None:
    """Route `logging` records through Rich, on stderr."""

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
        force=True,
    )


def print_error(console: Console, title: str, exc: BaseException) -> None:
    detail = str(exc) or exc.__class__.__name__
    console.print(f"[bold red]{escape(title)}:[/bold red] {escape(detail)}", highlight=False)


def build_results_table(*, schema_path: Path | None = None, generated: list[Path] | None = None) -> Table:
    """Tabla resumen de lo que se escribió en disco."""

    table = Table(title="GraphQL codegen")
    table.add_column("Step", style="cyan", no_wrap=True)
    table.add_column("Result", style="white")
    if schema_path is not None:
        table.add_row("Schema", str(schema_path))
    if generated is not None:
        folder = str(generated[0].parent) if generated else "-"
        table.add_row("Generated", f"{len(generated)} file(s) in {folder}")
    return table
