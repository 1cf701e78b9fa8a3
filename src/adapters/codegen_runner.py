"""Adaptador para ariadne-codegen.

Responsabilidad:
- Reunir los documentos de operaciones (`*.graphql`, `*.gql`) del target.
- Copiarlos a una carpeta temporal: ariadne-codegen carga todos los ficheros
  GraphQL bajo `queries_path` y el esquema SDL no debe parsearse como
  documento de operaciones.
- Llamar a `ariadne_codegen.main.client` con un config dict equivalente a la
  sección `[tool.ariadne-codegen]` de un pyproject.

Errores de ariadne-codegen se propagan sin envolver.
"""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path
from typing import Any

from ariadne_codegen.main import client as generate_client
from graphql import GraphQLScalarType, build_schema, is_specified_scalar_type

from adapters.schema_downloader import introspection_to_sdl
from core.domain.models import CodegenConfiguration, CustomScalarFormat
from core.errors import CodegenError

logger = logging.getLogger(__name__)

OPERATION_SUFFIXES = (".graphql", ".gql")


def _is_relative_to(path: Path, other: Path) -> bool:
    try:
        path.relative_to(other)
    except ValueError:
        return False
    return True


def find_operation_files(config: CodegenConfiguration) -> list[Path]:
    """Documentos de operaciones bajo `operations_folder`, en orden estable.

    Excluye el propio esquema y todo lo que esté dentro de la carpeta de salida.
    """

    root = config.operations_folder
    if not root.is_dir():
        return []

    schema = config.schema_path.resolve()
    output = config.output_folder.resolve()
    found: list[Path] = []
    for path in sorted(root.rglob("*")):
        if not path.is_file() or path.suffix.lower() not in OPERATION_SUFFIXES:
            continue
        resolved = path.resolve()
        if resolved == schema or _is_relative_to(resolved, output):
            continue
        found.append(path)
    return found


def _stage_schema(schema_path: Path, staging: Path) -> Path:
    if schema_path.suffix.lower() != ".json":
        return schema_path

    # ariadne-codegen reads SDL only; convert a stored introspection result.
    raw = json.loads(schema_path.read_text(encoding="utf-8"))
    data = raw.get("data", raw) if isinstance(raw, dict) else raw
    staged = staging / "schema.graphqls"
    staged.write_text(introspection_to_sdl(data), encoding="utf-8")
    return staged


def _stage_operations(files: list[Path], staging: Path) -> Path:
    documents = [path.read_text(encoding="utf-8").strip() for path in files]
    staged = staging / "operations" / "operations.graphql"
    staged.parent.mkdir(parents=True, exist_ok=True)
    staged.write_text("\n\n".join(doc for doc in documents if doc) + "\n", encoding="utf-8")
    return staged.parent


def custom_scalar_names(schema_path: Path) -> list[str]:
    """Escalares declarados en el esquema SDL, sin los estándar de GraphQL."""

    schema = build_schema(schema_path.read_text(encoding="utf-8"))
    return sorted(
        name
        for name, type_ in schema.type_map.items()
        if isinstance(type_, GraphQLScalarType) and not is_specified_scalar_type(type_)
    )


def build_ariadne_config(
    config: CodegenConfiguration,
    *,
    schema_path: Path,
    queries_path: Path,
) -> dict[str, Any]:
    """Config dict con la forma `{"tool": {"ariadne-codegen": {...}}}`."""

    section: dict[str, Any] = {
        "schema_path": str(schema_path),
        "queries_path": str(queries_path),
        "target_package_name": config.target_package_name,
        "target_package_path": str(config.target_package_path),
        "async_client": config.async_client,
    }
    # Passthrough: no `scalars` mapping, custom scalars stay `Any`.
    if config.custom_scalar_format is CustomScalarFormat.NONE:
        section["scalars"] = {name: {"type": "str"} for name in custom_scalar_names(schema_path)}
    return {"tool": {"ariadne-codegen": section}}


def run_codegen(config: CodegenConfiguration, *, cli_folder: Path) -> list[Path]:
    """Genera el paquete cliente y devuelve los ficheros `.py` producidos."""

    if not config.schema_path.is_file():
        raise CodegenError(f"schema file not found: {config.schema_path}")

    operations = find_operation_files(config)
    if not operations:
        raise CodegenError(
            f"no operation documents ({', '.join(OPERATION_SUFFIXES)}) found under "
            f"{config.operations_folder}"
        )
    logger.info("Found %d operation document(s) under %s", len(operations), config.operations_folder)
    logger.debug("Running ariadne-codegen from %s", cli_folder)

    config.target_package_path.mkdir(parents=True, exist_ok=True)
    with tempfile.TemporaryDirectory(prefix="graphql-codegen-") as tmp:
        staging = Path(tmp)
        ariadne_config = build_ariadne_config(
            config,
            schema_path=_stage_schema(config.schema_path, staging),
            queries_path=_stage_operations(operations, staging),
        )
        generate_client(ariadne_config)

    generated = sorted(config.output_folder.glob("*.py")) if config.output_folder.is_dir() else []
    logger.info("Generated %d file(s) in %s", len(generated), config.output_folder)
    return generated
