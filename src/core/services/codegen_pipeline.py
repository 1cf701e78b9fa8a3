"""Orquestación de descarga de esquema y generación de código.

La CLI solo carga settings e imprime; cada paso aquí resuelve la estructura de
ficheros, construye su objeto de configuración y se lo pasa a un adaptador.
No hay reintentos ni se captura nada: cualquier fallo detiene el pipeline.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from pydantic import ValidationError

from adapters.codegen_runner import run_codegen
from adapters.schema_downloader import fetch_schema
from core.config import AppSettings
from core.domain.models import ADMIN_SECRET_HEADER, CodegenConfiguration, DownloadConfiguration
from core.errors import ConfigurationError
from core.file_structure import FileStructure, child_path

logger = logging.getLogger(__name__)

DOWNLOAD_TIMEOUT_SECONDS = 30.0

SchemaFetcher = Callable[[DownloadConfiguration], Path]


def build_download_configuration(
    settings: AppSettings,
    file_structure: FileStructure,
) -> DownloadConfiguration:
    schema_path = child_path(
        file_structure.child_folder(settings.target_folder),
        settings.schema_path,
    )
    try:
        return DownloadConfiguration(
            endpoint_url=settings.api_base_url,
            timeout_seconds=DOWNLOAD_TIMEOUT_SECONDS,
            headers={ADMIN_SECRET_HEADER: settings.admin_secret.get_secret_value()},
            output_folder=schema_path.parent,
            schema_filename=schema_path.name,
            output_format=settings.schema_format,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"invalid download configuration: {exc}") from exc


def build_codegen_configuration(
    settings: AppSettings,
    file_structure: FileStructure,
) -> CodegenConfiguration:
    target_root = file_structure.child_folder(settings.target_folder)
    schema_file = child_path(target_root, f"{settings.schema_path}{settings.schema_format.extension}")
    try:
        return CodegenConfiguration(
            schema_path=schema_file,
            operations_folder=target_root,
            output_folder=file_structure.child_folder(settings.output_folder),
            custom_scalar_format=settings.custom_scalar_format,
            async_client=settings.async_client,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"invalid codegen configuration: {exc}") from exc


def download_schema(settings: AppSettings, *, fetcher: SchemaFetcher | None = None) -> Path:
    """Descarga el esquema al target folder y devuelve la ruta escrita."""

    file_structure = FileStructure.resolve(settings)
    logger.info("File structure: %s", file_structure)

    config = build_download_configuration(settings, file_structure)
    return (fetcher or fetch_schema)(config)


def generate_code(settings: AppSettings) -> list[Path]:
    """Genera el cliente tipado a partir del esquema y las operaciones del target."""

    file_structure = FileStructure.resolve(settings)
    logger.info("File structure: %s", file_structure)

    config = build_codegen_configuration(settings, file_structure)
    # Make sure the folder exists before trying to generate code.
    config.operations_folder.mkdir(parents=True, exist_ok=True)

    return run_codegen(config, cli_folder=file_structure.cli_folder)


def download_and_generate(
    settings: AppSettings,
    *,
    fetcher: SchemaFetcher | None = None,
) -> tuple[Path, list[Path]]:
    """Descarga y luego genera; si la descarga falla, no se genera nada."""

    schema_path = download_schema(settings, fetcher=fetcher)
    generated = generate_code(settings)
    return schema_path, generated
