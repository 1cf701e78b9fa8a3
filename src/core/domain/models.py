"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Valida los dos objetos de configuración al construirlos, así los adaptadores
  pueden confiar en las rutas e identificadores que reciben.

Nota:
- Estos modelos describen *qué* descargar o generar, no *cómo*; se construyen
  por comando y se descartan después.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.schema_format import SchemaFormat

ADMIN_SECRET_HEADER = "X-Hasura-Admin-Secret"


class DownloadConfiguration(BaseModel):
    """Parámetros de descarga del esquema vía introspection."""

    model_config = ConfigDict(frozen=True)

    endpoint_url: str = Field(
        ...,
        min_length=1,
        description="GraphQL endpoint receiving the introspection query.",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for the whole request (seconds).",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        repr=False,
        description="Extra HTTP headers (may contain secrets, never printed).",
    )
    output_folder: Path = Field(
        ...,
        description="Folder the schema file is written to.",
    )
    schema_filename: str = Field(
        ...,
        min_length=1,
        description="File name without extension; the format adds it.",
    )
    output_format: SchemaFormat = Field(
        default=SchemaFormat.SDL,
        description="SDL (`.graphqls`) or raw introspection JSON (`.json`).",
    )

    @field_validator("endpoint_url")
    @classmethod
    def _require_http_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("endpoint URL must start with http:// or https://")
        return value

    @property
    def output_path(self) -> Path:
        return self.output_folder / f"{self.schema_filename}{self.output_format.extension}"


class CustomScalarFormat(str, Enum):
    """How custom scalars are typed in generated code."""

    # Custom scalars stay `Any`; no parse/serialize hooks.
    PASSTHROUGH = "passthrough"
    # Every custom scalar is typed as `str`.
    NONE = "none"


class CodegenConfiguration(BaseModel):
    """Parámetros de generación de código (ariadne-codegen).

    La salida es siempre "varios ficheros en una carpeta": un paquete Python
    cuyo nombre es el último componente de `output_folder`.
    """

    model_config = ConfigDict(frozen=True)

    schema_path: Path = Field(..., description="Schema file read by the generator.")
    operations_folder: Path = Field(
        ...,
        description="Folder searched (recursively) for operation documents.",
    )
    output_folder: Path = Field(..., description="Generated package folder.")
    custom_scalar_format: CustomScalarFormat = Field(default=CustomScalarFormat.PASSTHROUGH)
    async_client: bool = Field(default=True)

    @field_validator("output_folder")
    @classmethod
    def _require_package_name(cls, value: Path) -> Path:
        if not value.name.isidentifier():
            raise ValueError(f"{value.name!r} is not a valid Python package name")
        return value

    @property
    def target_package_path(self) -> Path:
        return self.output_folder.parent

    @property
    def target_package_name(self) -> str:
        return self.output_folder.name
