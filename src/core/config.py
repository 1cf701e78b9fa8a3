"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Orquestadores y adaptadores reciben un `AppSettings` en vez de leer
  `os.environ` por su cuenta.

Las tres variables de conexión conservan sus nombres históricos (`API_BASE_URL`,
`APOLLO_SCHEMA_PATH`, `HASURA_ADMIN_SECRET`); todo lo opcional usa el prefijo
`CODEGEN_`.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import CustomScalarFormat
from core.domain.schema_format import SchemaFormat
from core.errors import ConfigurationError

DEFAULT_TARGET_FOLDER = "LucraSports"
DEFAULT_OUTPUT_FOLDER = "GeneratedAPI/Operations"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Los valores obligatorios no tienen default: construir los settings sin ellos
    falla, y así cada subcomando aborta antes de tocar la red o el disco.
    """

    model_config = SettingsConfigDict(
        env_prefix="CODEGEN_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        ...,
        min_length=1,
        validation_alias="API_BASE_URL",
        description="GraphQL endpoint queried with the introspection query.",
    )
    schema_path: str = Field(
        ...,
        min_length=1,
        validation_alias="APOLLO_SCHEMA_PATH",
        description="Schema file name, relative to the target folder, without extension.",
    )
    admin_secret: SecretStr = Field(
        ...,
        validation_alias="HASURA_ADMIN_SECRET",
        description="Value sent in the X-Hasura-Admin-Secret header.",
    )

    source_root: Path | None = Field(
        default=None,
        description="Project root. Defaults to the current working directory.",
    )
    target_folder: str = Field(
        default=DEFAULT_TARGET_FOLDER,
        min_length=1,
        description="Folder (under the root) holding the schema and the operation documents.",
    )
    output_folder: str = Field(
        default=DEFAULT_OUTPUT_FOLDER,
        min_length=1,
        description="Folder (under the root) where the generated client package is written.",
    )
    schema_format: SchemaFormat = Field(
        default=SchemaFormat.SDL,
        description="On-disk format of the downloaded schema (sdl/json).",
    )
    async_client: bool = Field(
        default=True,
        description="Generate an async client instead of a blocking one.",
    )
    custom_scalar_format: CustomScalarFormat = Field(
        default=CustomScalarFormat.PASSTHROUGH,
        description="Typing of custom scalars in generated code (passthrough/none).",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level for the CLI (DEBUG, INFO, WARNING...).",
    )

    @field_validator("schema_path")
    @classmethod
    def _strip_schema_path(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper() or "INFO"
        if level not in _LOG_LEVELS:
            raise ValueError(f"expected one of {', '.join(_LOG_LEVELS)}")
        return level


_UNPREFIXED_VARS = ("API_BASE_URL", "APOLLO_SCHEMA_PATH", "HASURA_ADMIN_SECRET")


def _env_name(loc: tuple) -> str:
    name = ".".join(str(part) for part in loc) or "?"
    field = AppSettings.model_fields.get(name)
    if field is not None and isinstance(field.validation_alias, str):
        return field.validation_alias
    if name.upper() in _UNPREFIXED_VARS:
        return name.upper()
    return f"CODEGEN_{name.upper()}"


def _describe_errors(exc: ValidationError) -> str:
    missing: list[str] = []
    invalid: list[str] = []
    for error in exc.errors():
        name = _env_name(tuple(error.get("loc", ())))
        if error.get("type") == "missing":
            missing.append(name)
        else:
            invalid.append(f"{name} ({error.get('msg')})")

    parts: list[str] = []
    if missing:
        parts.append("missing environment variable(s): " + ", ".join(missing))
    if invalid:
        parts.append("invalid value(s): " + ", ".join(invalid))
    return "; ".join(parts) or str(exc)


def load_settings() -> AppSettings:
    """Lee `AppSettings` del entorno y traduce errores de validación."""

    try:
        return AppSettings()
    except ValidationError as exc:
        raise ConfigurationError(_describe_errors(exc)) from exc
