"""Descarga del esquema GraphQL vía introspection.

Lógica:
- POST de la introspection query estándar de graphql-core.
- Si el formato es SDL, se reconstruye el esquema (`build_client_schema`) y se
  imprime con `print_schema`.
- Si es JSON, se guarda la respuesta `{"data": ...}` tal cual.

Los errores HTTP y GraphQL de httpx/graphql-core se propagan sin cambios.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import httpx
from graphql import build_client_schema, get_introspection_query, print_schema

from adapters.http_client import build_client
from core.domain.models import DownloadConfiguration
from core.domain.schema_format import SchemaFormat
from core.errors import SchemaDownloadError

logger = logging.getLogger(__name__)


def fetch_introspection(
    config: DownloadConfiguration,
    *,
    transport: httpx.BaseTransport | None = None,
) -> dict[str, Any]:
    """Ejecuta la introspection query y devuelve la parte `data` de la respuesta."""

    payload = {
        "operationName": "IntrospectionQuery",
        "query": get_introspection_query(descriptions=True),
    }
    with build_client(
        timeout_seconds=config.timeout_seconds,
        extra_headers=config.headers,
        transport=transport,
    ) as client:
        response = client.post(config.endpoint_url, json=payload)
    response.raise_for_status()

    try:
        body = response.json()
    except ValueError as exc:
        raise SchemaDownloadError(
            f"introspection response from {config.endpoint_url} is not JSON"
        ) from exc

    if not isinstance(body, dict):
        raise SchemaDownloadError("introspection response is not a JSON object")
    if body.get("errors"):
        raise SchemaDownloadError(f"introspection query returned errors: {body['errors']}")

    data = body.get("data")
    if not isinstance(data, dict) or "__schema" not in data:
        raise SchemaDownloadError(
            f"introspection response is missing data.__schema (keys: {sorted(body)})"
        )
    return data


def introspection_to_sdl(data: dict[str, Any]) -> str:
    schema = build_client_schema(data)
    return print_schema(schema).strip() + "\n"


def fetch_schema(
    config: DownloadConfiguration,
    *,
    transport: httpx.BaseTransport | None = None,
) -> Path:
    """Descarga el esquema y lo escribe en `config.output_path`."""

    logger.info("Downloading schema from %s", config.endpoint_url)
    data = fetch_introspection(config, transport=transport)

    if config.output_format is SchemaFormat.JSON:
        content = json.dumps({"data": data}, ensure_ascii=False, indent=2) + "\n"
    else:
        content = introspection_to_sdl(data)

    output_path = config.output_path
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    logger.info("Wrote %s schema to %s", config.output_format.label(), output_path)
    return output_path
