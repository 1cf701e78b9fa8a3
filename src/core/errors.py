"""Errores propios de la CLI.

Solo hay dos familias:
- problemas de configuración (variables ausentes, rutas inválidas), detectados
  antes de cualquier I/O;
- comprobaciones previas alrededor de las librerías envueltas (respuestas de
  introspection mal formadas, esquema u operaciones ausentes).

Los errores de httpx, graphql-core o ariadne-codegen no se envuelven: llegan
tal cual al borde de la CLI.
"""

from __future__ import annotations


class CodegenCliError(Exception):
    """Base class for errors raised by this tool."""


class ConfigurationError(CodegenCliError):
    """Required configuration is missing or invalid."""


class SchemaDownloadError(CodegenCliError):
    """The endpoint answered, but not with a usable introspection result."""


class CodegenError(CodegenCliError):
    """Code generation cannot start with the files found on disk."""
