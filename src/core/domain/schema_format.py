"""Formats a downloaded schema can be stored in.

Kept in the domain layer so settings, configurations and adapters share one
source of truth for file extensions.
"""

from __future__ import annotations

from enum import Enum


class SchemaFormat(str, Enum):
    """On-disk representation of an introspected schema."""

    SDL = "sdl"
    JSON = "json"

    @property
    def extension(self) -> str:
        """File extension (with dot) written for this format."""

        return ".json" if self is SchemaFormat.JSON else ".graphqls"

    def label(self) -> str:
        """Human readable label for logging."""

        return "introspection JSON" if self is SchemaFormat.JSON else "SDL"
