"""Resolución de rutas del proyecto.

`FileStructure` se calcula una vez al inicio de cada comando y no cambia:
- `source_root`: el proyecto al que pertenecen el esquema y el código generado;
- `cli_folder`: dónde vive esta herramienta (solo se muestra en logs).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.config import AppSettings
from core.errors import ConfigurationError


def _tool_root() -> Path:
    # core/file_structure.py -> core -> src
    return Path(__file__).resolve().parents[1]


def child_path(base: Path, name: str) -> Path:
    """Join `name` (possibly nested, e.g. `GeneratedAPI/Operations`) under `base`."""

    cleaned = name.strip()
    if not cleaned:
        raise ConfigurationError(f"empty path component under {base}")
    candidate = Path(cleaned)
    if candidate.is_absolute():
        raise ConfigurationError(f"expected a path relative to {base}, got {cleaned!r}")
    return base / candidate


@dataclass(frozen=True)
class FileStructure:
    source_root: Path
    cli_folder: Path

    @classmethod
    def resolve(cls, settings: AppSettings) -> "FileStructure":
        root = settings.source_root or Path.cwd()
        root = root.expanduser().resolve()
        if not root.is_dir():
            raise ConfigurationError(f"source root does not exist or is not a folder: {root}")
        return cls(source_root=root, cli_folder=_tool_root())

    def child_folder(self, name: str) -> Path:
        return child_path(self.source_root, name)

    def __str__(self) -> str:
        return f"source root: {self.source_root}, cli folder: {self.cli_folder}"
