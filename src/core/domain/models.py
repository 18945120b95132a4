"""Modelos del dominio (Pydantic v2).

Nota:
- `PublishConfig` describe *qué* se publica, no *cómo* se copia.
- Las rutas son identificadores inmutables; no se resuelven ni se validan
  contra el disco aquí (eso ocurre al publicar).
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PublishConfig(BaseModel):
    """Configuración explícita de una publicación (origen -> destino)."""

    model_config = ConfigDict(frozen=True)

    source_path: Path = Field(
        ...,
        description="Árbol de origen; debe existir y ser un directorio legible.",
    )
    destination_path: Path = Field(
        ...,
        description="Árbol de destino; se crea (con ancestros) si no existe.",
    )
    clean: bool = Field(
        default=False,
        description="Eliminar el destino existente antes de copiar (por defecto: merge).",
    )
    preserve_symlinks: bool = Field(
        default=False,
        description="Copiar symlinks como enlaces en lugar de su contenido.",
    )


class PublishResult(BaseModel):
    """Resultado de una publicación completada."""

    source_path: Path = Field(..., description="Origen copiado.")
    destination_path: Path = Field(..., description="Destino escrito.")
    files_copied: int = Field(
        default=0,
        ge=0,
        description="Número de archivos copiados (incluye sobrescritos).",
    )
    directories_created: int = Field(
        default=0,
        ge=0,
        description="Directorios creados en el destino (raíz incluida).",
    )
    cleaned: bool = Field(
        default=False,
        description="Indica si el destino previo fue eliminado antes de copiar.",
    )
    finished_at: datetime = Field(
        default_factory=_utcnow,
        description="Momento de finalización (UTC).",
    )
