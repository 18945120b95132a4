"""Errores del Core.

Los fallos de I/O se propagan como la jerarquía estándar `OSError`
(`FileNotFoundError`, `NotADirectoryError`, `PermissionError`, `shutil.Error`).
Solo definimos lo que el sistema de archivos no reporta por sí mismo.
"""

from __future__ import annotations

import errno
from pathlib import Path


class PublishPathError(OSError):
    """Origen y destino se solapan de forma no publicable.

    Casos:
    - el destino coincide con el origen o está dentro de él
    - `clean` sobre un destino que contiene al origen
    """

    def __init__(self, source: Path, destination: Path, *, reason: str | None = None) -> None:
        super().__init__(
            errno.EINVAL,
            reason or f"cannot publish {source} into itself or one of its subdirectories",
            str(destination),
        )
        self.source = source
        self.destination = destination
