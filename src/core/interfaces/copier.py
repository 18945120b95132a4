"""Contrato de copia recursiva de árboles de directorios."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class CopyStats:
    """Counters reported by a `TreeCopier` run."""

    files_copied: int = 0
    directories_created: int = 0


@runtime_checkable
class TreeCopier(Protocol):
    """Contrato mínimo para copiar un árbol.

    Reglas:
    - `destination` ya existe cuando se invoca `copy_tree`.
    - Entradas existentes en el destino se sobrescriben; las que no están en
      el origen se conservan.
    - Los errores de I/O se propagan sin transformar.
    """

    def copy_tree(
        self,
        source: Path,
        destination: Path,
        *,
        preserve_symlinks: bool = False,
    ) -> CopyStats:
        ...
