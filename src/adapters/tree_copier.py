"""Copia recursiva basada en `shutil`.

Implementa `TreeCopier` sobre `shutil.copytree(dirs_exist_ok=True)`: los
directorios existentes se reutilizan y los archivos se sobrescriben con
`shutil.copy2` (contenido + metadatos).
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from core.interfaces.copier import CopyStats
from core.logging_setup import get_logger

logger = get_logger(__name__)


def _count_missing_dirs(source: Path, destination: Path, *, preserve_symlinks: bool) -> int:
    # Mirror copytree: follow linked dirs, or recreate them as links (not dirs).
    missing = 0
    for root, dirs, _files in os.walk(source, followlinks=not preserve_symlinks):
        rel = Path(root).relative_to(source)
        for name in dirs:
            if preserve_symlinks and (Path(root) / name).is_symlink():
                continue
            if not (destination / rel / name).exists():
                missing += 1
    return missing


class ShutilTreeCopier:
    """`TreeCopier` that delegates to `shutil.copytree`."""

    def copy_tree(
        self,
        source: Path,
        destination: Path,
        *,
        preserve_symlinks: bool = False,
    ) -> CopyStats:
        directories_created = _count_missing_dirs(
            source, destination, preserve_symlinks=preserve_symlinks
        )
        files_copied = 0

        def _copy(src: str, dst: str) -> str:
            nonlocal files_copied
            logger.debug("copy %s -> %s", src, dst)
            result = shutil.copy2(src, dst)
            files_copied += 1
            return result

        shutil.copytree(
            source,
            destination,
            symlinks=preserve_symlinks,
            copy_function=_copy,
            dirs_exist_ok=True,
        )
        return CopyStats(files_copied=files_copied, directories_created=directories_created)
