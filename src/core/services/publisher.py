"""Directory publishing service.

The CLI delegates the whole build to `publish`, which keeps side-effects
(printing, exit codes) out of the core flow. Library callers pass an explicit
`PublishConfig`; nothing here reads global configuration.

The operation is not transactional: a failure partway through leaves whatever
was already copied in place, and the error propagates unchanged.
"""

from __future__ import annotations

import errno
import shutil
from pathlib import Path

from adapters.tree_copier import ShutilTreeCopier
from core.domain.models import PublishConfig, PublishResult
from core.errors import PublishPathError
from core.interfaces.copier import TreeCopier
from core.logging_setup import get_logger

logger = get_logger(__name__)


def _overlaps(source: Path, destination: Path) -> bool:
    src = source.resolve()
    dst = destination.resolve()
    return dst == src or src in dst.parents


def _contains(destination: Path, source: Path) -> bool:
    return destination.resolve() in source.resolve().parents


def _ensure_source_dir(source: Path) -> None:
    if not source.exists():
        raise FileNotFoundError(errno.ENOENT, "source directory does not exist", str(source))
    if not source.is_dir():
        raise NotADirectoryError(errno.ENOTDIR, "source is not a directory", str(source))


def publish(config: PublishConfig, *, copier: TreeCopier | None = None) -> PublishResult:
    """Copy `config.source_path` recursively into `config.destination_path`.

    Orden:
    1) rechaza destino == origen o destino dentro del origen
    2) `clean`: rechaza un destino que contiene al origen; si no, lo elimina
    3) crea el destino (con ancestros)
    4) valida el origen y copia el árbol
    """

    copier = copier or ShutilTreeCopier()
    source = config.source_path
    destination = config.destination_path

    if _overlaps(source, destination):
        raise PublishPathError(source, destination)

    if config.clean and _contains(destination, source):
        raise PublishPathError(
            source,
            destination,
            reason=f"refusing to clean {destination}: it contains the source {source}",
        )

    cleaned = False
    if config.clean and destination.is_dir() and not destination.is_symlink():
        logger.debug("removing existing destination %s", destination)
        shutil.rmtree(destination)
        cleaned = True

    root_created = not destination.exists()
    destination.mkdir(parents=True, exist_ok=True)
    logger.debug("destination ready: %s (created=%s)", destination, root_created)

    _ensure_source_dir(source)
    stats = copier.copy_tree(
        source,
        destination,
        preserve_symlinks=config.preserve_symlinks,
    )

    result = PublishResult(
        source_path=source,
        destination_path=destination,
        files_copied=stats.files_copied,
        directories_created=stats.directories_created + int(root_created),
        cleaned=cleaned,
    )
    logger.info(
        "published %s -> %s (%d files, %d directories created)",
        source,
        destination,
        result.files_copied,
        result.directories_created,
    )
    return result
