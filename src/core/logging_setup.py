"""Logging setup (stdlib `logging` + Rich).

Reglas:
- Los logs van a stderr mediante `RichHandler`; stdout queda libre para el
  aviso de build completado.
- Nivel: argumento explícito, luego `PUBKIT_LOG_LEVEL`, luego WARNING.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_LEVEL = "WARNING"

_configured = False


def _resolve_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    name = (level or os.environ.get("PUBKIT_LOG_LEVEL") or DEFAULT_LEVEL).strip().upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: int | str | None = None, *, force: bool = False) -> None:
    """Configure the root logger once (unless `force=True`)."""

    global _configured
    if _configured and not force:
        return

    root = logging.getLogger()
    if force:
        for handler in list(root.handlers):
            if isinstance(handler, RichHandler):
                root.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))
    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
