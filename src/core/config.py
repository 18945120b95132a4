"""Configuración del Core.

Centraliza variables de entorno (pydantic-settings) para que la CLI y los
servicios lean la misma configuración. Las rutas fijas del build original
(`src` -> `dist`) viven aquí como defaults, no como estado global.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import PublishConfig


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "pubkit"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "pubkit"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pubkit"
    return Path.home() / ".config" / "pubkit"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Orden de lectura: variables de entorno `PUBKIT_*`, luego `.env` del
    proyecto, luego el `.env` global del usuario.
    """

    model_config = SettingsConfigDict(
        env_prefix="PUBKIT_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    source_dir: Path = Field(
        default=Path("src"),
        description="Source tree copied by `pubkit build` (relative to cwd).",
    )
    dist_dir: Path = Field(
        default=Path("dist"),
        description="Destination tree written by `pubkit build` (created if missing).",
    )
    clean: bool = Field(
        default=False,
        description="Remove the destination tree before copying.",
    )
    preserve_symlinks: bool = Field(
        default=False,
        description="Copy symlinks as links instead of their targets.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Root log level (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level: {value!r}")
        return name

    def to_publish_config(self, **overrides: Any) -> PublishConfig:
        """Build an explicit `PublishConfig`, applying non-None overrides."""

        values: dict[str, Any] = {
            "source_path": self.source_dir,
            "destination_path": self.dist_dir,
            "clean": self.clean,
            "preserve_symlinks": self.preserve_symlinks,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return PublishConfig(**values)
