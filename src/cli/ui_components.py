"""Componentes de UI para CLI (Rich).

Tablas reutilizables para los comandos; los comandos solo deciden qué
imprimir y dónde (stdout vs stderr).
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.config import AppSettings
from core.domain.models import PublishResult

COMPLETION_NOTICE = "Build completed ✅"


def print_completion(console: Console) -> None:
    """Imprime el aviso de build completado (una sola línea)."""

    console.print(COMPLETION_NOTICE, markup=False, highlight=False)


def build_summary_table(result: PublishResult) -> Table:
    """Tabla con el detalle de una publicación."""

    table = Table(title="Publish Summary")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Source", escape(str(result.source_path)))
    table.add_row("Destination", escape(str(result.destination_path)))
    table.add_row("Files copied", str(result.files_copied))
    table.add_row("Directories created", str(result.directories_created))
    table.add_row("Cleaned", "yes" if result.cleaned else "no")
    table.add_row("Finished", result.finished_at.isoformat(timespec="seconds"))
    return table


def print_summary(console: Console, result: PublishResult) -> None:
    console.print(build_summary_table(result))


def build_settings_table(settings: AppSettings) -> Table:
    """Tabla con la configuración efectiva (env + .env + defaults)."""

    table = Table(title="pubkit settings")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_column("Description", style="dim")
    for name, field in AppSettings.model_fields.items():
        table.add_row(name, escape(str(getattr(settings, name))), field.description or "")
    return table
