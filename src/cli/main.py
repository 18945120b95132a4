"""pubkit CLI (Typer).

Commands:
- `build`: copy the source tree into the distribution tree.
- `config`: show the effective settings.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from cli.ui_components import build_settings_table, print_completion, print_summary
from core.config import AppSettings
from core.logging_setup import get_logger, setup_logging
from core.services.publisher import publish

app = typer.Typer(
    name="pubkit",
    no_args_is_help=True,
    help="Publish a source directory tree into a distribution directory.",
)

_console = Console()
_err_console = Console(stderr=True)

logger = get_logger(__name__)


def _package_version() -> str:
    try:
        return version("pubkit")
    except PackageNotFoundError:
        return "0.0.0+dev"


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"pubkit {_package_version()}", highlight=False)
        raise typer.Exit()


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


@app.callback()
def main(
    version_: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Publish a source directory tree into a distribution directory."""


@app.command()
def build(
    source: Optional[Path] = typer.Option(
        None,
        "--source",
        "-s",
        help="Source directory (default: PUBKIT_SOURCE_DIR or ./src).",
    ),
    dest: Optional[Path] = typer.Option(
        None,
        "--dest",
        "-d",
        help="Destination directory (default: PUBKIT_DIST_DIR or ./dist).",
    ),
    clean: Optional[bool] = typer.Option(
        None,
        "--clean/--no-clean",
        help="Remove the destination tree before copying (default: merge).",
    ),
    preserve_symlinks: Optional[bool] = typer.Option(
        None,
        "--preserve-symlinks/--follow-symlinks",
        help="Copy symlinks as links instead of their targets.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each step and show a summary."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only report errors."),
) -> None:
    """Copy the source tree into the destination tree."""

    settings = _load_settings()
    level = "DEBUG" if verbose else "ERROR" if quiet else settings.log_level
    setup_logging(level, force=True)

    config = settings.to_publish_config(
        source_path=source,
        destination_path=dest,
        clean=clean,
        preserve_symlinks=preserve_symlinks,
    )

    try:
        result = publish(config)
    except OSError as exc:
        logger.debug("publish failed", exc_info=exc)
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc

    print_completion(_console)
    if verbose:
        print_summary(_err_console, result)


@app.command(name="config")
def show_config() -> None:
    """Show the effective settings (env vars, .env files and defaults)."""

    settings = _load_settings()
    _console.print(build_settings_table(settings))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
