"""Typer CLI application."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console

from papirus_switcher.config import Settings

logger = logging.getLogger("papirus_switcher")


def configure_logging(settings: Settings) -> None:
    """Log to a file when asked; the terminal belongs to the picker."""
    if settings.log_file is None:
        logger.addHandler(logging.NullHandler())
        return
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(settings.log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def create_app(settings: Optional[Settings] = None) -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="papirus-switcher",
        help="Pick the Papirus folder color interactively.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.command()
    def pick() -> None:
        """Browse folder colors, filter with /, and apply one with Enter."""
        from papirus_switcher.backend.papirus import PapirusFolders
        from papirus_switcher.cli.session.picker import Outcome, run_picker

        active_settings = settings or Settings.from_env()
        configure_logging(active_settings)

        try:
            result = run_picker(PapirusFolders(active_settings), active_settings)
        except Exception as e:
            # The terminal has already been restored by managed_mode
            logger.exception("Picker failed")
            console.print(f"[red]papirus-switcher failed unexpectedly:[/] {e or type(e).__name__}")
            raise typer.Exit(1)

        if result.outcome == Outcome.APPLIED:
            console.print(f"[green]Folder color set to[/] [bold]{result.applied}[/]")

    return app
