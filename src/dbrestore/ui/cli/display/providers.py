"""Table rendering for configured providers."""

from __future__ import annotations

from typing import final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from dbrestore.config.config import Config, DatabaseSettings


@final
class ProvidersDisplay:
    """Render storage services and database connections side by side."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show(self, config: Config) -> None:
        if not config.storage and not config.databases:
            self.console.print("[yellow]No storage services or database connections are configured.[/yellow]")
            return

        table = Table(
            title="Configured Providers",
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
            highlight=True,
        )
        table.add_column("Name", style="bold")
        table.add_column("Kind")
        table.add_column("Type")
        table.add_column("Location", style="dim")

        for storage in config.storage.values():
            table.add_row(storage.name, Text("storage", style="cyan"), storage.type, storage.root or "N/A")
        for database in config.databases.values():
            table.add_row(database.name, Text("database", style="green"), database.type, _location(database))

        self.console.print(table)


def _location(settings: DatabaseSettings) -> str:
    port = f":{settings.port}" if settings.port else ""
    name = f"/{settings.database}" if settings.database else ""
    return f"{settings.host}{port}{name}"


__all__ = ["ProvidersDisplay"]
