"""Display utilities for restore command results."""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.text import Text

from dbrestore.features.restoration import RestoreResult


@final
class RestoreResultDisplay:
    """Render restoration outcomes in the CLI."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_success(self, result: RestoreResult, *, quiet: bool = False) -> None:
        """Print the confirmation that the backup has been restored."""

        if quiet:
            return

        self.console.print()
        self.console.print(Text(success_message(result), style="green"))


def success_message(result: RestoreResult) -> str:
    request = result.request
    return (
        f'Backup "{result.location}" from service "{request.source}" '
        f'has been successfully restored to "{request.database}".'
    )


__all__ = ["RestoreResultDisplay", "success_message"]
