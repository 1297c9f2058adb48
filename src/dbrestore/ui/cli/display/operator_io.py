"""src/dbrestore/ui/cli/display/operator_io.py
What: Render prompt output with Rich and read answers with questionary.
Why: Give the argument resolver one console seam that tests can replace.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

import questionary
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text


@final
class RichOperatorIO:
    """Interactive console used while resolving restore arguments."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def info(self, message: str) -> None:
        self.console.print(Text(message, style="green"))

    def line(self, message: str = "") -> None:
        self.console.print(Text(message))

    def error(self, message: str) -> None:
        self.console.print(Text(message, style="bold red"))

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        table = Table(show_header=True, header_style="bold magenta", box=box.SIMPLE_HEAD)
        for header in headers:
            table.add_column(header)
        for row in rows:
            table.add_row(*row)
        self.console.print(table)

    def ask(self, question: str, default: str = "") -> str:
        # unsafe_ask lets Ctrl-C reach the command boundary as KeyboardInterrupt
        answer = questionary.text(question, default=default).unsafe_ask()
        return answer or ""

    def autocomplete(self, question: str, choices: Sequence[str]) -> str:
        answer = questionary.autocomplete(
            question,
            choices=list(choices),
            ignore_case=True,
            match_middle=True,
        ).unsafe_ask()
        return answer or ""

    def confirm(self, question: str) -> bool:
        return bool(questionary.confirm(question, default=False).unsafe_ask())


__all__ = ["RichOperatorIO"]
