"""Command execution package for CLI."""

from dbrestore.ui.cli.commands.providers import ProvidersCommand
from dbrestore.ui.cli.commands.restore import RestoreCommand

__all__ = ["ProvidersCommand", "RestoreCommand"]
