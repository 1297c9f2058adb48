"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from dbrestore.features.restoration import ParameterSet


@final
@dataclass(slots=True)
class RestoreArgs:
    """Command line arguments for the ``restore`` subcommand."""

    command: Literal["restore"]
    source: str | None
    source_path: str | None
    database: str | None
    compression: str | None
    verbose: bool
    quiet: bool

    def to_parameters(self) -> ParameterSet:
        return ParameterSet(
            source=self.source,
            source_path=self.source_path,
            database=self.database,
            compression=self.compression,
        )


@final
@dataclass(slots=True)
class ProvidersArgs:
    """Command line arguments for the ``providers`` subcommand."""

    command: Literal["providers"]
    verbose: bool
    quiet: bool


CLIArgs = RestoreArgs | ProvidersArgs

__all__ = ["CLIArgs", "ProvidersArgs", "RestoreArgs"]
