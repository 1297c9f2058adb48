"""Ports for the restoration feature."""

from __future__ import annotations

from collections.abc import Sequence
from typing import BinaryIO, Protocol

from ..domain.models import BackupFileEntry


class StorageFilesystem(Protocol):
    """Filesystem handle for one configured storage service."""

    def list_contents(self, path: str) -> list[BackupFileEntry]:
        """Return the immediate entries at ``path``; missing paths yield an empty list."""

        ...

    def read_stream(self, path: str) -> BinaryIO:
        """Open ``path`` for binary reading."""

        ...


class StorageCatalog(Protocol):
    """Named storage configurations available to the operator."""

    def available_providers(self) -> list[str]:
        ...

    def get_config(self, name: str, key: str) -> str:
        """Return a single configuration value, or an empty string when unset."""

        ...

    def get(self, name: str) -> StorageFilesystem:
        ...


class Database(Protocol):
    """A configured database connection able to load a dump file."""

    def restore_command(self, input_path: str) -> str:
        """Build the shell command loading ``input_path`` into the database."""

        ...


class DatabaseCatalog(Protocol):
    """Named database connections available to the operator."""

    def available_providers(self) -> list[str]:
        ...

    def get(self, name: str) -> Database:
        ...


class Compressor(Protocol):
    """Shell-level decompression for one compression scheme."""

    suffix: str

    def decompress_command(self, input_path: str) -> str | None:
        """Return the command to run, or ``None`` when nothing needs doing."""

        ...

    def decompressed_path(self, input_path: str) -> str:
        ...


class ShellProcessor(Protocol):
    """Run shell commands on behalf of the restore procedure."""

    def process(self, command: str) -> None:
        ...


class RestoreEngine(Protocol):
    """Perform the actual restore once every parameter is resolved."""

    def run(self, source: str, source_path: str, database: str, compression: str) -> None:
        ...


class OperatorIO(Protocol):
    """Console interaction with the operator running the command."""

    def info(self, message: str) -> None:
        ...

    def line(self, message: str = "") -> None:
        ...

    def error(self, message: str) -> None:
        ...

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        ...

    def ask(self, question: str, default: str = "") -> str:
        """Request free text input."""

        ...

    def autocomplete(self, question: str, choices: Sequence[str]) -> str:
        """Request input completed from ``choices``; free text remains possible."""

        ...

    def confirm(self, question: str) -> bool:
        ...
