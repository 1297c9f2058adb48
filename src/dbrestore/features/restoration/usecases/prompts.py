"""
Summary: Prompt strategies that fill one restore parameter each.
Why: Keep catalog lookups and operator questions out of the resolution loop.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Final

from dbrestore.shared.formatting import format_bytes, format_timestamp, join_path

from ..domain.errors import EmptyCatalogError, UnresolvedParameterError
from ..domain.models import BackupFileEntry, CompressionType, Parameter, ParameterSet
from .ports import DatabaseCatalog, OperatorIO, StorageCatalog

BACKUP_TABLE_HEADERS: Final[tuple[str, ...]] = ("Name", "Extension", "Size", "Created")
NO_BACKUPS_MESSAGE: Final[str] = "No backups were found at this path."


@dataclass(slots=True, frozen=True)
class PromptContext:
    """Collaborators every prompt strategy may consult."""

    storages: StorageCatalog
    databases: DatabaseCatalog
    io: OperatorIO


PromptStrategy = Callable[[PromptContext, ParameterSet], None]


def ask_source(context: PromptContext, parameters: ParameterSet) -> None:
    providers = context.storages.available_providers()
    context.io.info(f"Available storage services: {', '.join(providers)}")
    source = _select(
        context.io,
        "From which storage service do you want to choose?",
        providers,
        kind="storage",
    )
    parameters.set(Parameter.SOURCE, source)


def ask_source_path(context: PromptContext, parameters: ParameterSet) -> None:
    """Ask for a directory, then for a backup file inside it.

    The directory question repeats until it lists at least one file.
    """
    source = parameters.source
    if not source:
        raise UnresolvedParameterError([Parameter.SOURCE])

    root = context.storages.get_config(source, "root")
    filesystem = context.storages.get(source)

    while True:
        path = context.io.ask("From which path do you want to select?", default=root)
        context.io.line()
        files = backup_files(filesystem.list_contents(path))
        if files:
            break
        context.io.info(NO_BACKUPS_MESSAGE)

    context.io.info("Available database dumps:")
    context.io.table(BACKUP_TABLE_HEADERS, [backup_row(entry) for entry in files])

    names = [entry.basename for entry in files]
    filename = ""
    while not filename:
        filename = context.io.autocomplete(
            "Which database dump do you want to restore?", names
        ).strip()
    parameters.set(Parameter.SOURCE_PATH, join_path(path, filename))


def ask_database(context: PromptContext, parameters: ParameterSet) -> None:
    providers = context.databases.available_providers()
    context.io.info(f"Available database connections: {', '.join(providers)}")
    database = _select(
        context.io,
        "Into which database connection do you want to restore?",
        providers,
        kind="database",
    )
    parameters.set(Parameter.DATABASE, database)


def ask_compression(context: PromptContext, parameters: ParameterSet) -> None:
    types = [compression.value for compression in CompressionType]
    context.io.info(f"Available compression types: {', '.join(types)}")
    compression = _select(
        context.io,
        "Which compression type was used for this backup?",
        types,
        kind="compression",
    )
    parameters.set(Parameter.COMPRESSION, compression)


PROMPT_STRATEGIES: Final[dict[Parameter, PromptStrategy]] = {
    Parameter.SOURCE: ask_source,
    Parameter.SOURCE_PATH: ask_source_path,
    Parameter.DATABASE: ask_database,
    Parameter.COMPRESSION: ask_compression,
}


def backup_files(entries: Sequence[BackupFileEntry]) -> list[BackupFileEntry]:
    """Drop directories from a storage listing."""

    return [entry for entry in entries if not entry.is_dir]


def backup_row(entry: BackupFileEntry) -> list[str]:
    return [
        entry.basename,
        entry.extension,
        format_bytes(entry.size),
        format_timestamp(entry.timestamp),
    ]


def _select(io: OperatorIO, question: str, choices: Sequence[str], *, kind: str) -> str:
    """Repeat ``question`` until the answer names one of ``choices``."""

    if not choices:
        raise EmptyCatalogError(kind)

    while True:
        answer = io.autocomplete(question, choices).strip()
        if answer in choices:
            return answer
        io.error(f"'{answer}' is not available. Choose one of: {', '.join(choices)}")


__all__ = [
    "BACKUP_TABLE_HEADERS",
    "NO_BACKUPS_MESSAGE",
    "PROMPT_STRATEGIES",
    "PromptContext",
    "PromptStrategy",
    "ask_compression",
    "ask_database",
    "ask_source",
    "ask_source_path",
    "backup_files",
    "backup_row",
]
