"""
Summary: Tests for the per-parameter prompt strategies.
Why: Each strategy pulls candidates from a catalog and writes one parameter back.
"""

from __future__ import annotations

import pytest

from dbrestore.features.restoration import EmptyCatalogError, ParameterSet, UnresolvedParameterError
from dbrestore.features.restoration.usecases.prompts import (
    NO_BACKUPS_MESSAGE,
    PROMPT_STRATEGIES,
    PromptContext,
    ask_compression,
    ask_database,
    ask_source,
    ask_source_path,
    backup_files,
)
from fakes import (
    FakeDatabaseCatalog,
    FakeStorageCatalog,
    FakeStorageFilesystem,
    ScriptedOperatorIO,
    dir_entry,
    file_entry,
)


def _context(
    storages: FakeStorageCatalog,
    databases: FakeDatabaseCatalog,
    io: ScriptedOperatorIO,
) -> PromptContext:
    return PromptContext(storages=storages, databases=databases, io=io)


def test_strategy_table_covers_every_parameter_in_order() -> None:
    assert [parameter.value for parameter in PROMPT_STRATEGIES] == [
        "source",
        "sourcePath",
        "database",
        "compression",
    ]


def test_ask_source_offers_storage_catalog(
    storages: FakeStorageCatalog, databases: FakeDatabaseCatalog
) -> None:
    io = ScriptedOperatorIO(answers=["local"])
    parameters = ParameterSet()

    ask_source(_context(storages, databases, io), parameters)

    assert parameters.source == "local"
    assert io.choices_seen == [["s3", "local"]]
    assert io.messages("info") == ["Available storage services: s3, local"]


def test_ask_source_repeats_until_answer_is_known(
    storages: FakeStorageCatalog, databases: FakeDatabaseCatalog
) -> None:
    io = ScriptedOperatorIO(answers=["ftp", "s3"])
    parameters = ParameterSet()

    ask_source(_context(storages, databases, io), parameters)

    assert parameters.source == "s3"
    assert len(io.messages("error")) == 1
    assert "'ftp' is not available" in io.messages("error")[0]


def test_ask_source_fails_when_nothing_is_configured(databases: FakeDatabaseCatalog) -> None:
    io = ScriptedOperatorIO()
    empty = FakeStorageCatalog(roots={}, filesystems={})

    with pytest.raises(EmptyCatalogError, match="No storage providers"):
        ask_source(_context(empty, databases, io), ParameterSet())


def test_ask_source_path_defaults_to_storage_root_and_hides_directories(
    storages: FakeStorageCatalog, databases: FakeDatabaseCatalog
) -> None:
    io = ScriptedOperatorIO(answers=["/backups", "backup.sql"])
    parameters = ParameterSet(source="s3")

    ask_source_path(_context(storages, databases, io), parameters)

    assert io.defaults_seen == ["/backups"]
    assert io.choices_seen == [["backup.sql"]]
    assert parameters.source_path == "/backups/backup.sql"
    assert io.messages("table") == ["Name|Extension|Size|Created"]
    rows = io.messages("row")
    assert len(rows) == 1
    assert rows[0].startswith("backup.sql|sql|2 KB|")
    assert not any("archive" in row for row in rows)


def test_ask_source_path_asks_again_when_no_backups_exist(
    storages: FakeStorageCatalog,
    databases: FakeDatabaseCatalog,
    storage_filesystem: FakeStorageFilesystem,
) -> None:
    storage_filesystem.listings["/backups/empty"] = [dir_entry("only-a-dir")]
    io = ScriptedOperatorIO(answers=["/backups/empty", "/backups/nightly", "b.sql.gz"])
    parameters = ParameterSet(source="s3")

    ask_source_path(_context(storages, databases, io), parameters)

    assert storage_filesystem.listed == ["/backups/empty", "/backups/nightly"]
    assert io.messages("info").count(NO_BACKUPS_MESSAGE) == 1
    assert parameters.source_path == "/backups/nightly/b.sql.gz"


def test_ask_source_path_leaves_value_unset_while_no_backups_are_found(
    storages: FakeStorageCatalog, databases: FakeDatabaseCatalog
) -> None:
    io = ScriptedOperatorIO(answers=["/missing"])
    parameters = ParameterSet(source="s3")

    with pytest.raises(AssertionError, match="more questions than scripted"):
        ask_source_path(_context(storages, databases, io), parameters)

    assert parameters.source_path is None
    assert NO_BACKUPS_MESSAGE in io.messages("info")


def test_ask_source_path_accepts_free_text_file_names(
    storages: FakeStorageCatalog, databases: FakeDatabaseCatalog
) -> None:
    io = ScriptedOperatorIO(answers=["/backups/nightly", "  ", "c.sql.gz"])
    parameters = ParameterSet(source="s3")

    ask_source_path(_context(storages, databases, io), parameters)

    assert parameters.source_path == "/backups/nightly/c.sql.gz"


def test_ask_source_path_requires_a_source(
    storages: FakeStorageCatalog, databases: FakeDatabaseCatalog
) -> None:
    with pytest.raises(UnresolvedParameterError):
        ask_source_path(_context(storages, databases, ScriptedOperatorIO()), ParameterSet())


def test_ask_database_offers_database_catalog(
    storages: FakeStorageCatalog, databases: FakeDatabaseCatalog
) -> None:
    io = ScriptedOperatorIO(answers=["staging"])
    parameters = ParameterSet()

    ask_database(_context(storages, databases, io), parameters)

    assert parameters.database == "staging"
    assert io.choices_seen == [["prod", "staging"]]


def test_ask_compression_uses_fixed_list(
    storages: FakeStorageCatalog, databases: FakeDatabaseCatalog
) -> None:
    io = ScriptedOperatorIO(answers=["gzip"])
    parameters = ParameterSet()

    ask_compression(_context(storages, databases, io), parameters)

    assert parameters.compression == "gzip"
    assert io.choices_seen == [["none", "gzip"]]


def test_backup_files_drops_directories() -> None:
    entries = [dir_entry("old"), file_entry("a.sql"), dir_entry("new"), file_entry("b.sql")]

    assert [entry.basename for entry in backup_files(entries)] == ["a.sql", "b.sql"]
