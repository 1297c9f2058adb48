"""Tests for the staged restore procedure."""

from __future__ import annotations

from pathlib import Path

import pytest

from dbrestore.features.restoration import RestoreProcedure, ShellCommandError
from dbrestore.features.restoration.adapters.compression import COMPRESSORS
from fakes import FakeStorageCatalog, FakeStorageFilesystem


class RecordingShell:
    def __init__(self, fail_on: str | None = None) -> None:
        self.commands: list[str] = []
        self.fail_on = fail_on

    def process(self, command: str) -> None:
        self.commands.append(command)
        if self.fail_on and command.startswith(self.fail_on):
            raise ShellCommandError(command, 1, "boom")


class FakeDatabase:
    def __init__(self) -> None:
        self.loaded: list[str] = []

    def restore_command(self, input_path: str) -> str:
        self.loaded.append(input_path)
        return f"load {input_path}"


class FakeDatabases:
    def __init__(self) -> None:
        self.database = FakeDatabase()

    def available_providers(self) -> list[str]:
        return ["prod"]

    def get(self, name: str) -> FakeDatabase:
        return self.database


@pytest.fixture
def catalog() -> FakeStorageCatalog:
    filesystem = FakeStorageFilesystem(
        {},
        blobs={"/dumps/a.sql": b"CREATE TABLE t;", "/dumps/a.sql.gz": b"\x1f\x8bcompressed"},
    )
    return FakeStorageCatalog(roots={"s3": "/backups"}, filesystems={"s3": filesystem})


def _procedure(catalog: FakeStorageCatalog, shell: RecordingShell, databases: FakeDatabases, work: Path) -> RestoreProcedure:
    return RestoreProcedure(
        storages=catalog,
        databases=databases,
        shell=shell,
        compressors=COMPRESSORS,
        working_dir=work,
    )


def test_uncompressed_backup_is_loaded_directly(catalog: FakeStorageCatalog, tmp_path: Path) -> None:
    shell = RecordingShell()
    databases = FakeDatabases()
    work = tmp_path / "work"

    _procedure(catalog, shell, databases, work).run("s3", "/dumps/a.sql", "prod", "none")

    assert len(shell.commands) == 1
    loaded = databases.database.loaded[0]
    assert shell.commands == [f"load {loaded}"]
    assert Path(loaded).parent == work
    assert list(work.iterdir()) == []


def test_gzip_backup_is_decompressed_before_loading(catalog: FakeStorageCatalog, tmp_path: Path) -> None:
    shell = RecordingShell()
    databases = FakeDatabases()

    _procedure(catalog, shell, databases, tmp_path).run("s3", "/dumps/a.sql.gz", "prod", "gzip")

    decompress, load = shell.commands
    assert decompress.startswith("gunzip ")
    assert decompress.endswith(".gz")
    loaded = databases.database.loaded[0]
    assert not loaded.endswith(".gz")
    assert load == f"load {loaded}"


def test_staged_file_holds_backup_bytes(catalog: FakeStorageCatalog, tmp_path: Path) -> None:
    captured: list[bytes] = []

    class CapturingShell(RecordingShell):
        def process(self, command: str) -> None:
            super().process(command)
            captured.append(Path(command.removeprefix("load ")).read_bytes())

    _procedure(catalog, CapturingShell(), FakeDatabases(), tmp_path).run("s3", "/dumps/a.sql", "prod", "none")

    assert captured == [b"CREATE TABLE t;"]


def test_failures_propagate_and_clean_up(catalog: FakeStorageCatalog, tmp_path: Path) -> None:
    shell = RecordingShell(fail_on="load")

    with pytest.raises(ShellCommandError):
        _procedure(catalog, shell, FakeDatabases(), tmp_path).run("s3", "/dumps/a.sql", "prod", "none")

    assert list(tmp_path.iterdir()) == []
