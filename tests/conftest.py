"""Shared fixtures for restore workflow tests."""

from __future__ import annotations

import pytest

from dbrestore.config.config import Config
from fakes import (
    FakeDatabaseCatalog,
    FakeStorageCatalog,
    FakeStorageFilesystem,
    RecordingEngine,
    dir_entry,
    file_entry,
)


@pytest.fixture
def storage_filesystem() -> FakeStorageFilesystem:
    return FakeStorageFilesystem(
        {
            "/backups": [dir_entry("archive"), file_entry("backup.sql")],
            "/backups/nightly": [file_entry("a.sql.gz"), file_entry("b.sql.gz")],
        }
    )


@pytest.fixture
def storages(storage_filesystem: FakeStorageFilesystem) -> FakeStorageCatalog:
    return FakeStorageCatalog(
        roots={"s3": "/backups", "local": "/srv/dumps"},
        filesystems={"s3": storage_filesystem, "local": FakeStorageFilesystem({})},
    )


@pytest.fixture
def databases() -> FakeDatabaseCatalog:
    return FakeDatabaseCatalog(["prod", "staging"])


@pytest.fixture
def engine() -> RecordingEngine:
    return RecordingEngine()


@pytest.fixture
def reset_config_singleton() -> None:
    """Forget any cached configuration around a test."""

    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
