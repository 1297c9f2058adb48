"""Restore procedure: stage a backup locally, decompress it and load it."""

from __future__ import annotations

import shutil
import uuid
from collections.abc import Mapping
from logging import Logger, getLogger
from pathlib import Path

from ..domain.models import CompressionType
from .ports import Compressor, DatabaseCatalog, ShellProcessor, StorageCatalog


class RestoreProcedure:
    """Restore engine backed by configured storage services and databases.

    The backup is copied into ``working_dir`` first so that decompression and
    loading always run against a local file. Staged files are removed whether
    or not the restore succeeds.
    """

    _storages: StorageCatalog
    _databases: DatabaseCatalog
    _shell: ShellProcessor
    _compressors: Mapping[CompressionType, Compressor]
    _working_dir: Path
    _logger: Logger

    def __init__(
        self,
        *,
        storages: StorageCatalog,
        databases: DatabaseCatalog,
        shell: ShellProcessor,
        compressors: Mapping[CompressionType, Compressor],
        working_dir: Path,
        logger: Logger | None = None,
    ) -> None:
        self._storages = storages
        self._databases = databases
        self._shell = shell
        self._compressors = compressors
        self._working_dir = working_dir
        self._logger = logger or getLogger(__name__)

    def run(self, source: str, source_path: str, database: str, compression: str) -> None:
        """Restore ``source_path`` from ``source`` into ``database``."""

        compressor = self._compressors[CompressionType.from_user_input(compression)]
        storage = self._storages.get(source)
        target = self._databases.get(database)

        self._working_dir.mkdir(parents=True, exist_ok=True)
        working_file = self._working_dir / f"{uuid.uuid4().hex}{compressor.suffix}"
        loaded_file = Path(compressor.decompressed_path(str(working_file)))

        try:
            self._logger.debug("Copying %s:%s to %s", source, source_path, working_file)
            with storage.read_stream(source_path) as stream, open(working_file, "wb") as out:
                shutil.copyfileobj(stream, out)

            command = compressor.decompress_command(str(working_file))
            if command is not None:
                self._logger.debug("Decompressing %s", working_file)
                self._shell.process(command)

            self._logger.debug("Loading %s into %s", loaded_file, database)
            self._shell.process(target.restore_command(str(loaded_file)))
        finally:
            working_file.unlink(missing_ok=True)
            loaded_file.unlink(missing_ok=True)


__all__ = ["RestoreProcedure"]
