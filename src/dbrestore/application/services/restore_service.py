"""Application service to restore a database backup."""

from __future__ import annotations

from logging import Logger, getLogger
from typing import final

from dbrestore.config.config import Config
from dbrestore.features.restoration import (
    ArgumentResolver,
    ParameterSet,
    RestoreProcedure,
    RestoreRequest,
    RestoreResult,
)
from dbrestore.features.restoration.adapters.compression import COMPRESSORS
from dbrestore.features.restoration.adapters.database import DatabaseProvider
from dbrestore.features.restoration.adapters.shell import SubprocessShellProcessor
from dbrestore.features.restoration.adapters.storage import StorageProvider
from dbrestore.features.restoration.usecases.ports import (
    DatabaseCatalog,
    OperatorIO,
    RestoreEngine,
    StorageCatalog,
)
from dbrestore.shared.formatting import join_location


@final
class RestoreDatabaseService:
    """Application façade wiring adapters into argument resolution and restore."""

    _storages: StorageCatalog
    _databases: DatabaseCatalog
    _engine: RestoreEngine
    _resolver: ArgumentResolver
    _logger: Logger

    def __init__(
        self,
        io: OperatorIO,
        *,
        config: Config | None = None,
        storages: StorageCatalog | None = None,
        databases: DatabaseCatalog | None = None,
        engine: RestoreEngine | None = None,
        logger: Logger | None = None,
    ) -> None:
        if storages is None or databases is None or engine is None:
            config = config or Config.load()

        self._logger = logger or getLogger(__name__)
        if storages is None:
            assert config is not None
            storages = StorageProvider(config.storage)
        if databases is None:
            assert config is not None
            databases = DatabaseProvider(config.databases)
        if engine is None:
            assert config is not None
            engine = RestoreProcedure(
                storages=storages,
                databases=databases,
                shell=SubprocessShellProcessor(logger=self._logger),
                compressors=COMPRESSORS,
                working_dir=config.resolved_working_dir,
                logger=self._logger,
            )

        self._storages = storages
        self._databases = databases
        self._engine = engine
        self._resolver = ArgumentResolver(
            storages=storages,
            databases=databases,
            io=io,
            logger=self._logger,
        )

    def resolve(self, parameters: ParameterSet) -> RestoreRequest:
        """Prompt for anything missing and freeze the confirmed parameters."""

        resolved = self._resolver.resolve(parameters)
        return RestoreRequest.from_parameters(resolved)

    def run(self, request: RestoreRequest) -> RestoreResult:
        """Hand ``request`` to the restore engine; failures propagate unchanged."""

        self._logger.debug(
            "Restoring %s from %s into %s (%s)",
            request.source_path,
            request.source,
            request.database,
            request.compression.value,
        )
        self._engine.run(
            request.source,
            request.source_path,
            request.database,
            request.compression.value,
        )
        root = self._storages.get_config(request.source, "root")
        return RestoreResult(request=request, location=join_location(root, request.source_path))


__all__ = ["RestoreDatabaseService"]
