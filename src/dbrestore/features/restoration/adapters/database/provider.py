"""Catalog of database connections declared in the configuration."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Final, final

from dbrestore.config.config import DatabaseSettings

from ...domain.errors import ProviderNotFoundError, ProviderTypeNotSupportedError
from ...usecases.ports import Database
from .mysql import MysqlDatabase
from .postgresql import PostgresqlDatabase

DATABASE_TYPES: Final[dict[str, Callable[[DatabaseSettings], Database]]] = {
    "mysql": MysqlDatabase,
    "postgresql": PostgresqlDatabase,
}


@final
class DatabaseProvider:
    """Resolve named connections to database restore adapters."""

    def __init__(self, settings: Mapping[str, DatabaseSettings]) -> None:
        self._settings = dict(settings)

    def available_providers(self) -> list[str]:
        return list(self._settings)

    def get(self, name: str) -> Database:
        try:
            settings = self._settings[name]
        except KeyError:
            raise ProviderNotFoundError("database", name, self.available_providers()) from None

        factory = DATABASE_TYPES.get(settings.type)
        if factory is None:
            raise ProviderTypeNotSupportedError("database", name, settings.type)
        return factory(settings)


__all__ = ["DATABASE_TYPES", "DatabaseProvider"]
