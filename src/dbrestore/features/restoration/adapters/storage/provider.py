"""Catalog of storage services declared in the configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import final

from dbrestore.config.config import StorageSettings

from ...domain.errors import ProviderNotFoundError, ProviderTypeNotSupportedError
from .local import LocalStorageFilesystem


@final
class StorageProvider:
    """Resolve named storage services to filesystem handles."""

    SUPPORTED_TYPES: frozenset[str] = frozenset({"local"})

    def __init__(self, settings: Mapping[str, StorageSettings]) -> None:
        self._settings = dict(settings)

    def available_providers(self) -> list[str]:
        return list(self._settings)

    def get_config(self, name: str, key: str) -> str:
        settings = self._lookup(name)
        value = getattr(settings, key, "")
        return "" if value is None else str(value)

    def get(self, name: str) -> LocalStorageFilesystem:
        settings = self._lookup(name)
        if settings.type not in self.SUPPORTED_TYPES:
            raise ProviderTypeNotSupportedError("storage", name, settings.type)
        return LocalStorageFilesystem(settings.root)

    def _lookup(self, name: str) -> StorageSettings:
        try:
            return self._settings[name]
        except KeyError:
            raise ProviderNotFoundError("storage", name, self.available_providers()) from None


__all__ = ["StorageProvider"]
