"""Storage adapters."""

from .local import LocalStorageFilesystem
from .provider import StorageProvider

__all__ = ["LocalStorageFilesystem", "StorageProvider"]
