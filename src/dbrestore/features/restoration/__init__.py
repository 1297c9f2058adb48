"""Public surface for the restoration feature."""

from .domain.errors import (
    EmptyCatalogError,
    ProviderNotFoundError,
    ProviderTypeNotSupportedError,
    RestoreError,
    ShellCommandError,
    UnresolvedParameterError,
)
from .domain.models import (
    BackupFileEntry,
    CompressionType,
    Parameter,
    ParameterSet,
    RestoreRequest,
    RestoreResult,
)
from .usecases.resolve_arguments import ArgumentResolver
from .usecases.restore_procedure import RestoreProcedure

__all__ = [
    "ArgumentResolver",
    "BackupFileEntry",
    "CompressionType",
    "EmptyCatalogError",
    "Parameter",
    "ParameterSet",
    "ProviderNotFoundError",
    "ProviderTypeNotSupportedError",
    "RestoreError",
    "RestoreProcedure",
    "RestoreRequest",
    "RestoreResult",
    "ShellCommandError",
    "UnresolvedParameterError",
]
