"""Exceptions raised by the restoration feature."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Parameter


class RestoreError(Exception):
    """Base exception for restore failures."""


class ProviderNotFoundError(RestoreError):
    """Raised when a storage or database name is not configured."""

    def __init__(self, kind: str, name: str, available: Sequence[str]) -> None:
        self.kind = kind
        self.name = name
        self.available = list(available)
        choices = ", ".join(self.available) or "none configured"
        super().__init__(f"Unknown {kind} provider '{name}'. Available: {choices}")


class ProviderTypeNotSupportedError(RestoreError):
    """Raised when a configured provider uses an unknown type."""

    def __init__(self, kind: str, name: str, provider_type: str) -> None:
        self.kind = kind
        self.name = name
        self.provider_type = provider_type
        super().__init__(f"The {kind} provider '{name}' has unsupported type '{provider_type}'")


class UnresolvedParameterError(RestoreError):
    """Raised when resolution finishes with parameters still unset."""

    def __init__(self, parameters: Sequence[Parameter]) -> None:
        self.parameters = list(parameters)
        names = ", ".join(parameter.value for parameter in self.parameters)
        super().__init__(f"These arguments could not be resolved: {names}")


class ShellCommandError(RestoreError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: str, returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or "no error output"
        super().__init__(f"Command exited with status {returncode}: {detail}")


class EmptyCatalogError(RestoreError):
    """Raised when a selection is requested from a catalog with no entries."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"No {kind} providers are configured.")
