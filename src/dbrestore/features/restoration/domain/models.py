"""Data structures that describe a database restore run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from .errors import UnresolvedParameterError


class Parameter(str, Enum):
    """Parameters required before a restore can run, in prompting order."""

    SOURCE = "source"
    SOURCE_PATH = "sourcePath"
    DATABASE = "database"
    COMPRESSION = "compression"


REQUIRED_PARAMETERS: Final[tuple[Parameter, ...]] = tuple(Parameter)

_ATTRIBUTES: Final[dict[Parameter, str]] = {
    Parameter.SOURCE: "source",
    Parameter.SOURCE_PATH: "source_path",
    Parameter.DATABASE: "database",
    Parameter.COMPRESSION: "compression",
}


class CompressionType(str, Enum):
    """Compression schemes a backup file can be stored with."""

    NONE = "none"
    GZIP = "gzip"

    @staticmethod
    def from_user_input(value: str) -> "CompressionType":
        """Translate raw CLI input into the matching compression type."""

        normalized = value.strip().lower()
        if normalized == "null":
            return CompressionType.NONE
        for compression in CompressionType:
            if compression.value == normalized:
                return compression
        valid: Final[str] = ", ".join(c.value for c in CompressionType)
        msg = f"Unsupported compression type '{value}'. Valid options: {valid}"
        raise ValueError(msg)


@dataclass(slots=True)
class ParameterSet:
    """Mutable bag of restore parameters shared by the resolution steps.

    Empty strings count as unset so that blank flags trigger prompting.
    """

    source: str | None = None
    source_path: str | None = None
    database: str | None = None
    compression: str | None = None

    def get(self, parameter: Parameter) -> str | None:
        value = getattr(self, _ATTRIBUTES[parameter])
        return value or None

    def set(self, parameter: Parameter, value: str | None) -> None:
        setattr(self, _ATTRIBUTES[parameter], value)

    def is_set(self, parameter: Parameter) -> bool:
        return self.get(parameter) is not None

    def missing(self) -> list[Parameter]:
        """Return unset parameters in prompting order."""

        return [parameter for parameter in REQUIRED_PARAMETERS if not self.is_set(parameter)]


@dataclass(slots=True, frozen=True)
class BackupFileEntry:
    """Describe one entry returned by a storage listing."""

    basename: str
    extension: str
    size: int
    timestamp: int
    type: str = "file"

    @property
    def is_dir(self) -> bool:
        return self.type == "dir"


@dataclass(slots=True, frozen=True)
class RestoreRequest:
    """Fully resolved inputs handed to the restore engine."""

    source: str
    source_path: str
    database: str
    compression: CompressionType

    @classmethod
    def from_parameters(cls, parameters: ParameterSet) -> "RestoreRequest":
        """Freeze a complete parameter set.

        Raises:
            UnresolvedParameterError: If any parameter is still unset.
        """
        missing = parameters.missing()
        if missing:
            raise UnresolvedParameterError(missing)

        assert parameters.source is not None
        assert parameters.source_path is not None
        assert parameters.database is not None
        assert parameters.compression is not None
        return cls(
            source=parameters.source,
            source_path=parameters.source_path,
            database=parameters.database,
            compression=CompressionType.from_user_input(parameters.compression),
        )


@dataclass(slots=True, frozen=True)
class RestoreResult:
    """Capture a successful restore for reporting."""

    request: RestoreRequest
    location: str
