"""Shell-based decompression for stored backups."""

from __future__ import annotations

from shlex import quote
from typing import Final

from ...domain.models import CompressionType
from ...usecases.ports import Compressor


class NullCompressor:
    """Backups stored without compression."""

    suffix = ""

    def decompress_command(self, input_path: str) -> str | None:
        return None

    def decompressed_path(self, input_path: str) -> str:
        return input_path


class GzipCompressor:
    """Backups compressed with gzip; ``gunzip`` drops the ``.gz`` suffix in place."""

    suffix = ".gz"

    def decompress_command(self, input_path: str) -> str | None:
        return f"gunzip {quote(input_path)}"

    def decompressed_path(self, input_path: str) -> str:
        return input_path.removesuffix(".gz")


COMPRESSORS: Final[dict[CompressionType, Compressor]] = {
    CompressionType.NONE: NullCompressor(),
    CompressionType.GZIP: GzipCompressor(),
}


__all__ = ["COMPRESSORS", "GzipCompressor", "NullCompressor"]
