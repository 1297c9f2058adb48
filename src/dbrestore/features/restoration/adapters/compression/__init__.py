"""Compression adapters keyed by compression type."""

from .compressors import COMPRESSORS, GzipCompressor, NullCompressor

__all__ = ["COMPRESSORS", "GzipCompressor", "NullCompressor"]
