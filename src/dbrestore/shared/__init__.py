"""Shared helpers used by several layers."""

from .formatting import format_bytes, format_timestamp, join_location, join_path

__all__ = ["format_bytes", "format_timestamp", "join_location", "join_path"]
