"""
Summary: Human-readable rendering of sizes, timestamps and storage paths.
Why: Keep display helpers pure so prompts and reports format values identically.
"""

from __future__ import annotations

from datetime import datetime
from typing import Final

BYTE_UNITS: Final[tuple[str, ...]] = ("B", "KB", "MB", "GB", "TB")


def format_bytes(size: float, precision: int = 2) -> str:
    """Render ``size`` bytes with a base-1024 unit.

    Args:
        size: Number of bytes; negative values are treated as zero.
        precision: Maximum number of decimals kept after rounding.

    Returns:
        str: Value and unit, e.g. ``"1.5 KB"``. Trailing zeros are dropped.
    """
    scaled = float(max(size, 0))
    power = 0
    while scaled >= 1024 and power < len(BYTE_UNITS) - 1:
        scaled /= 1024
        power += 1

    value = round(scaled, precision)
    text = f"{value:.{max(precision, 0)}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {BYTE_UNITS[power]}"


def format_timestamp(timestamp: float) -> str:
    """Render a POSIX timestamp as ``Tue 3 2024  14:05:09`` in local time."""

    moment = datetime.fromtimestamp(timestamp)
    return f"{moment:%a} {moment.day} {moment:%Y  %H:%M:%S}"


def join_path(directory: str, filename: str) -> str:
    """Join a storage directory and a file name with a single ``/``."""

    if not directory:
        return filename
    return f"{directory.rstrip('/')}/{filename}"


def join_location(root: str, path: str) -> str:
    """Return the absolute storage location of ``path`` below ``root``.

    Paths already carrying the root are returned unchanged.
    """
    if not root:
        return path
    base = root.rstrip("/")
    if path == base or path.startswith(base + "/"):
        return path
    return f"{root}{path}"


__all__ = ["BYTE_UNITS", "format_bytes", "format_timestamp", "join_location", "join_path"]
