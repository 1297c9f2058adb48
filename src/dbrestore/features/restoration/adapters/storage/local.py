"""Filesystem adapter for backups kept on a local disk."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from ...domain.models import BackupFileEntry


class LocalStorageFilesystem:
    """Expose a local directory tree rooted at ``root``."""

    def __init__(self, root: str) -> None:
        self._configured_root = Path(root).expanduser()
        self.root = self._configured_root.resolve()

    def resolve(self, path: str) -> Path:
        """Map a storage path onto the local disk.

        Paths spelled from the configured root, or already inside the
        resolved root, stay where they point; anything else is treated as
        relative to the root.
        """
        candidate = Path(path).expanduser()
        for base in (self._configured_root, self.root):
            if candidate.is_absolute() == base.is_absolute() and candidate.is_relative_to(base):
                return self.root / candidate.relative_to(base)
        return self.root / path.lstrip("/")

    def list_contents(self, path: str) -> list[BackupFileEntry]:
        directory = self.resolve(path)
        try:
            children = sorted(directory.iterdir())
        except OSError:
            return []

        entries: list[BackupFileEntry] = []
        for child in children:
            try:
                stat = child.stat()
            except OSError:
                continue
            is_dir = child.is_dir()
            entries.append(
                BackupFileEntry(
                    basename=child.name,
                    extension="" if is_dir else child.suffix.lstrip("."),
                    size=0 if is_dir else stat.st_size,
                    timestamp=int(stat.st_mtime),
                    type="dir" if is_dir else "file",
                )
            )
        return entries

    def read_stream(self, path: str) -> BinaryIO:
        return open(self.resolve(path), "rb")


__all__ = ["LocalStorageFilesystem"]
