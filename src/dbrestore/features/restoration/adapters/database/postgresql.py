"""PostgreSQL restore command builder."""

from __future__ import annotations

from shlex import quote

from dbrestore.config.config import DatabaseSettings


class PostgresqlDatabase:
    """Load dumps through ``psql``."""

    DEFAULT_PORT = 5432

    def __init__(self, settings: DatabaseSettings) -> None:
        self.settings = settings

    def restore_command(self, input_path: str) -> str:
        s = self.settings
        port = s.port or self.DEFAULT_PORT
        return (
            f"PGPASSWORD={quote(s.password)} psql --host={quote(s.host)} "
            f"--port={quote(str(port))} --username={quote(s.user)} "
            f"{quote(s.database)} -f {quote(input_path)}"
        )
