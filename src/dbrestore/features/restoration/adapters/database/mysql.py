"""MySQL restore command builder."""

from __future__ import annotations

from shlex import quote

from dbrestore.config.config import DatabaseSettings


class MysqlDatabase:
    """Load dumps through the ``mysql`` client."""

    DEFAULT_PORT = 3306

    def __init__(self, settings: DatabaseSettings) -> None:
        self.settings = settings

    def restore_command(self, input_path: str) -> str:
        s = self.settings
        port = s.port or self.DEFAULT_PORT
        return (
            f"mysql --host={quote(s.host)} --port={quote(str(port))} "
            f"--user={quote(s.user)} --password={quote(s.password)} "
            f"{quote(s.database)} -e {quote(f'source {input_path}')}"
        )
