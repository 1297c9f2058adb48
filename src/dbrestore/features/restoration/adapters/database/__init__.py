"""Database adapters."""

from .mysql import MysqlDatabase
from .postgresql import PostgresqlDatabase
from .provider import DatabaseProvider

__all__ = ["DatabaseProvider", "MysqlDatabase", "PostgresqlDatabase"]
