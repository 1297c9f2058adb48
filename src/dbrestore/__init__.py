"""dbrestore - interactively restore database backups from storage services."""

__version__ = "0.1.0"
