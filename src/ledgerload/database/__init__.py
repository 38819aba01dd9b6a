"""Database layer for ledgerload application."""

from ledgerload.database.base import Database
from ledgerload.database.factories import create_sqlite_database, resolve_database_path

__all__ = ["Database", "create_sqlite_database", "resolve_database_path"]
