"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from ledgerload.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV = "LEDGERLOAD_DB_PATH"


def resolve_database_path(database_path: Optional[str] = None) -> str:
    """Pick the SQLite file to use.

    An explicit path wins, then the LEDGERLOAD_DB_PATH environment variable,
    then ~/.ledgerload/ledgerload.db (the directory is created if needed).
    """
    if database_path:
        return database_path

    from_env = os.environ.get(DB_PATH_ENV)
    if from_env:
        return from_env

    db_dir = Path.home() / ".ledgerload"
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / "ledgerload.db")


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file, see resolve_database_path

    Returns:
        SQLAlchemyDatabase instance with foreign keys enforced
    """
    return SQLAlchemyDatabase(f"sqlite:///{resolve_database_path(database_path)}")
