"""Build the SQLite-backed ledger database from a path or the environment."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from fintrack.database.sqlalchemy_db import SQLAlchemyDatabase

logger = logging.getLogger(__name__)

DB_PATH_ENV = "FINTRACK_DB_PATH"
DEFAULT_DB_PATH = Path("~") / ".fintrack" / "fintrack.db"


def resolve_database_path(database_path: Union[str, Path, None] = None) -> Path:
    """Pick the ledger file and make sure its directory exists.

    The explicit path wins, then the FINTRACK_DB_PATH environment variable,
    then ~/.fintrack/fintrack.db. A leading ~ is expanded.
    """
    chosen = database_path or os.environ.get(DB_PATH_ENV) or DEFAULT_DB_PATH
    path = Path(chosen).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def create_sqlite_database(database_path: Union[str, Path, None] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance for the resolved ledger file.

    The database is not connected yet; call ``connect()`` on the result.
    """
    path = resolve_database_path(database_path)
    logger.debug("Using ledger database at %s", path)
    return SQLAlchemyDatabase(f"sqlite:///{path}")
