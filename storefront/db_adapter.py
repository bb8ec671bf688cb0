"""
Database adapters for the SQL storage backend.

SQLite and PostgreSQL differ in connection setup, placeholder style and a few
DDL keywords. The adapters hide those differences so that queries can be
written once with ``?`` placeholders and SQLite-flavoured DDL.
"""
import logging
import re
import sqlite3
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


class DatabaseType(Enum):
    """Supported database engines."""
    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"


class BaseDatabaseAdapter(ABC):
    """Common interface for database engine adapters."""

    db_type: DatabaseType
    now_expression: str

    def __init__(self, target: str):
        self.target = target

    @abstractmethod
    def connect(self):
        """Open a new connection."""

    @abstractmethod
    def normalize_query(self, query: str) -> str:
        """Rewrite a query written for SQLite into this engine's dialect."""

    def execute(self, cursor, query: str, params: Optional[Tuple] = None):
        """Execute a normalized query on the given cursor."""
        query = self.normalize_query(query)
        if params is None:
            return cursor.execute(query)
        return cursor.execute(query, params)

    def close(self, conn) -> None:
        """Close a connection, ignoring connections that were never opened."""
        if conn is not None:
            conn.close()

    def dispose(self) -> None:
        """Release adapter-wide resources. Connections are per operation, so nothing is pooled."""
        logger.debug(f"Disposed {self.db_type.value} adapter")


class SQLiteAdapter(BaseDatabaseAdapter):
    """Adapter for SQLite files."""

    db_type = DatabaseType.SQLITE
    now_expression = "strftime('%Y-%m-%d %H:%M:%f', 'now')"

    def connect(self):
        conn = sqlite3.connect(self.target, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    def normalize_query(self, query: str) -> str:
        return query


class PostgreSQLAdapter(BaseDatabaseAdapter):
    """Adapter for PostgreSQL servers (psycopg2)."""

    db_type = DatabaseType.POSTGRESQL
    now_expression = "CURRENT_TIMESTAMP"

    _DDL_REWRITES = (
        (re.compile(r"INTEGER PRIMARY KEY AUTOINCREMENT", re.IGNORECASE), "SERIAL PRIMARY KEY"),
        (re.compile(r"\bREAL\b", re.IGNORECASE), "DOUBLE PRECISION"),
        (re.compile(r"\bTIMESTAMP\b", re.IGNORECASE), "TIMESTAMPTZ"),
    )

    def connect(self):
        import psycopg2
        from psycopg2.extras import RealDictCursor
        return psycopg2.connect(self.target, cursor_factory=RealDictCursor)

    def normalize_query(self, query: str) -> str:
        for pattern, replacement in self._DDL_REWRITES:
            query = pattern.sub(replacement, query)
        return query.replace("?", "%s")


def get_database_adapter(target: str, db_type: str = "sqlite") -> BaseDatabaseAdapter:
    """
    Create the adapter for a database type.

    Args:
        target: SQLite file path or PostgreSQL connection string
        db_type: 'sqlite' or 'postgresql'

    Returns:
        Adapter instance

    Raises:
        ValueError: If the database type is not supported
    """
    try:
        kind = DatabaseType(db_type.lower())
    except ValueError:
        raise ValueError(f"Unsupported database type: {db_type}")

    if kind is DatabaseType.POSTGRESQL:
        return PostgreSQLAdapter(target)
    return SQLiteAdapter(target)

