"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger

from app.repositories.db import connect


class BaseRepository:
    """Base repository over a DuckDB connection."""

    def __init__(self, conn: duckdb.DuckDBPyConnection | None = None):
        self._db = conn if conn is not None else connect()
        logger.debug("{} initialized", self.__class__.__name__)

    def close(self) -> None:
        self._db.close()

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        if params:
            return self._db.execute(query, params)
        return self._db.execute(query)

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()
