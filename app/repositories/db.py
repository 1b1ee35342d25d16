"""DuckDB connection management for the persistent cache."""

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import CACHE_DB_PATH


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB tables initialized")


def connect(db_path: str = CACHE_DB_PATH) -> duckdb.DuckDBPyConnection:
    """Open a writable connection with tables in place."""
    conn = duckdb.connect(db_path)
    init_tables(conn)
    logger.debug("DB connected: {}", db_path)
    return conn
