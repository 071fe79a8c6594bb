"""
pasta 表结构管理
负责建表以及增量（只加列）迁移
"""
from __future__ import annotations

import logging
import sqlite3
from sqlite3 import Connection

from ..errors import SchemaError

logger = logging.getLogger(__name__)

TABLE = "pasta"

DDL = """
CREATE TABLE IF NOT EXISTS pasta (
    id INTEGER PRIMARY KEY,
    content TEXT NOT NULL,
    title TEXT,
    file_name TEXT,
    file_size INTEGER,
    extension TEXT NOT NULL,
    read_only INTEGER NOT NULL,
    private INTEGER NOT NULL,
    editable INTEGER NOT NULL,
    encrypt_server INTEGER NOT NULL,
    encrypt_client INTEGER NOT NULL,
    encrypted_key TEXT,
    created INTEGER NOT NULL,
    expiration INTEGER NOT NULL,
    last_read INTEGER NOT NULL,
    read_count INTEGER NOT NULL,
    burn_after_reads INTEGER NOT NULL,
    pasta_type TEXT NOT NULL
)
"""

# Columns added after the first release, in the order they were introduced.
# Each entry is (column, declaration); declarations must be nullable.
ADDITIVE_COLUMNS: list[tuple[str, str]] = [
    ("title", "TEXT"),
]


def table_exists(conn: Connection) -> bool:
    try:
        row = conn.execute(
            "SELECT EXISTS(SELECT 1 FROM sqlite_master WHERE type='table' AND name=?)",
            (TABLE,),
        ).fetchone()
    except sqlite3.Error as e:
        raise SchemaError(f"failed to check if {TABLE} table exists: {e}") from e
    return bool(row[0])


def list_columns(conn: Connection) -> list[str]:
    try:
        cursor = conn.execute(f"PRAGMA table_info({TABLE})")
        return [row[1] for row in cursor.fetchall()]
    except sqlite3.Error as e:
        raise SchemaError(f"failed to read {TABLE} schema: {e}") from e


def ensure_table_exists(conn: Connection) -> None:
    existed = table_exists(conn)
    try:
        conn.execute(DDL)
    except sqlite3.Error as e:
        raise SchemaError(f"failed to create {TABLE} table: {e}") from e
    if not existed:
        logger.info("created %s table", TABLE)


def ensure_column_present(conn: Connection, column: str, decl: str = "TEXT") -> bool:
    """
    Add `column` to an existing pasta table if it is missing.

    Returns True only when the table was altered. A missing table is left alone:
    the CREATE TABLE that follows already carries every column.
    """
    if not table_exists(conn):
        return False
    if column in list_columns(conn):
        return False
    try:
        conn.execute(f"ALTER TABLE {TABLE} ADD COLUMN {column} {decl}")
    except sqlite3.Error as e:
        raise SchemaError(f"failed to add {column} column: {e}") from e
    logger.info("added column %s.%s", TABLE, column)
    return True


def ensure_schema(conn: Connection) -> list[str]:
    """Apply additive migrations, then create the table if needed. Returns added columns."""
    added = [col for col, decl in ADDITIVE_COLUMNS if ensure_column_present(conn, col, decl)]
    ensure_table_exists(conn)
    return added


def drop_table(conn: Connection) -> None:
    try:
        conn.execute(f"DROP TABLE IF EXISTS {TABLE}")
    except sqlite3.Error as e:
        raise SchemaError(f"failed to drop {TABLE} table: {e}") from e
