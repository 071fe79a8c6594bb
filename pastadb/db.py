from __future__ import annotations

# pastadb/db.py
import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from .config import load_config
from .errors import StorageConnectionError

logger = logging.getLogger(__name__)

DB_FILENAME = "database.sqlite"


def get_db_path(data_dir: str | None = None) -> str:
    dirn = data_dir or load_config().data_dir
    try:
        os.makedirs(dirn, exist_ok=True)
    except OSError as e:
        raise StorageConnectionError(f"cannot create data dir {dirn!r}: {e}") from e
    return os.path.join(dirn, DB_FILENAME)


@contextmanager
def get_conn(data_dir: str | None = None, db_path: str | None = None) -> Iterator[sqlite3.Connection]:
    """
    Open a SQLite connection scoped to the with-block.

    db_path wins over data_dir; otherwise the file is <data_dir>/database.sqlite.
    The connection runs in autocommit mode; use transaction() for multi-statement work.
    """
    path = db_path or get_db_path(data_dir)
    try:
        conn = sqlite3.connect(
            path,
            check_same_thread=False,
            isolation_level=None,
        )
    except sqlite3.Error as e:
        raise StorageConnectionError(f"cannot open database {path!r}: {e}") from e
    logger.debug("opened %s", path)
    try:
        conn.row_factory = sqlite3.Row
        yield conn
    finally:
        conn.close()


@contextmanager
def transaction(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    conn.execute("BEGIN")
    try:
        yield conn
    except BaseException:
        # sqlite may already have rolled back on its own (e.g. SQLITE_FULL)
        if conn.in_transaction:
            conn.execute("ROLLBACK")
        raise
    conn.execute("COMMIT")
