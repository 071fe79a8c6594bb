"""
Paste persistence service.

Each public function opens its own connection, does one logical operation and
closes the connection before returning. Multi-statement operations run inside a
single transaction. sqlite3 failures surface as pastadb.errors types.
"""
from __future__ import annotations

import logging
import sqlite3
from typing import Iterable

from ..db import get_conn, transaction
from ..errors import translate_sqlite_error
from ..models import Pasta
from ..repository import codec, pasta_repo, schema

logger = logging.getLogger(__name__)


def read_all(data_dir: str | None = None) -> list[Pasta]:
    """Return every stored paste ordered by `created` ascending."""
    with get_conn(data_dir) as conn:
        try:
            with transaction(conn):
                schema.ensure_schema(conn)
                rows = pasta_repo.list_all(conn)
        except sqlite3.Error as e:
            raise translate_sqlite_error(e, "failed to select pastas") from e
        pastas = [codec.decode_row(r) for r in rows]
    logger.debug("loaded %d pastas", len(pastas))
    return pastas


def insert(pasta: Pasta, data_dir: str | None = None) -> None:
    """Insert a new paste. A duplicate id raises ConstraintError."""
    row = codec.encode_pasta(pasta)
    with get_conn(data_dir) as conn:
        try:
            with transaction(conn):
                schema.ensure_schema(conn)
                pasta_repo.insert_row(conn, row)
        except sqlite3.Error as e:
            raise translate_sqlite_error(e, f"failed to insert pasta {pasta.id}") from e
    logger.debug("inserted pasta %s", pasta.id)


def update(pasta: Pasta, data_dir: str | None = None) -> bool:
    """
    Replace every column of the row with the same id.

    The table is expected to exist already. An unknown id changes nothing and is
    not an error; the return value tells whether a row was replaced.
    """
    row = codec.encode_pasta(pasta)
    with get_conn(data_dir) as conn:
        try:
            n = pasta_repo.update_row(conn, row)
        except sqlite3.Error as e:
            raise translate_sqlite_error(e, f"failed to update pasta {pasta.id}") from e
    if n == 0:
        logger.warning("update: no pasta with id %s", pasta.id)
    return n > 0


def delete_by_id(pasta_id: int, data_dir: str | None = None) -> bool:
    """Delete one paste. Returns False when no row had that id."""
    with get_conn(data_dir) as conn:
        try:
            n = pasta_repo.delete_row(conn, pasta_id)
        except (sqlite3.Error, OverflowError) as e:
            raise translate_sqlite_error(e, f"failed to delete pasta {pasta_id}") from e
    if n == 0:
        logger.warning("delete: no pasta with id %s", pasta_id)
    return n > 0


def rewrite_all(pastas: Iterable[Pasta], data_dir: str | None = None) -> int:
    """
    Replace the whole table with `pastas`, inserted in the given order.

    Rows not in `pastas` are gone afterwards. If any insert fails the drop is
    rolled back too and the previous contents stay in place.
    """
    rows = [codec.encode_pasta(p) for p in pastas]
    with get_conn(data_dir) as conn:
        try:
            with transaction(conn):
                schema.drop_table(conn)
                schema.ensure_table_exists(conn)
                for row in rows:
                    pasta_repo.insert_row(conn, row)
        except sqlite3.Error as e:
            raise translate_sqlite_error(e, "failed to rewrite pastas") from e
    logger.info("rewrote pasta table with %d rows", len(rows))
    return len(rows)


def update_all(pastas: Iterable[Pasta], data_dir: str | None = None) -> int:
    """Save the full in-memory set back to disk; same as rewrite_all."""
    return rewrite_all(pastas, data_dir)
