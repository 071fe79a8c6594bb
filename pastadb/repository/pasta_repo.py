from __future__ import annotations

from sqlite3 import Connection
from typing import Any

from .codec import COLUMNS

_COLS = ", ".join(COLUMNS)
_NAMED = ", ".join(f":{c}" for c in COLUMNS)
_ASSIGN = ", ".join(f"{c}=:{c}" for c in COLUMNS if c != "id")

INSERT_SQL = f"INSERT INTO pasta({_COLS}) VALUES({_NAMED})"
UPDATE_SQL = f"UPDATE pasta SET {_ASSIGN} WHERE id=:id"
SELECT_ALL_SQL = f"SELECT {_COLS} FROM pasta ORDER BY created ASC"


def insert_row(conn: Connection, row: dict[str, Any]) -> None:
    conn.execute(INSERT_SQL, row)


def update_row(conn: Connection, row: dict[str, Any]) -> int:
    cur = conn.execute(UPDATE_SQL, row)
    return cur.rowcount


def delete_row(conn: Connection, pasta_id: int) -> int:
    cur = conn.execute("DELETE FROM pasta WHERE id=?", (pasta_id,))
    return cur.rowcount


def list_all(conn: Connection):
    return conn.execute(SELECT_ALL_SQL).fetchall()
