#!/usr/bin/env python3
"""
Migration: add the nullable title column to stores created before titles existed
"""
from __future__ import annotations

import logging
import sqlite3

from ..db import get_conn, get_db_path, transaction
from ..errors import translate_sqlite_error
from ..repository.schema import ensure_column_present

logger = logging.getLogger(__name__)


def migrate_pasta_title(db_path: str) -> bool:
    """Add pasta.title if missing. Returns True when the column was added."""
    with get_conn(db_path=db_path) as conn:
        try:
            with transaction(conn):
                added = ensure_column_present(conn, "title", "TEXT")
        except sqlite3.Error as e:
            raise translate_sqlite_error(e, "title migration failed") from e
    if not added:
        logger.info("title column already present (or no pasta table) in %s", db_path)
    return added


if __name__ == "__main__":
    import sys

    logging.basicConfig(level=logging.INFO)
    db_path = sys.argv[1] if len(sys.argv) > 1 else get_db_path()

    print(f"Running pasta title migration on {db_path}")
    changed = migrate_pasta_title(db_path)
    print("Migration completed successfully" if changed else "Nothing to migrate")
