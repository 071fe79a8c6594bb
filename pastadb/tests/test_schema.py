import logging
import sqlite3

import pytest

from pastadb.db import get_conn
from pastadb.errors import SchemaError
from pastadb.repository import schema
from pastadb.repository.codec import COLUMNS


def test_ensure_schema_creates_full_table(data_dir):
    with get_conn(data_dir) as conn:
        assert not schema.table_exists(conn)
        assert schema.ensure_schema(conn) == []
        assert schema.table_exists(conn)
        assert schema.list_columns(conn) == list(COLUMNS)


def test_ensure_schema_idempotent(data_dir):
    with get_conn(data_dir) as conn:
        for _ in range(3):
            schema.ensure_schema(conn)
        cols = schema.list_columns(conn)
    assert cols == list(COLUMNS)
    assert len(cols) == len(set(cols))


def test_ensure_column_present_without_table_is_noop(data_dir):
    with get_conn(data_dir) as conn:
        assert schema.ensure_column_present(conn, "title") is False
        assert not schema.table_exists(conn)


def test_ensure_column_present_adds_new_column(data_dir):
    with get_conn(data_dir) as conn:
        schema.ensure_table_exists(conn)
        assert schema.ensure_column_present(conn, "language_hint", "TEXT") is True
        assert schema.ensure_column_present(conn, "language_hint", "TEXT") is False
        cols = schema.list_columns(conn)
    assert cols[-1] == "language_hint"
    assert cols.count("language_hint") == 1


def test_legacy_store_gains_title_and_keeps_rows(legacy_store):
    with get_conn(db_path=legacy_store) as conn:
        assert "title" not in schema.list_columns(conn)
        assert schema.ensure_schema(conn) == ["title"]
        assert "title" in schema.list_columns(conn)
        row = conn.execute("SELECT id, content, title FROM pasta").fetchone()
        assert schema.ensure_schema(conn) == []
    assert row["id"] == 7
    assert row["content"] == "old paste"
    assert row["title"] is None


def test_alter_failure_is_schema_error(data_dir):
    with get_conn(data_dir) as conn:
        schema.ensure_table_exists(conn)
        # sqlite never allows ADD COLUMN with a UNIQUE constraint
        with pytest.raises(SchemaError):
            schema.ensure_column_present(conn, "bad", "TEXT UNIQUE")
        assert "bad" not in schema.list_columns(conn)


def test_alter_not_null_on_populated_table_is_schema_error(legacy_store):
    with get_conn(db_path=legacy_store) as conn:
        with pytest.raises(SchemaError):
            schema.ensure_column_present(conn, "bad", "TEXT NOT NULL")


def test_create_table_logs_once(data_dir, caplog):
    with caplog.at_level(logging.INFO, logger="pastadb.repository.schema"):
        with get_conn(data_dir) as conn:
            schema.ensure_table_exists(conn)
            schema.ensure_table_exists(conn)
    created = [r for r in caplog.records if "created pasta table" in r.getMessage()]
    assert len(created) == 1


def test_drop_table(data_dir):
    with get_conn(data_dir) as conn:
        schema.ensure_table_exists(conn)
        schema.drop_table(conn)
        assert not schema.table_exists(conn)
        schema.drop_table(conn)


def test_schema_error_chains_sqlite_error(data_dir):
    with get_conn(data_dir) as conn:
        conn.close()
        with pytest.raises(SchemaError) as ei:
            schema.table_exists(conn)
    assert isinstance(ei.value.__cause__, sqlite3.Error)
