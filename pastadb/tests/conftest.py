import sqlite3
import sys
from pathlib import Path

import pytest

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from pastadb.models import Pasta  # noqa: E402

LEGACY_DDL = """
CREATE TABLE pasta (
    id INTEGER PRIMARY KEY,
    content TEXT NOT NULL,
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


@pytest.fixture()
def data_dir(tmp_path, monkeypatch):
    # Point the store at a per-test temp dir; never touch a real one
    d = tmp_path / "data"
    monkeypatch.setenv("PASTADB_DATA_DIR", str(d))
    return str(d)


@pytest.fixture()
def db_file(data_dir):
    return str(Path(data_dir) / "database.sqlite")


@pytest.fixture()
def make_pasta():
    def _make(pid: int, **kw) -> Pasta:
        base = dict(
            id=pid,
            content=f"content {pid}",
            extension="txt",
            pasta_type="text",
            created=1_700_000_000 + pid,
            expiration=1_700_086_400 + pid,
            last_read=1_700_000_000 + pid,
        )
        base.update(kw)
        return Pasta(**base)
    return _make


@pytest.fixture()
def legacy_store(db_file):
    """A store written before the title column existed, holding one row."""
    Path(db_file).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_file)
    try:
        conn.execute(LEGACY_DDL)
        conn.execute(
            "INSERT INTO pasta(id, content, file_name, file_size, extension, read_only, private, "
            "editable, encrypt_server, encrypt_client, encrypted_key, created, expiration, "
            "last_read, read_count, burn_after_reads, pasta_type) "
            "VALUES(7, 'old paste', 'notes.md', 2048, 'md', 1, 0, 1, 0, 0, NULL, 100, 200, 150, 3, 0, 'text')"
        )
        conn.commit()
    finally:
        conn.close()
    return db_file


