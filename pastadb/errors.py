"""Typed storage errors.

Callers decide whether to retry, abort or degrade; nothing here exits the process.
"""
from __future__ import annotations

import sqlite3


class StorageError(RuntimeError):
    """Base class for paste storage errors."""


class StorageConnectionError(StorageError):
    """Raised when the database file (or its directory) cannot be opened or created."""


class SchemaError(StorageError):
    """Raised when the pasta table cannot be created, inspected or altered."""


class ConstraintError(StorageError):
    """Raised on an integrity violation, e.g. a duplicate paste id."""


class DecodeError(StorageError):
    """Raised when a stored row cannot be mapped back to a Pasta."""


_SCHEMA_MARKERS = ("no such table", "no such column", "duplicate column", "has no column")


def translate_sqlite_error(exc: sqlite3.Error | OverflowError, action: str) -> StorageError:
    """Map a sqlite3 (or parameter overflow) exception to the matching StorageError subclass."""
    msg = f"{action}: {exc}"
    if isinstance(exc, (sqlite3.IntegrityError, OverflowError)):
        return ConstraintError(msg)
    if isinstance(exc, sqlite3.OperationalError):
        text = str(exc).lower()
        if any(m in text for m in _SCHEMA_MARKERS):
            return SchemaError(msg)
    return StorageError(msg)
