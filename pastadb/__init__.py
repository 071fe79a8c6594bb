"""SQLite storage for pastes."""
from __future__ import annotations

from .config import StorageConfig, load_config
from .errors import (
    ConstraintError,
    DecodeError,
    SchemaError,
    StorageConnectionError,
    StorageError,
)
from .models import Pasta, PastaFile
from .services.pasta_svc import delete_by_id, insert, read_all, rewrite_all, update, update_all

__all__ = [
    "Pasta",
    "PastaFile",
    "StorageConfig",
    "load_config",
    "StorageError",
    "StorageConnectionError",
    "SchemaError",
    "ConstraintError",
    "DecodeError",
    "read_all",
    "insert",
    "update",
    "delete_by_id",
    "rewrite_all",
    "update_all",
]
