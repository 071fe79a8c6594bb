"""
Pasta <-> row mapping.

Pure functions, no I/O. Rows are addressed by column name; COLUMNS is the one
canonical ordering used by DDL-adjacent SQL (insert/update/select).

Attachment encoding: an absent file is stored as file_name='' and file_size=0.
On decode a file is only reconstructed when both the name is non-empty and the
size is nonzero; a half-filled pair comes back as no file.
"""
from __future__ import annotations

from typing import Any, Mapping

from ..errors import ConstraintError, DecodeError
from ..models import Pasta, PastaFile

COLUMNS: tuple[str, ...] = (
    "id",
    "content",
    "title",
    "file_name",
    "file_size",
    "extension",
    "read_only",
    "private",
    "editable",
    "encrypt_server",
    "encrypt_client",
    "encrypted_key",
    "created",
    "expiration",
    "last_read",
    "read_count",
    "burn_after_reads",
    "pasta_type",
)

# SQLite INTEGER is a signed 64-bit value
_INT_MIN = -(2 ** 63)
_INT_MAX = 2 ** 63 - 1

_INT_COLUMNS = (
    "id",
    "file_size",
    "created",
    "expiration",
    "last_read",
    "read_count",
    "burn_after_reads",
)


def _check_row(row: dict[str, Any]) -> dict[str, Any]:
    for col in _INT_COLUMNS:
        v = row[col]
        if not _INT_MIN <= v <= _INT_MAX:
            raise ConstraintError(f"column {col!r}: {v} does not fit in a 64-bit integer")
    if row["file_size"] < 0:
        raise ConstraintError(f"file_size must not be negative, got {row['file_size']}")
    return row


def encode_pasta(pasta: Pasta) -> dict[str, Any]:
    f = pasta.file
    return _check_row({
        "id": pasta.id,
        "content": pasta.content,
        "title": pasta.title,
        "file_name": f.name if f is not None else "",
        "file_size": int(f.size) if f is not None else 0,
        "extension": pasta.extension,
        "read_only": int(bool(pasta.readonly)),
        "private": int(bool(pasta.private)),
        "editable": int(bool(pasta.editable)),
        "encrypt_server": int(bool(pasta.encrypt_server)),
        "encrypt_client": int(bool(pasta.encrypt_client)),
        "encrypted_key": pasta.encrypted_key,
        "created": pasta.created,
        "expiration": pasta.expiration,
        "last_read": pasta.last_read,
        "read_count": pasta.read_count,
        "burn_after_reads": pasta.burn_after_reads,
        "pasta_type": pasta.pasta_type,
    })


def _get(row: Mapping[str, Any], col: str) -> Any:
    try:
        return row[col]
    except (KeyError, IndexError) as e:
        raise DecodeError(f"row has no column {col!r}") from e


def _required(row: Mapping[str, Any], col: str, typ: type) -> Any:
    v = _get(row, col)
    if v is None:
        raise DecodeError(f"column {col!r} is NULL")
    if not isinstance(v, typ):
        raise DecodeError(f"column {col!r}: expected {typ.__name__}, got {type(v).__name__}")
    return v


def _optional(row: Mapping[str, Any], col: str, typ: type) -> Any:
    v = _get(row, col)
    if v is not None and not isinstance(v, typ):
        raise DecodeError(f"column {col!r}: expected {typ.__name__}, got {type(v).__name__}")
    return v


def _decode_file(name: str | None, size: int | None) -> PastaFile | None:
    if size is not None and size < 0:
        raise DecodeError(f"column 'file_size' is negative: {size}")
    if name and size:
        return PastaFile(name=name, size=size)
    return None


def decode_row(row: Mapping[str, Any]) -> Pasta:
    return Pasta(
        id=_required(row, "id", int),
        content=_required(row, "content", str),
        title=_optional(row, "title", str),
        file=_decode_file(_optional(row, "file_name", str), _optional(row, "file_size", int)),
        extension=_required(row, "extension", str),
        readonly=_required(row, "read_only", int) != 0,
        private=_required(row, "private", int) != 0,
        editable=_required(row, "editable", int) != 0,
        encrypt_server=_required(row, "encrypt_server", int) != 0,
        encrypt_client=_required(row, "encrypt_client", int) != 0,
        encrypted_key=_optional(row, "encrypted_key", str),
        created=_required(row, "created", int),
        expiration=_required(row, "expiration", int),
        last_read=_required(row, "last_read", int),
        read_count=_required(row, "read_count", int),
        burn_after_reads=_required(row, "burn_after_reads", int),
        pasta_type=_required(row, "pasta_type", str),
    )
