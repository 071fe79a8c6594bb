from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PastaFile:
    """Attachment stored alongside a paste: file name and size in bytes."""
    name: str
    size: int


@dataclass
class Pasta:
    id: int
    content: str
    extension: str
    pasta_type: str
    title: str | None = None
    file: PastaFile | None = None
    readonly: bool = False
    private: bool = False
    editable: bool = False
    encrypt_server: bool = False
    encrypt_client: bool = False
    encrypted_key: str | None = None
    created: int = 0
    expiration: int = 0
    last_read: int = 0
    read_count: int = 0
    burn_after_reads: int = 0
