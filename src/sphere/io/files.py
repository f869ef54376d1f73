"""File-level helpers for hashing."""

from __future__ import annotations

import hashlib
from pathlib import Path

from sphere.constants.cache import FILE_HASH_CHUNK_SIZE


def file_sha256(path: Path) -> str:
    """Return SHA-256 hex digest for a file."""
    digest = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(FILE_HASH_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def bytes_sha256(content: bytes) -> str:
    """Return lower-case SHA-256 hex digest for in-memory content."""
    return hashlib.sha256(content).hexdigest()
