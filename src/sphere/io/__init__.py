"""Shared file I/O helpers."""

from .files import bytes_sha256, file_sha256
from .json_io import write_bytes_atomic, write_json_atomic
from .locking import exclusive_lock

__all__ = [
    "bytes_sha256",
    "exclusive_lock",
    "file_sha256",
    "write_bytes_atomic",
    "write_json_atomic",
]
