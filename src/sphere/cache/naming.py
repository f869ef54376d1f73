"""Filesystem-safe file names for cached sphere files."""

from __future__ import annotations

from sphere.constants.cache import FILENAME_STRIP_CHARS, SPHERE_FILE_SUFFIX, UNSAFE_FILENAME_PATTERN
from sphere.exceptions import CacheEntryError


def sphere_filename_for_id(sphere_id: str) -> str:
    """Derive the cache file name used when copying a sphere into the cache.

    ``com.example/foo`` becomes ``com.example_foo.sphere``. When nothing
    survives sanitization the stem falls back to the id's ASCII alphanumeric
    characters.
    """
    stem = UNSAFE_FILENAME_PATTERN.sub("_", sphere_id.strip()).strip(FILENAME_STRIP_CHARS)
    if not stem:
        stem = "".join(char for char in sphere_id if char.isascii() and char.isalnum())
    if not stem:
        raise CacheEntryError(sphere_id, "cannot derive a file name: id has no alphanumeric characters")
    if stem.endswith(SPHERE_FILE_SUFFIX):
        return stem
    return f"{stem}{SPHERE_FILE_SUFFIX}"


def is_plain_filename(name: str) -> bool:
    """Return True when ``name`` is a single path component."""
    if not name or name in {".", ".."}:
        return False
    return "/" not in name and "\\" not in name and "\x00" not in name
