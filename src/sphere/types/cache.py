"""Typed cache index structures."""

from __future__ import annotations

from typing import TypeAlias

# Sphere id -> absolute path, or a file name relative to the cache directory.
CacheIndex: TypeAlias = dict[str, str]
