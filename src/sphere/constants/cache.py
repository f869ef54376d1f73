"""Constants used by the cache index store and hashing."""

from __future__ import annotations

import re

SPHERE_DIRNAME: str = ".sphere"
CACHE_DIRNAME: str = "cache"
INDEX_FILENAME: str = "index.json"
INDEX_LOCK_SUFFIX: str = ".lock"
INDEX_TEMP_PREFIX: str = ".index-"
INDEX_TEMP_SUFFIX: str = ".tmp"
SPHERE_TEMP_PREFIX: str = ".sphere-"
SPHERE_TEMP_SUFFIX: str = ".part"
FILE_HASH_CHUNK_SIZE: int = 65536

SPHERE_FILE_SUFFIX: str = ".sphere"
UNSAFE_FILENAME_PATTERN: re.Pattern[str] = re.compile(r"[^A-Za-z0-9.\-]+")
FILENAME_STRIP_CHARS: str = "._-"
