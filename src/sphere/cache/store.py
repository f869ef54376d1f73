"""Cache index store: the persisted sphere id -> file location map."""

from __future__ import annotations

import json
import logging
import shutil
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sphere.cache.naming import sphere_filename_for_id
from sphere.config import SphereConfig
from sphere.constants.cache import INDEX_TEMP_PREFIX, INDEX_TEMP_SUFFIX
from sphere.exceptions import CacheEntryError, CacheIOError, IndexParseError
from sphere.io import exclusive_lock, write_json_atomic
from sphere.model import CacheEntry
from sphere.types import CacheIndex

logger = logging.getLogger(__name__)


class CacheIndexStore:
    """Reads and writes the cache index and the cache directory behind it.

    Every read-modify-write runs under an advisory lock and persists through
    an atomic temp-file rename.
    """

    def __init__(self, cache_dir: Path, index_path: Path, lock_path: Path) -> None:
        self.cache_dir = cache_dir
        self.index_path = index_path
        self.lock_path = lock_path

    @classmethod
    def from_config(cls, config: SphereConfig) -> CacheIndexStore:
        return cls(config.resolved_cache_dir, config.index_path, config.index_lock_path)

    def load(self) -> CacheIndex:
        """Load the index; a missing or blank file is an empty index."""
        try:
            text = self.index_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise CacheIOError(self.index_path, str(exc)) from exc

        if not text.strip():
            return {}

        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise IndexParseError(self.index_path, str(exc)) from exc

        if not isinstance(payload, dict):
            raise IndexParseError(self.index_path, f"top-level value is a {type(payload).__name__}, not an object")
        for key, value in payload.items():
            if not isinstance(value, str) or not value:
                raise IndexParseError(self.index_path, f"location for '{key}' must be a non-empty string")
        return dict(payload)

    def save(self, index: CacheIndex) -> None:
        """Overwrite the index file with ``index`` as pretty JSON."""
        try:
            write_json_atomic(
                path=self.index_path,
                payload=index,
                temp_prefix=INDEX_TEMP_PREFIX,
                temp_suffix=INDEX_TEMP_SUFFIX,
            )
        except OSError as exc:
            raise CacheIOError(self.index_path, str(exc)) from exc

    @contextmanager
    def transaction(self) -> Iterator[CacheIndex]:
        """Yield a freshly loaded index under the lock and persist it afterwards."""
        with exclusive_lock(self.lock_path):
            index = self.load()
            yield index
            self.save(index)

    def resolve_location(self, location: str) -> Path:
        """Map a stored location to a path: absolute as-is, else under the cache dir."""
        candidate = Path(location)
        if candidate.is_absolute():
            return candidate
        return self.cache_dir / candidate

    def lookup(self, index: CacheIndex, sphere_id: str) -> Path | None:
        """Return the cached file path for ``sphere_id`` if indexed and present on disk."""
        location = index.get(sphere_id)
        if location is None:
            return None
        path = self.resolve_location(location)
        if not path.is_file():
            logger.warning("Cache index points '%s' at %s but the file is missing", sphere_id, path)
            return None
        return path

    def record(self, index: CacheIndex, sphere_id: str, location: str) -> None:
        """Persist ``sphere_id -> location`` and mirror it into ``index``.

        The on-disk index is re-read under the lock so entries written by
        other processes since ``index`` was loaded are kept.
        """
        with self.transaction() as current:
            current[sphere_id] = location
        index[sphere_id] = location

    def add(self, sphere_id: str, source_path: Path, *, copy_to_cache: bool = False) -> CacheEntry:
        """Register ``source_path`` under ``sphere_id``; never overwrites an entry."""
        if not sphere_id.strip():
            raise CacheEntryError(sphere_id, "sphere id must not be empty")

        with exclusive_lock(self.lock_path):
            index = self.load()
            if sphere_id in index:
                raise CacheEntryError(sphere_id, "already present in the cache index; remove it first")
            if not source_path.exists():
                raise CacheEntryError(sphere_id, f"source file does not exist: {source_path}")
            if not source_path.is_file():
                raise CacheEntryError(sphere_id, f"source path is not a regular file: {source_path}")

            if copy_to_cache:
                location = sphere_filename_for_id(sphere_id)
                destination = self.cache_dir / location
                if destination.exists():
                    raise CacheEntryError(sphere_id, f"a file named '{location}' already exists in {self.cache_dir}")
                try:
                    self.cache_dir.mkdir(parents=True, exist_ok=True)
                    shutil.copyfile(source_path, destination)
                except OSError as exc:
                    raise CacheIOError(destination, str(exc)) from exc
                logger.info("Copied %s to %s", source_path, destination)
            else:
                location = str(source_path.resolve())

            index[sphere_id] = location
            self.save(index)

        return CacheEntry(sphere_id=sphere_id, location=location, path=self.resolve_location(location))

    def remove(self, sphere_id: str) -> CacheEntry:
        """Drop the index pointer for ``sphere_id``; the file itself is left alone."""
        with exclusive_lock(self.lock_path):
            index = self.load()
            if sphere_id not in index:
                raise CacheEntryError(sphere_id, "not present in the cache index")
            location = index.pop(sphere_id)
            self.save(index)
        return CacheEntry(sphere_id=sphere_id, location=location, path=self.resolve_location(location))

    def list(self) -> list[CacheEntry]:
        """Return all entries sorted by sphere id."""
        index = self.load()
        return [
            CacheEntry(sphere_id=sphere_id, location=location, path=self.resolve_location(location))
            for sphere_id, location in sorted(index.items())
        ]
