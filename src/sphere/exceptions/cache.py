"""Cache index store exceptions."""

from __future__ import annotations

from pathlib import Path

from sphere.exceptions.base import SphereError, describe_dependency


class IndexParseError(SphereError, ValueError):
    """Raised when the cache index file exists but is not a valid JSON object."""

    code = "index_parse_error"

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(
            f"Failed to parse cache index at '{path}': {reason} "
            "(the index must contain a valid JSON object mapping sphere ids to file locations)"
        )


class CacheIOError(SphereError):
    """Raised when reading or writing cache files fails."""

    code = "cache_io_error"

    def __init__(self, path: Path, reason: str, *, sphere_id: str | None = None, alias: str | None = None) -> None:
        self.path = path
        self.reason = reason
        self.sphere_id = sphere_id
        self.alias = alias
        super().__init__(f"Cache I/O failure at '{path}'{describe_dependency(sphere_id, alias)}: {reason}")


class CacheEntryError(SphereError, ValueError):
    """Raised when a cache add/remove request is rejected."""

    code = "cache_entry_error"

    def __init__(self, sphere_id: str, reason: str) -> None:
        self.sphere_id = sphere_id
        self.reason = reason
        super().__init__(f"Cache entry '{sphere_id}': {reason}")
