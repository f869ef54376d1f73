"""Config data model for Sphere."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from sphere.constants.cache import CACHE_DIRNAME, INDEX_FILENAME, INDEX_LOCK_SUFFIX, SPHERE_DIRNAME
from sphere.constants.hub import DEFAULT_HTTP_TIMEOUT_SECONDS, DEFAULT_REGISTRY_URL


def default_home_dir() -> Path:
    """Return ``<home>/.sphere`` for the current user."""
    return Path.home() / SPHERE_DIRNAME


@dataclass(frozen=True)
class SphereConfig:
    """Resolved runtime configuration."""

    home_dir: Path = field(default_factory=default_home_dir)
    cache_dir: Path | None = None
    registry_url: str = DEFAULT_REGISTRY_URL
    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    exec_timeout_seconds: float | None = None

    def __post_init__(self) -> None:
        if self.cache_dir is None:
            object.__setattr__(self, "cache_dir", self.home_dir / CACHE_DIRNAME)
        object.__setattr__(self, "registry_url", self.registry_url.rstrip("/"))

    @property
    def resolved_cache_dir(self) -> Path:
        assert self.cache_dir is not None
        return self.cache_dir

    @property
    def index_path(self) -> Path:
        """Location of the JSON cache index."""
        return self.resolved_cache_dir / INDEX_FILENAME

    @property
    def index_lock_path(self) -> Path:
        return self.index_path.with_name(INDEX_FILENAME + INDEX_LOCK_SUFFIX)
