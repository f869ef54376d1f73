"""Resolve a manifest's dependency map into loaded dependency manifests."""

from __future__ import annotations

import logging
from pathlib import Path

from sphere.cache import CacheIndexStore
from sphere.exceptions import CacheIOError, DependencyNotFoundError, ParseError
from sphere.hub import HubFetcher
from sphere.model import Dependency, Manifest
from sphere.parsers import load_manifest_file
from sphere.types import CacheIndex

logger = logging.getLogger(__name__)


class DependencyResolver:
    """Looks dependencies up in the local cache, falling back to the registry.

    Without a ``fetcher`` resolution is cache-only. Any failing dependency
    aborts the whole resolution.
    """

    def __init__(self, store: CacheIndexStore, fetcher: HubFetcher | None = None) -> None:
        self._store = store
        self._fetcher = fetcher

    def resolve(self, manifest: Manifest) -> list[Dependency]:
        """Return one ``Dependency`` per alias, in alias order."""
        pairs = manifest.sorted_dependencies()
        if not pairs:
            return []

        logger.info("Resolving %d dependencies...", len(pairs))
        index = self._store.load()
        logger.info("Loaded cache index (%d entries) from %s", len(index), self._store.index_path)

        resolved: list[Dependency] = []
        for alias, sphere_id in pairs:
            path = self._locate(index, sphere_id, alias)
            logger.info("Loading '%s' as '%s' from %s", sphere_id, alias, path)
            resolved.append(Dependency(alias=alias, manifest=_read_dependency(path, sphere_id, alias)))
        return resolved

    def _locate(self, index: CacheIndex, sphere_id: str, alias: str) -> Path:
        cached = self._store.lookup(index, sphere_id)
        if cached is not None:
            return cached

        if self._fetcher is None:
            raise DependencyNotFoundError(
                sphere_id,
                alias,
                detail="not in the local cache and registry access is disabled",
            )
        try:
            return self._fetcher.fetch(sphere_id, index)
        except DependencyNotFoundError as exc:
            raise exc.with_alias(alias) from exc


def _read_dependency(path: Path, sphere_id: str, alias: str) -> Manifest:
    try:
        return load_manifest_file(path)
    except OSError as exc:
        raise CacheIOError(path, str(exc), sphere_id=sphere_id, alias=alias) from exc
    except ParseError as exc:
        raise exc.for_dependency(sphere_id, alias)
