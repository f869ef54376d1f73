"""Fetch sphere files from the remote registry and admit them into the cache.

This is the only place network content becomes trusted: the downloaded bytes
must hash to the registry's advertised SHA-256 before anything is written to
the cache directory or the index.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from sphere.cache import CacheIndexStore, is_plain_filename
from sphere.constants.cache import SPHERE_TEMP_PREFIX, SPHERE_TEMP_SUFFIX
from sphere.constants.hub import HUB_ENTRY_REQUIRED_FIELDS, REGISTRY_INDEX_PATH, REGISTRY_SPHERES_PATH
from sphere.exceptions import (
    CacheIOError,
    DependencyNotFoundError,
    IntegrityMismatchError,
    NetworkError,
    RegistryFormatError,
)
from sphere.hub.client import HTTPClient
from sphere.io import bytes_sha256, write_bytes_atomic
from sphere.model import HubEntry
from sphere.types import CacheIndex, HubEntryPayload, HubIndexPayload

logger = logging.getLogger(__name__)


class HubFetcher:
    """Downloads and verifies sphere files from ``registry_url``."""

    def __init__(self, registry_url: str, http_client: HTTPClient, store: CacheIndexStore) -> None:
        self.registry_url = registry_url.rstrip("/")
        self._http = http_client
        self._store = store
        self._index: dict[str, HubEntry] | None = None

    @property
    def index_url(self) -> str:
        return f"{self.registry_url}/{REGISTRY_INDEX_PATH}"

    def sphere_url(self, filename: str) -> str:
        return f"{self.registry_url}/{REGISTRY_SPHERES_PATH}/{filename}"

    def fetch_index(self) -> dict[str, HubEntry]:
        """Download and parse the registry's master index.

        The parsed index is kept for the lifetime of the fetcher, so one
        resolution pass makes at most one index request.
        """
        if self._index is None:
            url = self.index_url
            response = self._http.get(url)
            if not response.ok:
                raise NetworkError(url, "registry index request was not successful", status=response.status)
            self._index = parse_hub_index(response.body, url=url)
        return self._index

    def fetch(self, sphere_id: str, index: CacheIndex) -> Path:
        """Fetch ``sphere_id`` into the cache, record it in ``index``, return its path."""
        logger.info("Fetching '%s' from registry %s", sphere_id, self.registry_url)
        entries = self.fetch_index()
        entry = entries.get(sphere_id)
        if entry is None:
            raise DependencyNotFoundError(sphere_id, detail=f"no entry in registry index {self.index_url}")

        url = self.sphere_url(entry.filename)
        response = self._http.get(url)
        if not response.ok:
            raise NetworkError(url, "sphere file download was not successful", status=response.status)

        computed = bytes_sha256(response.body)
        if computed != entry.hash_sha256:
            raise IntegrityMismatchError(sphere_id, expected=entry.hash_sha256, computed=computed)
        logger.info("Verified sha256 for '%s' (%s)", sphere_id, computed)

        destination = self._store.cache_dir / entry.filename
        try:
            write_bytes_atomic(
                path=destination,
                content=response.body,
                temp_prefix=SPHERE_TEMP_PREFIX,
                temp_suffix=SPHERE_TEMP_SUFFIX,
            )
        except OSError as exc:
            raise CacheIOError(destination, str(exc)) from exc

        self._store.record(index, sphere_id, entry.filename)
        logger.debug("Cached '%s' at %s", sphere_id, destination)
        return destination


def parse_hub_index(body: bytes, *, url: str) -> dict[str, HubEntry]:
    """Parse the registry master index into ``HubEntry`` records."""
    try:
        payload = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise RegistryFormatError(url, f"index is not valid JSON ({exc})") from exc

    if not isinstance(payload, dict):
        raise RegistryFormatError(url, "index must be a JSON object keyed by sphere id")

    return {
        sphere_id: HubEntry(sphere_id=sphere_id, **entry) for sphere_id, entry in _validate_index(payload, url).items()
    }


def _validate_index(payload: dict[str, object], url: str) -> HubIndexPayload:
    validated: HubIndexPayload = {}
    for sphere_id, raw in payload.items():
        if not isinstance(raw, dict):
            raise RegistryFormatError(url, f"entry '{sphere_id}' must be an object")
        missing = [name for name in HUB_ENTRY_REQUIRED_FIELDS if not isinstance(raw.get(name), str)]
        if missing:
            raise RegistryFormatError(url, f"entry '{sphere_id}' is missing string field(s): {', '.join(missing)}")
        if not is_plain_filename(raw["filename"]):
            raise RegistryFormatError(url, f"entry '{sphere_id}' has an unsafe filename {raw['filename']!r}")
        validated[sphere_id] = HubEntryPayload(
            filename=raw["filename"],
            description=raw["description"],
            author=raw["author"],
            hash_sha256=raw["hash_sha256"],
        )
    return validated
