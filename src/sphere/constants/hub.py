"""Remote registry (hub) protocol constants."""

from __future__ import annotations

DEFAULT_REGISTRY_URL: str = "https://hub.sphere.run"
REGISTRY_INDEX_PATH: str = "index.json"
REGISTRY_SPHERES_PATH: str = "spheres"
DEFAULT_HTTP_TIMEOUT_SECONDS: float = 30.0
ALLOWED_REGISTRY_SCHEMES: frozenset[str] = frozenset({"https"})

HUB_ENTRY_REQUIRED_FIELDS: tuple[str, ...] = ("filename", "description", "author", "hash_sha256")
