"""Configuration defaults, filenames and environment variables."""

from __future__ import annotations

CONFIG_FILENAME: str = "config.yaml"
ENV_SPHERE_HOME: str = "SPHERE_HOME"
ENV_REGISTRY_URL: str = "SPHERE_REGISTRY_URL"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "cache_dir",
        "registry_url",
        "http_timeout_seconds",
        "exec_timeout_seconds",
    }
)
