"""Config loading and normalization for Sphere."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml

from sphere.config.model import SphereConfig, default_home_dir
from sphere.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME, ENV_REGISTRY_URL, ENV_SPHERE_HOME
from sphere.constants.hub import ALLOWED_REGISTRY_SCHEMES, DEFAULT_HTTP_TIMEOUT_SECONDS, DEFAULT_REGISTRY_URL
from sphere.exceptions import ConfigError


def load_config(config_path: Path | None = None, env: Mapping[str, str] | None = None) -> SphereConfig:
    """Load config from ``<home>/.sphere/config.yaml`` or an explicit path.

    Environment overrides (``SPHERE_HOME``, ``SPHERE_REGISTRY_URL``) are read
    from ``env`` when given, otherwise from the process environment.
    """
    mapping = env if env is not None else os.environ
    home_dir = _resolve_home_dir(mapping)

    path = config_path.expanduser().resolve() if config_path else (home_dir / CONFIG_FILENAME)
    raw: dict[str, Any] = {}
    if path.exists():
        raw = _read_yaml_mapping(path)
    elif config_path is not None:
        raise ConfigError(f"Config file not found: {path}")

    unknown = sorted(set(raw) - ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Config file at {path} has unknown keys: {unknown}")

    cache_dir_raw = raw.get("cache_dir")
    cache_dir: Path | None = None
    if cache_dir_raw is not None:
        if not isinstance(cache_dir_raw, str) or not cache_dir_raw.strip():
            raise ConfigError("cache_dir must be a non-empty string")
        cache_dir = Path(cache_dir_raw).expanduser()
        if not cache_dir.is_absolute():
            cache_dir = home_dir / cache_dir

    registry_url = raw.get("registry_url", DEFAULT_REGISTRY_URL)
    env_registry = (mapping.get(ENV_REGISTRY_URL) or "").strip()
    if env_registry:
        registry_url = env_registry
    _validate_registry_url(registry_url)

    return SphereConfig(
        home_dir=home_dir,
        cache_dir=cache_dir,
        registry_url=registry_url.strip(),
        http_timeout_seconds=_positive_number(
            raw.get("http_timeout_seconds", DEFAULT_HTTP_TIMEOUT_SECONDS), "http_timeout_seconds"
        ),
        exec_timeout_seconds=_optional_positive_number(raw.get("exec_timeout_seconds"), "exec_timeout_seconds"),
    )


def _resolve_home_dir(mapping: Mapping[str, str]) -> Path:
    candidate = (mapping.get(ENV_SPHERE_HOME) or "").strip()
    if candidate:
        return Path(candidate).expanduser().resolve()
    return default_home_dir()


def _read_yaml_mapping(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")
    return raw


def _validate_registry_url(value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError("registry_url must be a non-empty string")
    parsed = urlparse(value.strip())
    if parsed.scheme not in ALLOWED_REGISTRY_SCHEMES or not parsed.netloc:
        raise ConfigError(f"registry_url must be an https:// URL, got {value!r}")


def _positive_number(value: Any, key_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"{key_name} must be a positive number")
    return float(value)


def _optional_positive_number(value: Any, key_name: str) -> float | None:
    if value is None:
        return None
    return _positive_number(value, key_name)
