"""End-to-end pipeline: parse, resolve, sandbox, execute.

``run_manifest`` is the single entry point used by ``sphere run``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from sphere.cache import CacheIndexStore
from sphere.config import SphereConfig
from sphere.hub import HTTPClient, HubFetcher, UrllibHTTPClient
from sphere.model import ExecutionResult, Manifest
from sphere.parsers import load_manifest_file
from sphere.resolver import DependencyResolver
from sphere.sandbox import execute_entrypoint, open_sandbox

logger = logging.getLogger(__name__)


def build_resolver(
    config: SphereConfig,
    *,
    http_client: HTTPClient | None = None,
    offline: bool = False,
) -> DependencyResolver:
    """Wire the cache store and, unless offline, the registry fetcher."""
    store = CacheIndexStore.from_config(config)
    if offline:
        return DependencyResolver(store)
    client = http_client if http_client is not None else UrllibHTTPClient(timeout=config.http_timeout_seconds)
    return DependencyResolver(store, HubFetcher(config.registry_url, client, store))


def run_manifest(
    manifest_path: Path,
    *,
    config: SphereConfig,
    http_client: HTTPClient | None = None,
    offline: bool = False,
    base_env: Mapping[str, str] | None = None,
    sandbox_dir: Path | None = None,
) -> ExecutionResult:
    """Load the sphere file at ``manifest_path`` and run it."""
    manifest = load_manifest_file(manifest_path)
    logger.info("Parsed entrypoint: '%s'", manifest.entrypoint)
    return run_loaded_manifest(
        manifest,
        config=config,
        http_client=http_client,
        offline=offline,
        base_env=base_env,
        sandbox_dir=sandbox_dir,
    )


def run_loaded_manifest(
    manifest: Manifest,
    *,
    config: SphereConfig,
    http_client: HTTPClient | None = None,
    offline: bool = False,
    base_env: Mapping[str, str] | None = None,
    sandbox_dir: Path | None = None,
) -> ExecutionResult:
    """Resolve every dependency first, then execute inside a fresh sandbox."""
    resolver = build_resolver(config, http_client=http_client, offline=offline)
    dependencies = resolver.resolve(manifest)

    with open_sandbox(dependencies, base_dir=sandbox_dir) as sandbox:
        return execute_entrypoint(
            manifest.entrypoint,
            sandbox,
            base_env=base_env,
            timeout=config.exec_timeout_seconds,
        )
