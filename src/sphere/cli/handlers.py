"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import logging
import sys

from sphere.cache import CacheIndexStore
from sphere.cli.publish_flow import (
    build_hub_entry,
    collect_publish_details,
    render_publish_instructions,
    require_publish_id,
)
from sphere.config import SphereConfig
from sphere.hub import HTTPClient
from sphere.parsers import load_manifest_file
from sphere.reporting import ExecutionReporter, render_cache_entries
from sphere.runner.pipeline import run_manifest

logger = logging.getLogger(__name__)


def handle_run(args: argparse.Namespace, config: SphereConfig, *, http_client: HTTPClient | None = None) -> int:
    """Run a sphere file and relay its captured output."""
    result = run_manifest(args.file_path, config=config, http_client=http_client, offline=args.offline)

    reporter = ExecutionReporter(result, quiet=args.quiet)
    sys.stdout.write(reporter.render_stdout())
    sys.stdout.flush()
    sys.stderr.write(reporter.render_stderr())

    if not result.success:
        logger.warning("Entrypoint exited with status %d", result.status)
    return 0


def handle_cache(args: argparse.Namespace, config: SphereConfig) -> int:
    """Dispatch ``sphere cache list|add|remove``."""
    store = CacheIndexStore.from_config(config)

    if args.cache_command == "list":
        print(render_cache_entries(store.list()))
        return 0

    if args.cache_command == "add":
        entry = store.add(args.sphere_id, args.file_path, copy_to_cache=args.copy_to_cache)
        print(f"Added '{entry.sphere_id}' -> {entry.path}")
        return 0

    entry = store.remove(args.sphere_id)
    print(f"Removed '{entry.sphere_id}' from the cache index (file left at {entry.path})")
    return 0


def handle_publish(args: argparse.Namespace, config: SphereConfig) -> int:
    """Print registry submission instructions for a sphere file."""
    manifest = load_manifest_file(args.file_path)
    sphere_id = require_publish_id(manifest, args.file_path)

    try:
        details = collect_publish_details(
            read=input,
            write=print,
            description=args.description,
            author=args.author,
        )
    except (EOFError, KeyboardInterrupt):
        print("Publish cancelled.", file=sys.stderr)
        return 130

    entry = build_hub_entry(args.file_path, sphere_id, details)
    print(render_publish_instructions(entry, args.file_path, config.registry_url))
    return 0
