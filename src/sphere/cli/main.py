"""CLI entrypoint for Sphere."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from sphere import __version__
from sphere.cli.handlers import handle_cache, handle_publish, handle_run
from sphere.config import load_config
from sphere.constants.branding import CLI_DESCRIPTION
from sphere.exceptions import MissingFieldError, ParseError, SphereError
from sphere.hub import HTTPClient


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="sphere",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Execute a .sphere file inside a fresh sandbox")
    run.add_argument("file_path", type=Path, help="The .sphere file to execute")
    run.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress status messages (the command's own output is always shown)",
    )
    run.add_argument("--offline", action="store_true", help="Resolve dependencies from the local cache only")

    cache = subparsers.add_parser("cache", help="Manage the local sphere cache index")
    cache_commands = cache.add_subparsers(dest="cache_command", required=True)
    cache_commands.add_parser("list", help="List cached sphere ids")
    cache_add = cache_commands.add_parser("add", help="Register a local sphere file under an id")
    cache_add.add_argument("sphere_id", help="Sphere id to register")
    cache_add.add_argument("file_path", type=Path, help="Path to the sphere file")
    cache_add.add_argument(
        "--copy-to-cache",
        action="store_true",
        help="Copy the file into the cache directory instead of referencing it in place",
    )
    cache_remove = cache_commands.add_parser("remove", help="Remove a sphere id from the cache index")
    cache_remove.add_argument("sphere_id", help="Sphere id to remove")

    publish = subparsers.add_parser("publish", help="Print instructions for publishing a sphere file")
    publish.add_argument("file_path", type=Path, help="The .sphere file to publish")
    publish.add_argument("--description", default=None, help="Registry description (prompted if omitted)")
    publish.add_argument("--author", default=None, help="Registry author (prompted if omitted)")

    return parser


def _print_dependency_context(exc: ParseError) -> None:
    if exc.sphere_id is not None:
        print(f"Dependency: '{exc.sphere_id}' (alias '{exc.alias}')", file=sys.stderr)


def main(argv: list[str] | None = None, *, http_client: HTTPClient | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.INFO
    if getattr(args, "quiet", False):
        level = logging.WARNING
    elif args.verbose:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    file_path: Path | None = getattr(args, "file_path", None)
    try:
        config = load_config(args.config)
        if args.command == "run":
            return handle_run(args, config, http_client=http_client)
        if args.command == "cache":
            return handle_cache(args, config)
        return handle_publish(args, config)
    except MissingFieldError as exc:
        source = exc.source if exc.source is not None else file_path
        print(f"\nError: The file '{source}' is missing the required '{exc.field}' field.", file=sys.stderr)
        _print_dependency_context(exc)
    except ParseError as exc:
        source = exc.source if exc.source is not None else file_path
        print(f"\nError: Failed to parse Sphere file '{source}'.", file=sys.stderr)
        print(f"Reason: {exc.reason}", file=sys.stderr)
        _print_dependency_context(exc)
    except SphereError as exc:
        print(f"\nError: {exc}", file=sys.stderr)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130
    except Exception as exc:
        print(f"\nApplication error: {exc}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
