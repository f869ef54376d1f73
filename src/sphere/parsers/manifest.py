"""Parser for TOML sphere files."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from sphere.constants.manifest import (
    ALIAS_PATTERN,
    FIELD_DEPENDENCIES,
    FIELD_ENTRYPOINT,
    FIELD_ID,
    RESERVED_ALIASES,
)
from sphere.exceptions import MissingFieldError, ParseError
from sphere.model import Manifest


def load_manifest_file(path: Path) -> Manifest:
    """Read and parse a sphere file from disk.

    Read failures propagate as ``OSError``; content problems raise ``ParseError``.
    """
    try:
        text = path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"file is not valid UTF-8 text ({exc.reason})", source=path) from exc
    return parse_manifest(text, source=path)


def parse_manifest(text: str, *, source: Path | str | None = None) -> Manifest:
    """Parse sphere file content into a ``Manifest``."""
    try:
        raw = tomllib.loads(text.lstrip("\ufeff"))
    except tomllib.TOMLDecodeError as exc:
        raise ParseError(str(exc), source=source) from exc

    if FIELD_ENTRYPOINT not in raw:
        raise MissingFieldError(FIELD_ENTRYPOINT, source=source)

    entrypoint = raw[FIELD_ENTRYPOINT]
    if not isinstance(entrypoint, str):
        raise ParseError(f"'{FIELD_ENTRYPOINT}' must be a string", source=source)
    if not entrypoint.strip():
        raise ParseError(f"'{FIELD_ENTRYPOINT}' must not be empty", source=source)

    sphere_id = raw.get(FIELD_ID)
    if sphere_id is not None and not isinstance(sphere_id, str):
        raise ParseError(f"'{FIELD_ID}' must be a string", source=source)

    return Manifest(
        entrypoint=entrypoint,
        id=sphere_id,
        dependencies=_parse_dependencies(raw.get(FIELD_DEPENDENCIES), source),
    )


def _parse_dependencies(value: Any, source: Path | str | None) -> dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ParseError(f"'{FIELD_DEPENDENCIES}' must be a table of alias = \"sphere-id\"", source=source)

    dependencies: dict[str, str] = {}
    for alias, sphere_id in value.items():
        if not ALIAS_PATTERN.match(alias) or alias in RESERVED_ALIASES:
            raise ParseError(f"dependency alias {alias!r} is not a valid command name", source=source)
        if not isinstance(sphere_id, str) or not sphere_id.strip():
            raise ParseError(f"dependency '{alias}' must map to a non-empty sphere id string", source=source)
        dependencies[alias] = sphere_id
    return dependencies
