"""Manifest (sphere file) field names and validation patterns."""

from __future__ import annotations

import re

FIELD_ID: str = "id"
FIELD_ENTRYPOINT: str = "entrypoint"
FIELD_DEPENDENCIES: str = "dependencies"

# Aliases become file names inside the sandbox bin directory.
ALIAS_PATTERN: re.Pattern[str] = re.compile(r"^[^/\\\x00]+$")
RESERVED_ALIASES: frozenset[str] = frozenset({".", ".."})
