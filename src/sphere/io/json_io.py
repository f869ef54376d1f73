"""Atomic JSON and byte writers."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path


def write_json_atomic(
    *,
    path: Path,
    payload: object,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist JSON atomically by writing to a temp file then renaming."""
    rendered = json.dumps(payload, indent=2, sort_keys=True) + "\n"
    write_bytes_atomic(
        path=path,
        content=rendered.encode("utf-8"),
        temp_prefix=temp_prefix,
        temp_suffix=temp_suffix,
    )


def write_bytes_atomic(
    *,
    path: Path,
    content: bytes,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist raw bytes atomically by writing to a temp file then renaming."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_name, path)
    except BaseException:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise
