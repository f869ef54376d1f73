"""Pipeline orchestration package."""

from __future__ import annotations

from typing import Any

__all__ = ["run_loaded_manifest", "run_manifest"]


def __getattr__(name: str) -> Any:
    """Lazily expose runner APIs to avoid import cycles at package import time."""
    if name in __all__:
        from . import pipeline

        return getattr(pipeline, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
