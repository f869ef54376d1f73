"""Shared exception hierarchy for Sphere."""

from __future__ import annotations

from .base import SphereError
from .cache import CacheEntryError, CacheIOError, IndexParseError
from .config import ConfigError
from .execution import ExecutionError
from .hub import IntegrityMismatchError, NetworkError, RegistryFormatError
from .parsing import MissingFieldError, ParseError
from .resolution import DependencyNotFoundError

__all__ = [
    "CacheEntryError",
    "CacheIOError",
    "ConfigError",
    "DependencyNotFoundError",
    "ExecutionError",
    "IndexParseError",
    "IntegrityMismatchError",
    "MissingFieldError",
    "NetworkError",
    "ParseError",
    "RegistryFormatError",
    "SphereError",
]
