"""Core data models for manifests, resolution and execution."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType


def _freeze(mapping: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class Manifest:
    """Parsed sphere file: an entrypoint plus a flat alias -> sphere id map."""

    entrypoint: str
    id: str | None = None
    dependencies: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "dependencies", _freeze(self.dependencies))

    def sorted_dependencies(self) -> list[tuple[str, str]]:
        """Return ``(alias, sphere_id)`` pairs in deterministic alias order."""
        return sorted(self.dependencies.items())


@dataclass(frozen=True)
class Dependency:
    """A dependency alias bound to its resolved manifest."""

    alias: str
    manifest: Manifest


@dataclass(frozen=True)
class HubEntry:
    """Registry record describing a published sphere file."""

    sphere_id: str
    filename: str
    description: str
    author: str
    hash_sha256: str


@dataclass(frozen=True)
class CacheEntry:
    """A cache index entry resolved against the cache directory."""

    sphere_id: str
    location: str
    path: Path

    @property
    def exists(self) -> bool:
        return self.path.is_file()


@dataclass(frozen=True)
class ExecutionResult:
    """Captured output and exit status of a sandboxed entrypoint."""

    stdout: bytes
    stderr: bytes
    status: int

    @property
    def success(self) -> bool:
        return self.status == 0
