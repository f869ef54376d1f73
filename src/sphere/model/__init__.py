"""Core data models for Sphere."""

from .entities import CacheEntry, Dependency, ExecutionResult, HubEntry, Manifest

__all__ = [
    "CacheEntry",
    "Dependency",
    "ExecutionResult",
    "HubEntry",
    "Manifest",
]
