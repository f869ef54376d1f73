"""Shared type aliases for Sphere."""

from .cache import CacheIndex
from .common import ReadInput, WriteOutput
from .hub import HubEntryPayload, HubIndexPayload

__all__ = [
    "CacheIndex",
    "HubEntryPayload",
    "HubIndexPayload",
    "ReadInput",
    "WriteOutput",
]
