"""Typed registry payload structures."""

from __future__ import annotations

from typing import TypeAlias, TypedDict


class HubEntryPayload(TypedDict):
    """Raw registry record for a single sphere id."""

    filename: str
    description: str
    author: str
    hash_sha256: str


HubIndexPayload: TypeAlias = dict[str, HubEntryPayload]
