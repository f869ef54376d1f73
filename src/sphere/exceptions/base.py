"""Root of the Sphere exception hierarchy."""

from __future__ import annotations

from typing import ClassVar


class SphereError(Exception):
    """Base class for every error raised by Sphere.

    ``code`` is a stable discriminant so presentation code can branch on the
    error category without inspecting message text.
    """

    code: ClassVar[str] = "sphere_error"


def describe_dependency(sphere_id: str | None, alias: str | None) -> str:
    """Render `` (dependency 'id' aliased as 'alias')``, or ``""`` outside a resolution."""
    if sphere_id is None:
        return ""
    aliased = f" aliased as '{alias}'" if alias is not None else ""
    return f" (dependency '{sphere_id}'{aliased})"
