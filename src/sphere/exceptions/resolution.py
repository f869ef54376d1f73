"""Dependency resolution exceptions."""

from __future__ import annotations

from sphere.exceptions.base import SphereError


class DependencyNotFoundError(SphereError, LookupError):
    """Raised when neither the local cache nor the registry can supply a dependency."""

    code = "dependency_not_found"

    def __init__(self, sphere_id: str, alias: str | None = None, *, detail: str = "") -> None:
        self.sphere_id = sphere_id
        self.alias = alias
        self.detail = detail
        aliased = f" (aliased as '{alias}')" if alias is not None else ""
        suffix = f": {detail}" if detail else ""
        super().__init__(
            f"Dependency ID '{sphere_id}'{aliased} not found in the local cache or the registry{suffix}"
        )

    def with_alias(self, alias: str) -> DependencyNotFoundError:
        """Return a copy of this error attributed to ``alias``."""
        return DependencyNotFoundError(self.sphere_id, alias, detail=self.detail)
