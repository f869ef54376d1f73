"""Manifest parsing exceptions."""

from __future__ import annotations

from pathlib import Path

from sphere.exceptions.base import SphereError, describe_dependency


class ParseError(SphereError, ValueError):
    """Raised when a sphere file is structurally invalid."""

    code = "parse_error"

    def __init__(
        self,
        reason: str,
        *,
        source: Path | str | None = None,
        sphere_id: str | None = None,
        alias: str | None = None,
    ) -> None:
        self.reason = reason
        self.source = source
        self.sphere_id = sphere_id
        self.alias = alias
        super().__init__(self._describe())

    def _describe(self) -> str:
        location = f" in {self.source}" if self.source is not None else ""
        return f"Invalid sphere file{location}{describe_dependency(self.sphere_id, self.alias)}: {self.reason}"

    def for_dependency(self, sphere_id: str, alias: str) -> ParseError:
        """Attribute this error to the dependency ``sphere_id`` loaded as ``alias``."""
        self.sphere_id = sphere_id
        self.alias = alias
        self.args = (self._describe(),)
        return self


class MissingFieldError(ParseError):
    """Raised when a required manifest field is absent."""

    code = "missing_field"

    def __init__(self, field: str, *, source: Path | str | None = None) -> None:
        self.field = field
        super().__init__(f"missing required field '{field}'", source=source)
