"""Remote registry exceptions."""

from __future__ import annotations

from sphere.exceptions.base import SphereError


class NetworkError(SphereError):
    """Raised when a registry request fails or returns a non-2xx status."""

    code = "network_error"

    def __init__(self, url: str, reason: str, *, status: int | None = None) -> None:
        self.url = url
        self.reason = reason
        self.status = status
        status_text = f" (HTTP {status})" if status is not None else ""
        super().__init__(f"Request to '{url}' failed{status_text}: {reason}")


class RegistryFormatError(SphereError, ValueError):
    """Raised when registry content cannot be interpreted."""

    code = "registry_format_error"

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Unexpected registry content at '{url}': {reason}")


class IntegrityMismatchError(SphereError):
    """Raised when downloaded content does not match the advertised digest."""

    code = "integrity_mismatch"

    def __init__(self, sphere_id: str, *, expected: str, computed: str) -> None:
        self.sphere_id = sphere_id
        self.expected = expected
        self.computed = computed
        super().__init__(
            f"Integrity check failed for '{sphere_id}': expected sha256 {expected}, computed {computed}"
        )
