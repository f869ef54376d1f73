"""Configuration-related exceptions."""

from __future__ import annotations

from sphere.exceptions.base import SphereError


class ConfigError(SphereError, ValueError):
    """Raised when Sphere configuration is invalid."""

    code = "config_error"
