"""Configuration loading for Sphere."""

from __future__ import annotations

from sphere.config.loader import load_config
from sphere.config.model import SphereConfig, default_home_dir

__all__ = [
    "SphereConfig",
    "default_home_dir",
    "load_config",
]
