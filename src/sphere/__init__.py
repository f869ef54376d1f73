"""Sphere: sandboxed runner for declarative command manifests."""

__version__ = "0.3.0"
