"""Dependency resolution."""

from .resolver import DependencyResolver

__all__ = ["DependencyResolver"]
