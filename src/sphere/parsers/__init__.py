"""Sphere file parsers."""

from .manifest import load_manifest_file, parse_manifest

__all__ = ["load_manifest_file", "parse_manifest"]
