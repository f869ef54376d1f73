"""Command-line interface for Sphere."""
