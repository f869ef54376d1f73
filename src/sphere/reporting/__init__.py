"""Terminal output helpers."""

from .stdout import ExecutionReporter, render_cache_entries

__all__ = ["ExecutionReporter", "render_cache_entries"]
