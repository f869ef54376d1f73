"""Module-level constants grouped by concern."""
