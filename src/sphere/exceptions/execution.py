"""Entrypoint execution exceptions."""

from __future__ import annotations

from sphere.exceptions.base import SphereError


class ExecutionError(SphereError):
    """Raised when the entrypoint cannot be launched or exceeds its timeout."""

    code = "execution_error"

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"Failed to execute '{command}': {reason}")
