"""Sandbox construction and sandboxed execution."""

from .builder import Sandbox, open_sandbox, render_shim, write_shim
from .executor import build_sandbox_env, execute_entrypoint

__all__ = [
    "Sandbox",
    "build_sandbox_env",
    "execute_entrypoint",
    "open_sandbox",
    "render_shim",
    "write_shim",
]
