"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SPHERE"
CLI_DESCRIPTION: str = "\n".join(
    (
        ">_ SPHERE",
        "     // a next-generation, sandboxed command runner",
    )
)
