"""Constants for rendering executed command output."""

from __future__ import annotations

STDOUT_HEADER: str = "--- Command STDOUT ---"
STDERR_HEADER: str = "--- Command STDERR ---"
SECTION_FOOTER: str = "----------------------"
OUTPUT_ENCODING: str = "utf-8"
