"""Render captured command output and cache listings for the terminal."""

from __future__ import annotations

from collections.abc import Sequence

from sphere.constants.reporting import OUTPUT_ENCODING, SECTION_FOOTER, STDERR_HEADER, STDOUT_HEADER
from sphere.model import CacheEntry, ExecutionResult


def _decode(raw: bytes) -> str:
    return raw.decode(OUTPUT_ENCODING, errors="replace")


def _frame(text: str, header: str, *, leading_blank: bool = False) -> str:
    parts = ["\n" if leading_blank else "", header, "\n", text]
    if not text.endswith("\n"):
        parts.append("\n")
    parts.extend((SECTION_FOOTER, "\n"))
    return "".join(parts)


class ExecutionReporter:
    """Formats an ``ExecutionResult`` for stdout/stderr.

    Captured output is always emitted; ``quiet`` only drops the framing.
    """

    def __init__(self, result: ExecutionResult, *, quiet: bool = False) -> None:
        self._result = result
        self._quiet = quiet

    def render_stdout(self) -> str:
        if not self._result.stdout:
            return ""
        text = _decode(self._result.stdout)
        return text if self._quiet else _frame(text, STDOUT_HEADER)

    def render_stderr(self) -> str:
        if not self._result.stderr:
            return ""
        text = _decode(self._result.stderr)
        return text if self._quiet else _frame(text, STDERR_HEADER, leading_blank=True)


def render_cache_entries(entries: Sequence[CacheEntry]) -> str:
    """One ``id -> location`` line per entry, flagging files missing on disk."""
    if not entries:
        return "Cache index is empty."
    lines = []
    for entry in entries:
        marker = "" if entry.exists else "  [missing]"
        lines.append(f"{entry.sphere_id} -> {entry.location}{marker}")
    return "\n".join(lines)
