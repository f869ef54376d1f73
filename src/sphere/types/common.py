"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

ReadInput: TypeAlias = Callable[[str], str]
WriteOutput: TypeAlias = Callable[[str], None]
