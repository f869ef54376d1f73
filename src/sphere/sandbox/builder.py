"""Ephemeral sandbox directories populated with dependency shims."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from sphere.constants.sandbox import SANDBOX_BIN_DIRNAME, SANDBOX_DIR_PREFIX, SHIM_MODE, SHIM_SHEBANG
from sphere.model import Dependency

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sandbox:
    """A disposable working directory with a ``bin/`` of shims."""

    root: Path

    @property
    def bin_dir(self) -> Path:
        return self.root / SANDBOX_BIN_DIRNAME


def render_shim(entrypoint: str) -> str:
    """Return the shim script that runs ``entrypoint`` verbatim."""
    return f"{SHIM_SHEBANG}\n{entrypoint}\n"


def write_shim(bin_dir: Path, dependency: Dependency) -> Path:
    """Write an executable shim named after the dependency alias."""
    shim_path = bin_dir / dependency.alias
    shim_path.write_text(render_shim(dependency.manifest.entrypoint), encoding="utf-8")
    # Non-POSIX hosts have no mode bits; the shim is run through ``sh`` there.
    if os.name == "posix":
        shim_path.chmod(SHIM_MODE)
    logger.debug("Wrote shim %s -> %s", shim_path, dependency.manifest.entrypoint)
    return shim_path


@contextmanager
def open_sandbox(dependencies: Sequence[Dependency], *, base_dir: Path | None = None) -> Iterator[Sandbox]:
    """Create a fresh sandbox for the block and always delete it afterwards."""
    root = Path(tempfile.mkdtemp(prefix=SANDBOX_DIR_PREFIX, dir=base_dir))
    logger.info("Created sandbox at %s", root)
    try:
        sandbox = Sandbox(root=root)
        sandbox.bin_dir.mkdir()
        for dependency in dependencies:
            write_shim(sandbox.bin_dir, dependency)
        yield sandbox
    finally:
        shutil.rmtree(root, ignore_errors=True)
        if root.exists():
            logger.warning("Sandbox %s could not be fully removed", root)
        else:
            logger.debug("Removed sandbox %s", root)
