"""Run an entrypoint inside a sandbox with shims first on ``PATH``."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Mapping
from pathlib import Path

from sphere.constants.sandbox import PATH_ENV_VAR, SHELL_COMMAND_FLAG, SHELL_EXECUTABLE
from sphere.exceptions import ExecutionError
from sphere.model import ExecutionResult
from sphere.sandbox.builder import Sandbox

logger = logging.getLogger(__name__)


def build_sandbox_env(bin_dir: Path, base_env: Mapping[str, str] | None = None) -> dict[str, str]:
    """Copy the environment with ``bin_dir`` prepended to ``PATH``."""
    env = dict(os.environ if base_env is None else base_env)
    original_path = env.get(PATH_ENV_VAR, "")
    env[PATH_ENV_VAR] = f"{bin_dir}{os.pathsep}{original_path}" if original_path else str(bin_dir)
    return env


def execute_entrypoint(
    entrypoint: str,
    sandbox: Sandbox,
    *,
    base_env: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> ExecutionResult:
    """Run ``sh -c <entrypoint>`` in the sandbox root and capture its output."""
    env = build_sandbox_env(sandbox.bin_dir, base_env)
    logger.info("Executing entrypoint inside sandbox...")
    try:
        completed = subprocess.run(
            [SHELL_EXECUTABLE, SHELL_COMMAND_FLAG, entrypoint],
            cwd=sandbox.root,
            env=env,
            capture_output=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise ExecutionError(entrypoint, f"timed out after {exc.timeout:g}s") from exc
    except OSError as exc:
        raise ExecutionError(entrypoint, str(exc)) from exc

    logger.info("Execution finished with status %d", completed.returncode)
    return ExecutionResult(stdout=completed.stdout, stderr=completed.stderr, status=completed.returncode)
