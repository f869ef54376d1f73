"""Sandbox layout and shim generation constants."""

from __future__ import annotations

SANDBOX_DIR_PREFIX: str = "sphere-"
SANDBOX_BIN_DIRNAME: str = "bin"
SHIM_SHEBANG: str = "#!/bin/sh"
SHIM_MODE: int = 0o755
SHELL_EXECUTABLE: str = "sh"
SHELL_COMMAND_FLAG: str = "-c"
PATH_ENV_VAR: str = "PATH"
