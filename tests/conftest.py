"""Shared pytest fixtures: an isolated sphere home and a fake registry."""

from __future__ import annotations

from pathlib import Path

import pytest
from fakes import REGISTRY_URL, FakeRegistry, WriteSphere

from sphere.cache import CacheIndexStore
from sphere.config import SphereConfig


@pytest.fixture()
def sphere_config(tmp_path: Path) -> SphereConfig:
    """Config rooted in a temporary home so tests never touch ``~/.sphere``."""
    return SphereConfig(home_dir=tmp_path / "home" / ".sphere", registry_url=REGISTRY_URL)


@pytest.fixture()
def store(sphere_config: SphereConfig) -> CacheIndexStore:
    return CacheIndexStore.from_config(sphere_config)


@pytest.fixture()
def registry() -> FakeRegistry:
    return FakeRegistry()


@pytest.fixture()
def write_sphere(tmp_path: Path) -> WriteSphere:
    """Return a factory that writes a TOML sphere file under ``tmp_path/src``."""

    def _write(
        name: str,
        entrypoint: str,
        *,
        dependencies: dict[str, str] | None = None,
        sphere_id: str | None = None,
    ) -> Path:
        lines = []
        if sphere_id is not None:
            lines.append(f'id = "{sphere_id}"')
        lines.append(f'entrypoint = "{entrypoint}"')
        if dependencies:
            lines.append("")
            lines.append("[dependencies]")
            lines.extend(f'{alias} = "{dep_id}"' for alias, dep_id in dependencies.items())
        path = tmp_path / "src" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
