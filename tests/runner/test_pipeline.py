"""End-to-end pipeline scenarios: parse, resolve, sandbox, execute."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

import pytest
from fakes import FakeRegistry, WriteSphere

from sphere.cache import CacheIndexStore
from sphere.config import SphereConfig
from sphere.exceptions import DependencyNotFoundError
from sphere.model import Manifest
from sphere.parsers import load_manifest_file
from sphere.runner.pipeline import build_resolver, run_loaded_manifest, run_manifest
from sphere.sandbox import open_sandbox

pytestmark = pytest.mark.skipif(
    os.name != "posix" or shutil.which("sh") is None,
    reason="requires a POSIX sh",
)


def test_entrypoint_without_dependencies(
    write_sphere: WriteSphere,
    sphere_config: SphereConfig,
    registry: FakeRegistry,
    tmp_path: Path,
) -> None:
    manifest_path = write_sphere("hello.sphere", "echo hello")
    sandboxes = tmp_path / "sandboxes"
    sandboxes.mkdir()

    result = run_manifest(manifest_path, config=sphere_config, http_client=registry, sandbox_dir=sandboxes)

    assert result.stdout == b"hello\n"
    assert result.stderr == b""
    assert result.success
    assert registry.calls == []
    assert list(sandboxes.iterdir()) == []


def test_locally_cached_dependency_becomes_shim(
    write_sphere: WriteSphere,
    sphere_config: SphereConfig,
    store: CacheIndexStore,
    registry: FakeRegistry,
) -> None:
    dependency_path = write_sphere("foo.sphere", "echo world")
    store.add("com.example/foo", dependency_path)
    manifest_path = write_sphere("app.sphere", "foo", dependencies={"foo": "com.example/foo"})

    result = run_manifest(manifest_path, config=sphere_config, http_client=registry)

    assert result.stdout == b"world\n"
    assert result.success
    assert registry.calls == []


def test_unknown_dependency_fails_before_any_sandbox(
    write_sphere: WriteSphere,
    sphere_config: SphereConfig,
    registry: FakeRegistry,
    tmp_path: Path,
) -> None:
    manifest_path = write_sphere("app.sphere", "foo", dependencies={"foo": "com.example/ghost"})
    sandboxes = tmp_path / "sandboxes"
    sandboxes.mkdir()

    with pytest.raises(DependencyNotFoundError) as excinfo:
        run_manifest(manifest_path, config=sphere_config, http_client=registry, sandbox_dir=sandboxes)

    assert excinfo.value.sphere_id == "com.example/ghost"
    assert excinfo.value.alias == "foo"
    assert list(sandboxes.iterdir()) == []


def test_registry_dependency_runs_and_second_run_is_offline(
    write_sphere: WriteSphere,
    sphere_config: SphereConfig,
    registry: FakeRegistry,
) -> None:
    registry.publish("com.example/foo", b'entrypoint = "echo fetched"\n')
    manifest_path = write_sphere("app.sphere", "foo", dependencies={"foo": "com.example/foo"})

    first = run_manifest(manifest_path, config=sphere_config, http_client=registry)
    calls = list(registry.calls)
    second = run_manifest(manifest_path, config=sphere_config, http_client=registry)

    assert first.stdout == second.stdout == b"fetched\n"
    assert len(calls) == 2
    assert registry.calls == calls


def test_repeated_resolution_produces_identical_shims(
    write_sphere: WriteSphere,
    sphere_config: SphereConfig,
    store: CacheIndexStore,
    registry: FakeRegistry,
    tmp_path: Path,
) -> None:
    store.add("com.example/foo", write_sphere("foo.sphere", "echo world"), copy_to_cache=True)
    manifest = Manifest(entrypoint="foo", dependencies={"foo": "com.example/foo"})
    resolver = build_resolver(sphere_config, http_client=registry)

    shims = []
    for _ in range(2):
        with open_sandbox(resolver.resolve(manifest), base_dir=tmp_path) as sandbox:
            shims.append((sandbox.bin_dir / "foo").read_bytes())

    assert shims[0] == shims[1]
    assert registry.calls == []


def test_copy_to_cache_round_trip_preserves_entrypoint(
    write_sphere: WriteSphere,
    sphere_config: SphereConfig,
    store: CacheIndexStore,
    tmp_path: Path,
) -> None:
    original = write_sphere("tool.sphere", "printf '%s' tool-output")
    store.add("com.example/tool", original, copy_to_cache=True)
    original.unlink()
    resolver = build_resolver(sphere_config, offline=True)

    [dependency] = resolver.resolve(Manifest(entrypoint="tool", dependencies={"tool": "com.example/tool"}))
    with open_sandbox([dependency], base_dir=tmp_path) as sandbox:
        shim_text = (sandbox.bin_dir / "tool").read_text(encoding="utf-8")

    assert shim_text.splitlines()[1] == "printf '%s' tool-output"


def test_offline_run_uses_cache_only(
    write_sphere: WriteSphere,
    sphere_config: SphereConfig,
) -> None:
    manifest = load_manifest_file(write_sphere("app.sphere", "foo", dependencies={"foo": "x"}))

    with pytest.raises(DependencyNotFoundError, match="registry access is disabled"):
        run_loaded_manifest(manifest, config=sphere_config, offline=True)


def test_dependency_entrypoint_may_call_sibling_alias(
    write_sphere: WriteSphere,
    sphere_config: SphereConfig,
    store: CacheIndexStore,
) -> None:
    store.add("greeting", write_sphere("greeting.sphere", "echo hi"))
    store.add("shout", write_sphere("shout.sphere", "greeting | tr a-z A-Z"))
    manifest = Manifest(entrypoint="shout", dependencies={"greeting": "greeting", "shout": "shout"})

    result = run_loaded_manifest(manifest, config=sphere_config, offline=True)

    assert result.stdout == b"HI\n"
