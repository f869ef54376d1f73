"""Validate persisted and served JSON documents against the published schemas."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import pytest
from fakes import FakeRegistry

from sphere.cache import CacheIndexStore
from sphere.cli.publish_flow import PublishDetails, build_hub_entry, render_publish_instructions
from sphere.hub import parse_hub_index

SCHEMAS_DIR: Path = Path(__file__).resolve().parents[1] / "schemas"


def _load_schema(name: str) -> dict[str, Any]:
    return json.loads((SCHEMAS_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture()
def cache_index_schema() -> dict[str, Any]:
    return _load_schema("cache-index.schema.json")


@pytest.fixture()
def hub_index_schema() -> dict[str, Any]:
    return _load_schema("hub-index.schema.json")


def test_persisted_cache_index_matches_schema(
    store: CacheIndexStore,
    tmp_path: Path,
    cache_index_schema: dict[str, Any],
) -> None:
    source = tmp_path / "tool.sphere"
    source.write_text('entrypoint = "echo tool"\n', encoding="utf-8")
    store.add("com.example/copied", source, copy_to_cache=True)
    store.add("com.example/linked", source)

    payload = json.loads(store.index_path.read_text(encoding="utf-8"))

    jsonschema.validate(payload, cache_index_schema)


def test_cache_index_schema_rejects_non_string_locations(cache_index_schema: dict[str, Any]) -> None:
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate({"a": 1}, cache_index_schema)


def test_fake_registry_index_matches_schema(registry: FakeRegistry, hub_index_schema: dict[str, Any]) -> None:
    registry.publish("com.example/foo", b'entrypoint = "echo foo"\n')
    registry.publish("com.example/bar", b'entrypoint = "echo bar"\n')

    payload = json.loads(registry.get(f"{registry.base_url}/index.json").body)

    jsonschema.validate(payload, hub_index_schema)


def test_hub_index_schema_rejects_unsafe_filename(hub_index_schema: dict[str, Any]) -> None:
    entry = {"filename": "../x", "description": "", "author": "", "hash_sha256": "0" * 64}

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate({"x": entry}, hub_index_schema)


def test_publish_snippet_matches_hub_index_schema(tmp_path: Path, hub_index_schema: dict[str, Any]) -> None:
    path = tmp_path / "tool.sphere"
    path.write_text('id = "com.example/tool"\nentrypoint = "echo tool"\n', encoding="utf-8")
    entry = build_hub_entry(path, "com.example/tool", PublishDetails(description="A tool", author="Ada"))

    text = render_publish_instructions(entry, path, "https://hub.example.test")
    payload = json.loads(text[text.index("{") : text.rindex("}") + 1])

    jsonschema.validate(payload, hub_index_schema)
    assert parse_hub_index(json.dumps(payload).encode("utf-8"), url="https://hub.example.test/index.json") == {
        "com.example/tool": entry
    }
