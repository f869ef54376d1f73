"""Tests for publish preparation helpers."""

from __future__ import annotations

import hashlib
from pathlib import Path

import pytest

from sphere.cli.publish_flow import (
    PublishDetails,
    build_hub_entry,
    collect_publish_details,
    prompt_required,
    render_publish_instructions,
    require_publish_id,
)
from sphere.exceptions import MissingFieldError, ParseError
from sphere.model import Manifest


def test_prompt_required_repeats_until_answered() -> None:
    answers = iter(["", "   ", "done"])
    written: list[str] = []

    result = prompt_required("Author", read=lambda _prompt: next(answers), write=written.append)

    assert result == "done"
    assert written == ["A value is required.", "A value is required."]


def test_collect_details_only_prompts_for_missing() -> None:
    prompts: list[str] = []

    def _read(prompt: str) -> str:
        prompts.append(prompt)
        return "  Ada  "

    details = collect_publish_details(read=_read, write=print, description="Given")

    assert details == PublishDetails(description="Given", author="Ada")
    assert prompts == ["Author: "]


def test_require_publish_id() -> None:
    source = Path("tool.sphere")

    assert require_publish_id(Manifest(entrypoint="x", id=" com.example/x "), source) == "com.example/x"
    with pytest.raises(MissingFieldError):
        require_publish_id(Manifest(entrypoint="x"), source)
    with pytest.raises(ParseError, match="must not be empty"):
        require_publish_id(Manifest(entrypoint="x", id="  "), source)


def test_build_hub_entry_and_instructions(tmp_path: Path) -> None:
    content = b'id = "com.example/tool"\nentrypoint = "echo tool"\n'
    path = tmp_path / "tool.sphere"
    path.write_bytes(content)

    entry = build_hub_entry(path, "com.example/tool", PublishDetails(description="A tool", author="Ada"))
    text = render_publish_instructions(entry, path, "https://hub.example.test")

    assert entry.filename == "com.example_tool.sphere"
    assert entry.hash_sha256 == hashlib.sha256(content).hexdigest()
    assert "spheres/com.example_tool.sphere" in text
    assert f'"hash_sha256": "{entry.hash_sha256}"' in text
