"""Interactive helpers that prepare a sphere file for registry submission."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from sphere.cache import sphere_filename_for_id
from sphere.constants.hub import REGISTRY_INDEX_PATH, REGISTRY_SPHERES_PATH
from sphere.constants.manifest import FIELD_ID
from sphere.exceptions import MissingFieldError, ParseError
from sphere.io import file_sha256
from sphere.model import HubEntry, Manifest
from sphere.types import HubEntryPayload, HubIndexPayload, ReadInput, WriteOutput


@dataclass(frozen=True)
class PublishDetails:
    """Free-text registry metadata supplied by the author."""

    description: str
    author: str


def prompt_required(question: str, *, read: ReadInput, write: WriteOutput) -> str:
    """Ask until a non-blank answer is given."""
    while True:
        answer = read(f"{question}: ").strip()
        if answer:
            return answer
        write("A value is required.")


def collect_publish_details(
    *,
    read: ReadInput,
    write: WriteOutput,
    description: str | None = None,
    author: str | None = None,
) -> PublishDetails:
    """Fill in whichever of description/author was not provided up front."""
    if description is None or not description.strip():
        description = prompt_required("Description", read=read, write=write)
    if author is None or not author.strip():
        author = prompt_required("Author", read=read, write=write)
    return PublishDetails(description=description.strip(), author=author.strip())


def require_publish_id(manifest: Manifest, source: Path) -> str:
    """Return the manifest id, which publishing requires to be non-blank."""
    if manifest.id is None:
        raise MissingFieldError(FIELD_ID, source=source)
    sphere_id = manifest.id.strip()
    if not sphere_id:
        raise ParseError(f"'{FIELD_ID}' must not be empty when publishing", source=source)
    return sphere_id


def build_hub_entry(manifest_path: Path, sphere_id: str, details: PublishDetails) -> HubEntry:
    """Describe ``manifest_path`` as the registry would index it."""
    return HubEntry(
        sphere_id=sphere_id,
        filename=sphere_filename_for_id(sphere_id),
        description=details.description,
        author=details.author,
        hash_sha256=file_sha256(manifest_path),
    )


def render_publish_instructions(entry: HubEntry, manifest_path: Path, registry_url: str) -> str:
    """Render the index snippet and the steps to submit the file."""
    index_entry: HubIndexPayload = {
        entry.sphere_id: HubEntryPayload(
            filename=entry.filename,
            description=entry.description,
            author=entry.author,
            hash_sha256=entry.hash_sha256,
        )
    }
    snippet = json.dumps(index_entry, indent=2, sort_keys=True)
    return "\n".join(
        (
            f"To publish '{entry.sphere_id}' to {registry_url}:",
            "",
            f"1. Copy {manifest_path} to {REGISTRY_SPHERES_PATH}/{entry.filename} in the registry.",
            f"2. Add this entry to {REGISTRY_INDEX_PATH}:",
            "",
            snippet,
            "",
            "3. Submit both changes for review. Clients reject the file if its sha256 changes.",
        )
    )
