"""Write generated artifacts to disk as C# sources plus a JSON manifest."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from operations_gen.models import GeneratedArtifact

SOURCE_SUFFIX = ".cs"
MANIFEST_NAME = "manifest.json"


def write_artifacts(artifacts: Iterable[GeneratedArtifact], output_root: Path) -> Path:
    """Write each artifact to ``output_root`` and return the manifest path.

    Files are named ``<key>.cs`` (e.g. ``IOperationAction.T2.g.cs``). The
    manifest lists every written file in emission order.

    Args:
        artifacts: Artifacts to write, typically from ``generate_all``.
        output_root: Directory that receives the sources. Created when missing.

    Returns:
        Path of the written ``manifest.json``.

    Raises:
        ValueError: If two artifacts share a key.
    """
    output_root.mkdir(parents=True, exist_ok=True)

    entries: list[dict[str, Any]] = []
    seen: set[str] = set()
    for artifact in artifacts:
        if artifact.key in seen:
            raise ValueError(f"Duplicate artifact key: {artifact.key}")
        seen.add(artifact.key)

        target = output_root / source_file_name(artifact)
        target.write_text(artifact.text, encoding="utf-8")
        entries.append(_manifest_entry(artifact, target.name))

    manifest_path = output_root / MANIFEST_NAME
    manifest_path.write_text(
        json.dumps({"count": len(entries), "artifacts": entries}, indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return manifest_path


def source_file_name(artifact: GeneratedArtifact) -> str:
    return artifact.key + SOURCE_SUFFIX


def _manifest_entry(artifact: GeneratedArtifact, file_name: str) -> dict[str, Any]:
    """Describe one written artifact without repeating its text."""
    return {
        "key": artifact.key,
        "file": file_name,
        "order": artifact.order,
        "shape": artifact.shape.model_dump(mode="json"),
        "sha1": hashlib.sha1(artifact.text.encode("utf-8")).hexdigest(),
    }
