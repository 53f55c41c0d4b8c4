"""Detection of library files and asset objects that nothing references."""

from __future__ import annotations

import json
import logging
import os
import stat
from collections.abc import Collection, Iterator
from pathlib import Path
from typing import Any

from .models import (
    UnusedAsset,
    UnusedAssetsSummary,
    UnusedLibrariesSummary,
    UnusedLibrary,
    instance_allowed,
)
from .prism import CleanupTarget

_log = logging.getLogger(__name__)


def _regular_files(top: Path) -> Iterator[tuple[Path, int]]:
    """Yield regular files below ``top`` with their sizes, not following links."""
    for dirpath, dirnames, filenames in os.walk(top):
        dirnames.sort()
        for name in sorted(filenames):
            full = os.path.join(dirpath, name)
            try:
                st = os.lstat(full)
            except OSError:
                continue
            if stat.S_ISREG(st.st_mode):
                yield Path(full), st.st_size


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError):
        return None


def extract_library_paths(value: Any) -> set[str]:
    """Collect every library path referenced anywhere in a JSON document."""
    found: set[str] = set()
    stack = [value]
    while stack:
        node = stack.pop()
        if isinstance(node, dict):
            downloads = node.get("downloads")
            artifact = downloads.get("artifact") if isinstance(downloads, dict) else None
            artifact_path = artifact.get("path") if isinstance(artifact, dict) else None
            if isinstance(artifact_path, str):
                found.add(artifact_path.replace("\\", "/"))
            path = node.get("path")
            if isinstance(path, str) and path.endswith(".jar") and "/" in path:
                found.add(path.replace("\\", "/"))
            stack.extend(node.values())
        elif isinstance(node, list):
            stack.extend(node)
    return found


def extract_asset_hashes(value: Any) -> set[str]:
    """Collect the object hashes listed in an asset index document."""
    objects = value.get("objects") if isinstance(value, dict) else None
    if not isinstance(objects, dict):
        return set()
    return {
        obj["hash"]
        for obj in objects.values()
        if isinstance(obj, dict) and isinstance(obj.get("hash"), str)
    }


def extract_instance_name(path: Path | str) -> str | None:
    """Return the instance directory name a path lies in, if any."""
    parts = str(path).split("/instances/")
    if len(parts) < 2:
        return None
    return parts[1].split("/")[0]


def scan_unused_libraries(
    root: Path | str, selected_instances: Collection[str] | None = None
) -> UnusedLibrariesSummary:
    """List library files that no metadata or instance JSON refers to."""
    root = Path(root)
    libraries_root = root / "libraries"
    referenced: set[str] = set()

    for scan_root in (root / "meta", root / "instances"):
        if not scan_root.exists():
            continue
        for path, _ in _regular_files(scan_root):
            if path.suffix != ".json":
                continue
            if selected_instances is not None:
                instance = extract_instance_name(path)
                if instance is not None and not instance_allowed(instance, selected_instances):
                    continue
            document = _load_json(path)
            if document is not None:
                referenced |= extract_library_paths(document)

    if not referenced:
        _log.warning("no library references were discovered; skipping unused-library candidates")
        return UnusedLibrariesSummary(root=root, candidates=[], total_bytes=0, referenced_files=0)

    candidates: list[UnusedLibrary] = []
    if libraries_root.exists():
        for path, size in _regular_files(libraries_root):
            relative = path.relative_to(libraries_root).as_posix()
            if relative not in referenced:
                candidates.append(UnusedLibrary(relative_path=relative, path=path, bytes=size))

    candidates.sort(key=lambda entry: entry.bytes, reverse=True)
    return UnusedLibrariesSummary(
        root=root,
        candidates=candidates,
        total_bytes=sum(entry.bytes for entry in candidates),
        referenced_files=len(referenced),
    )


def scan_unused_assets(root: Path | str) -> UnusedAssetsSummary:
    """List asset objects whose hash appears in no asset index."""
    root = Path(root)
    indexes_dir = root / "assets" / "indexes"
    objects_dir = root / "assets" / "objects"
    used: set[str] = set()

    if indexes_dir.exists():
        for path, _ in _regular_files(indexes_dir):
            if path.suffix != ".json":
                continue
            document = _load_json(path)
            if document is not None:
                used |= extract_asset_hashes(document)

    if not used:
        _log.warning("no asset hashes were discovered; skipping unused-asset candidates")
        return UnusedAssetsSummary(root=root, candidates=[], total_bytes=0, referenced_hashes=0)

    candidates: list[UnusedAsset] = []
    if objects_dir.exists():
        for path, size in _regular_files(objects_dir):
            if path.name not in used:
                candidates.append(UnusedAsset(hash=path.name, path=path, bytes=size))

    candidates.sort(key=lambda entry: entry.bytes, reverse=True)
    return UnusedAssetsSummary(
        root=root,
        candidates=candidates,
        total_bytes=sum(entry.bytes for entry in candidates),
        referenced_hashes=len(used),
    )


def cleanup_targets_from_unused_libraries(
    summary: UnusedLibrariesSummary, max_candidates: int
) -> list[CleanupTarget]:
    """Turn the largest unused libraries into advanced cleanup targets."""
    return [
        CleanupTarget(
            kind="advanced",
            label=f"unused-library/{entry.relative_path}",
            path=entry.path,
        )
        for entry in summary.candidates[:max_candidates]
    ]


def cleanup_targets_from_unused_assets(
    summary: UnusedAssetsSummary, max_candidates: int
) -> list[CleanupTarget]:
    """Turn the largest unused assets into advanced cleanup targets."""
    return [
        CleanupTarget(kind="advanced", label=f"unused-asset/{entry.hash}", path=entry.path)
        for entry in summary.candidates[:max_candidates]
    ]