"""Disk-usage scanners for cleanup targets, mods, worlds and instances."""

from __future__ import annotations

import hashlib
import os
import stat
from collections.abc import Collection, Iterable, Iterator
from pathlib import Path

from .models import (
    CleanupStat,
    CleanupSummary,
    DuplicateModEntry,
    DuplicateModsSummary,
    InstanceUsage,
    UsageSummary,
    WorldBreakdownItem,
    WorldStat,
    WorldsSummary,
    instance_allowed,
)
from .prism import CleanupTarget

_NAMED_BUCKETS = frozenset(
    {
        "region",
        "playerdata",
        "poi",
        "data",
        "entities",
        "advancements",
        "stats",
        "DIM-1",
        "DIM1",
        "dimensions",
    }
)


def _by_bytes_desc(items: Iterable) -> list:
    return sorted(items, key=lambda item: item.bytes, reverse=True)


def _sorted_entries(directory: Path) -> list[os.DirEntry]:
    try:
        with os.scandir(directory) as entries:
            return sorted(entries, key=lambda entry: entry.name)
    except OSError:
        return []


def _regular_files(top: Path) -> Iterator[Path]:
    """Yield regular files below ``top`` without following symbolic links."""
    for dirpath, dirnames, filenames in os.walk(top):
        dirnames.sort()
        for name in sorted(filenames):
            full = os.path.join(dirpath, name)
            try:
                mode = os.lstat(full).st_mode
            except OSError:
                continue
            if stat.S_ISREG(mode):
                yield Path(full)


def dir_size(path: Path | str) -> int:
    """Return the total size of all regular files below ``path``, following links."""
    path = Path(path)
    if not path.exists():
        return 0
    if not path.is_dir():
        try:
            st = path.stat()
        except OSError:
            return 0
        return st.st_size if stat.S_ISREG(st.st_mode) else 0

    total = 0
    for dirpath, _dirnames, filenames in os.walk(path, followlinks=True):
        for name in filenames:
            try:
                st = os.stat(os.path.join(dirpath, name))
            except OSError:
                continue
            if stat.S_ISREG(st.st_mode):
                total += st.st_size
    return total


def scan_cleanup_targets(root: Path | str, targets: Iterable[CleanupTarget]) -> CleanupSummary:
    """Measure every cleanup target, largest first."""
    entries = _by_bytes_desc(
        CleanupStat(kind=t.kind, label=t.label, path=t.path, bytes=dir_size(t.path))
        for t in targets
    )
    return CleanupSummary(
        root=Path(root),
        entries=entries,
        total_bytes=sum(entry.bytes for entry in entries),
    )


def _hash_file(path: Path) -> str:
    digest = hashlib.blake2b(digest_size=32)
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1 << 20), b""):
            digest.update(chunk)
    return digest.hexdigest()


def scan_duplicate_mods(
    root: Path | str, selected_instances: Collection[str] | None = None
) -> DuplicateModsSummary:
    """Find mod jars with identical content in more than one place."""
    root = Path(root)
    grouped: dict[str, list[tuple[str, str, int, Path]]] = {}

    for entry in _sorted_entries(root / "instances"):
        instance = entry.name
        if not instance_allowed(instance, selected_instances):
            continue
        mods_dir = Path(entry.path) / ".minecraft" / "mods"
        if not mods_dir.exists():
            continue
        for jar in _regular_files(mods_dir):
            if jar.suffix != ".jar":
                continue
            try:
                size = jar.stat().st_size
                digest = _hash_file(jar)
            except OSError:
                continue
            grouped.setdefault(digest, []).append((instance, jar.name, size, jar))

    duplicates: list[DuplicateModEntry] = []
    reclaim = 0
    for digest, copies in grouped.items():
        if len(copies) <= 1:
            continue
        _, mod_name, size, _ = copies[0]
        reclaim += size * (len(copies) - 1)
        duplicates.append(
            DuplicateModEntry(
                hash=digest,
                mod_name=mod_name,
                bytes=size,
                instances=sorted({copy[0] for copy in copies}),
                paths=sorted(copy[3] for copy in copies),
            )
        )

    duplicates = _by_bytes_desc(duplicates)
    return DuplicateModsSummary(
        root=root,
        duplicates=duplicates,
        duplicate_groups=len(duplicates),
        potential_reclaim_bytes=reclaim,
    )


def world_breakdown(world_path: Path | str) -> list[WorldBreakdownItem]:
    """Split a world's size into buckets such as region, playerdata and other."""
    world_path = Path(world_path)
    if not world_path.is_dir():
        return []

    buckets: dict[str, int] = {}
    for entry in _sorted_entries(world_path):
        path = Path(entry.path)
        if path.is_dir():
            size = dir_size(path)
        else:
            try:
                size = path.stat().st_size
            except OSError:
                size = 0
        if size == 0:
            continue
        name = entry.name
        bucket = name if name in _NAMED_BUCKETS or name.startswith("DIM") else "other"
        buckets[bucket] = buckets.get(bucket, 0) + size

    items = [WorldBreakdownItem(bucket=b, bytes=n) for b, n in sorted(buckets.items())]
    return _by_bytes_desc(items)


def scan_world_sizes(
    root: Path | str,
    selected_instances: Collection[str] | None = None,
    include_breakdown: bool = False,
) -> WorldsSummary:
    """Measure every saved world of every (selected) instance, largest first."""
    root = Path(root)
    found: list[tuple[str, str, Path]] = []

    for entry in _sorted_entries(root / "instances"):
        instance = entry.name
        if not instance_allowed(instance, selected_instances):
            continue
        saves_dir = Path(entry.path) / ".minecraft" / "saves"
        if not saves_dir.exists():
            continue
        for world in _sorted_entries(saves_dir):
            world_path = Path(world.path)
            if world_path.is_dir():
                found.append((instance, world.name, world_path))

    worlds = _by_bytes_desc(
        WorldStat(
            instance=instance,
            world=name,
            path=path,
            bytes=dir_size(path),
            breakdown=world_breakdown(path) if include_breakdown else [],
        )
        for instance, name, path in found
    )
    return WorldsSummary(
        root=root,
        worlds=worlds,
        total_world_bytes=sum(world.bytes for world in worlds),
    )


def scan_instance_usage(
    root: Path | str, selected_instances: Collection[str] | None = None
) -> UsageSummary:
    """Measure each (selected) instance directory, largest first."""
    root = Path(root)
    rows = _by_bytes_desc(
        InstanceUsage(instance=entry.name, path=Path(entry.path), bytes=dir_size(entry.path))
        for entry in _sorted_entries(root / "instances")
        if Path(entry.path).is_dir() and instance_allowed(entry.name, selected_instances)
    )
    return UsageSummary(
        root=root,
        instances=rows,
        total_bytes=sum(row.bytes for row in rows),
    )