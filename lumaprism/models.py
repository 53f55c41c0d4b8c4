"""Result records produced by the scanners."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from pathlib import Path, PurePath
from typing import Any


@dataclass
class CleanupStat:
    kind: str
    label: str
    path: Path
    bytes: int


@dataclass
class CleanupSummary:
    root: Path
    entries: list[CleanupStat]
    total_bytes: int


@dataclass
class DuplicateModEntry:
    hash: str
    mod_name: str
    bytes: int
    instances: list[str]
    paths: list[Path]


@dataclass
class DuplicateModsSummary:
    root: Path
    duplicates: list[DuplicateModEntry]
    duplicate_groups: int
    potential_reclaim_bytes: int


@dataclass
class WorldBreakdownItem:
    bucket: str
    bytes: int


@dataclass
class WorldStat:
    instance: str
    world: str
    path: Path
    bytes: int
    breakdown: list[WorldBreakdownItem] = field(default_factory=list)


@dataclass
class WorldsSummary:
    root: Path
    worlds: list[WorldStat]
    total_world_bytes: int


@dataclass
class InstanceUsage:
    instance: str
    path: Path
    bytes: int


@dataclass
class UsageSummary:
    root: Path
    instances: list[InstanceUsage]
    total_bytes: int


@dataclass
class UnusedLibrary:
    relative_path: str
    path: Path
    bytes: int


@dataclass
class UnusedLibrariesSummary:
    root: Path
    candidates: list[UnusedLibrary]
    total_bytes: int
    referenced_files: int


@dataclass
class UnusedAsset:
    hash: str
    path: Path
    bytes: int


@dataclass
class UnusedAssetsSummary:
    root: Path
    candidates: list[UnusedAsset]
    total_bytes: int
    referenced_hashes: int


def to_jsonable(value: Any) -> Any:
    """Convert records, paths and enums into plain JSON-serializable values."""
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, PurePath):
        return str(value)
    if isinstance(value, (str, bytes)):
        return value
    if isinstance(value, Mapping):
        return {str(key): to_jsonable(item) for key, item in value.items()}
    if isinstance(value, Collection):
        return [to_jsonable(item) for item in value]
    return value


def instance_allowed(name: str, selected: Collection[str] | None) -> bool:
    """Return whether ``name`` passes the optional instance selection."""
    return selected is None or name in selected