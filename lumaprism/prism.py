"""Locating a PrismLauncher data root and its well-known cleanup targets."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import platformdirs

_GLOBAL_TARGETS = ("cache", "logs", "meta", "catpacks")


@dataclass
class CleanupTarget:
    """A directory or file that may be removed safely."""

    kind: str
    label: str
    path: Path


def default_prism_root() -> Path | None:
    """Return the platform's default PrismLauncher directory, if it has one."""
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "PrismLauncher"
    if sys.platform == "win32":
        return platformdirs.user_config_path(appauthor=False, roaming=True) / "PrismLauncher"
    return None


def resolve_root(explicit: Path | str | None = None) -> Path:
    """Return the canonical root, taken from ``explicit`` or the platform default."""
    root = Path(explicit) if explicit is not None else default_prism_root()
    if root is None:
        raise RuntimeError("failed to resolve default PrismLauncher root")
    try:
        return root.resolve(strict=True)
    except OSError as exc:
        raise FileNotFoundError(f"failed to resolve path: {root}") from exc


def _instance_dirs(root: Path) -> Iterator[tuple[str, Path]]:
    try:
        with os.scandir(root / "instances") as entries:
            found = sorted(entries, key=lambda entry: entry.name)
    except OSError:
        return
    for entry in found:
        path = Path(entry.path)
        if path.is_dir():
            yield entry.name, path


def collect_cleanup_targets(root: Path | str) -> list[CleanupTarget]:
    """Collect the existing global and per-instance cleanup targets under ``root``."""
    root = Path(root)
    targets: list[CleanupTarget] = []

    def add(kind: str, label: str, path: Path) -> None:
        if path.exists():
            targets.append(CleanupTarget(kind=kind, label=label, path=path))

    for name in _GLOBAL_TARGETS:
        add("global", name, root / name)

    for name, instance_path in _instance_dirs(root):
        minecraft = instance_path / ".minecraft"
        add("instance", f"{name}/logs", minecraft / "logs")
        add("instance", f"{name}/crash-reports", minecraft / "crash-reports")

    return targets


def list_instances(root: Path | str) -> list[str]:
    """Return the sorted names of instance directories under ``root``."""
    return [name for name, _ in _instance_dirs(Path(root))]