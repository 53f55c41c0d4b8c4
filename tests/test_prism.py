import sys
from pathlib import Path

import pytest

from lumaprism.prism import (
    CleanupTarget,
    collect_cleanup_targets,
    default_prism_root,
    list_instances,
    resolve_root,
)


@pytest.fixture
def prism_root(tmp_path):
    root = tmp_path / "prism"
    (root / "cache").mkdir(parents=True)
    (root / "logs").mkdir()
    instances = root / "instances"
    (instances / "B" / ".minecraft" / "logs").mkdir(parents=True)
    (instances / "A" / ".minecraft" / "logs").mkdir(parents=True)
    (instances / "A" / ".minecraft" / "crash-reports").mkdir(parents=True)
    (instances / "C").mkdir()
    (instances / "notes.txt").write_text("x", encoding="utf-8")
    return root


def test_collect_cleanup_targets_order_and_labels(prism_root):
    targets = collect_cleanup_targets(prism_root)
    assert [t.label for t in targets] == [
        "cache",
        "logs",
        "A/logs",
        "A/crash-reports",
        "B/logs",
    ]
    assert [t.kind for t in targets] == ["global", "global", "instance", "instance", "instance"]


def test_collect_cleanup_targets_paths_exist(prism_root):
    targets = collect_cleanup_targets(prism_root)
    assert all(t.path.exists() for t in targets)
    assert targets[0] == CleanupTarget("global", "cache", prism_root / "cache")


def test_collect_on_empty_root(tmp_path):
    assert collect_cleanup_targets(tmp_path) == []


def test_list_instances_sorted_dirs_only(prism_root):
    assert list_instances(prism_root) == ["A", "B", "C"]


def test_list_instances_without_instances_dir(tmp_path):
    assert list_instances(tmp_path) == []


def test_resolve_root_explicit(prism_root):
    assert resolve_root(prism_root) == prism_root.resolve()


def test_resolve_root_missing(tmp_path):
    with pytest.raises(FileNotFoundError, match="failed to resolve path"):
        resolve_root(tmp_path / "missing")


def test_default_root_none_on_linux(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    assert default_prism_root() is None


def test_resolve_root_without_default(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    with pytest.raises(RuntimeError):
        resolve_root(None)


def test_default_root_on_macos(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    root = default_prism_root()
    assert root.parts[-3:] == ("Library", "Application Support", "PrismLauncher")
    assert root.parent.parent.parent == Path.home()