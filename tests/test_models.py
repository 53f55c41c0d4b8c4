import json
from pathlib import Path

from lumaprism.i18n import Language
from lumaprism.models import (
    CleanupStat,
    CleanupSummary,
    WorldBreakdownItem,
    WorldStat,
    instance_allowed,
    to_jsonable,
)


def test_cleanup_summary_to_jsonable():
    summary = CleanupSummary(
        root=Path("/prism"),
        entries=[CleanupStat(kind="global", label="cache", path=Path("/prism/cache"), bytes=10)],
        total_bytes=10,
    )
    data = to_jsonable(summary)
    assert data == {
        "root": str(Path("/prism")),
        "entries": [
            {"kind": "global", "label": "cache", "path": str(Path("/prism/cache")), "bytes": 10}
        ],
        "total_bytes": 10,
    }
    assert list(data) == ["root", "entries", "total_bytes"]


def test_jsonable_output_serializes():
    stat = WorldStat(
        instance="A",
        world="w",
        path=Path("/p"),
        bytes=5,
        breakdown=[WorldBreakdownItem(bucket="region", bytes=5)],
    )
    decoded = json.loads(json.dumps(to_jsonable(stat)))
    assert decoded["breakdown"] == [{"bucket": "region", "bytes": 5}]
    assert decoded["instance"] == "A"


def test_world_stat_default_breakdown_empty():
    stat = WorldStat(instance="A", world="w", path=Path("/p"), bytes=0)
    assert to_jsonable(stat)["breakdown"] == []


def test_jsonable_converts_enum_and_nested():
    assert to_jsonable({"lang": Language.JA, "items": (Path("x"),)}) == {
        "lang": "ja",
        "items": [str(Path("x"))],
    }


def test_instance_allowed_without_selection():
    assert instance_allowed("anything", None) is True


def test_instance_allowed_with_selection():
    selected = {"A", "B"}
    assert instance_allowed("A", selected) is True
    assert instance_allowed("C", selected) is False


def test_instance_allowed_empty_selection_rejects():
    assert instance_allowed("A", set()) is False