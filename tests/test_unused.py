import json
from pathlib import Path

from lumaprism.models import (
    UnusedAsset,
    UnusedAssetsSummary,
    UnusedLibrariesSummary,
    UnusedLibrary,
)
from lumaprism.unused import (
    cleanup_targets_from_unused_assets,
    cleanup_targets_from_unused_libraries,
    extract_asset_hashes,
    extract_instance_name,
    extract_library_paths,
    scan_unused_assets,
    scan_unused_libraries,
)


def _write(path: Path, data: bytes) -> bytes:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return data


def _write_json(path: Path, value) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(value), encoding="utf-8")


def _library_doc(*paths):
    return {"libraries": [{"downloads": {"artifact": {"path": p}}} for p in paths]}


def test_extract_library_paths_collects_all_forms():
    document = {
        "libraries": [
            {"downloads": {"artifact": {"path": "org\\ow2\\asm.jar"}}},
            {"path": "com/example/lib.jar"},
            {"path": "nodir.jar"},
            {"path": "com/example/readme.txt"},
        ],
        "nested": [[{"path": "net/deep/deep.jar"}]],
    }
    assert extract_library_paths(document) == {
        "org/ow2/asm.jar",
        "com/example/lib.jar",
        "net/deep/deep.jar",
    }


def test_extract_library_paths_ignores_scalars():
    assert extract_library_paths("a/b.jar") == set()
    assert extract_library_paths({"downloads": "x", "path": 3}) == set()


def test_extract_asset_hashes():
    index = {"objects": {"a.ogg": {"hash": "aa11"}, "b.png": {"hash": "bb22"}, "c": {}}}
    assert extract_asset_hashes(index) == {"aa11", "bb22"}
    assert extract_asset_hashes({"objects": []}) == set()
    assert extract_asset_hashes([1, 2]) == set()


def test_extract_instance_name():
    assert extract_instance_name("/data/instances/Fabric/mmc-pack.json") == "Fabric"
    assert extract_instance_name("/data/meta/net.minecraft/1.20.json") is None


def test_scan_unused_libraries_finds_unreferenced(tmp_path):
    _write_json(tmp_path / "meta" / "net" / "v.json", _library_doc("org/used/used.jar"))
    _write(tmp_path / "libraries" / "org" / "used" / "used.jar", b"u" * 10)
    stale = _write(tmp_path / "libraries" / "org" / "old" / "old.jar", b"o" * 40)
    tiny = _write(tmp_path / "libraries" / "org" / "tiny" / "tiny.jar", b"t" * 3)

    summary = scan_unused_libraries(tmp_path)
    assert [c.relative_path for c in summary.candidates] == [
        "org/old/old.jar",
        "org/tiny/tiny.jar",
    ]
    assert summary.total_bytes == len(stale) + len(tiny)
    assert summary.referenced_files == 1
    assert summary.root == tmp_path


def test_scan_unused_libraries_without_references_reports_nothing(tmp_path):
    _write(tmp_path / "libraries" / "org" / "x.jar", b"x" * 10)
    summary = scan_unused_libraries(tmp_path)
    assert summary.candidates == []
    assert summary.total_bytes == 0
    assert summary.referenced_files == 0


def test_scan_unused_libraries_skips_broken_json(tmp_path):
    _write(tmp_path / "meta" / "bad.json", b"{not json")
    _write_json(tmp_path / "meta" / "good.json", _library_doc("a/a.jar"))
    _write(tmp_path / "libraries" / "a" / "a.jar", b"a")
    summary = scan_unused_libraries(tmp_path)
    assert summary.candidates == []
    assert summary.referenced_files == 1


def test_scan_unused_libraries_honours_instance_selection(tmp_path):
    _write_json(tmp_path / "meta" / "base.json", _library_doc("base/base.jar"))
    _write_json(
        tmp_path / "instances" / "Picked" / "mmc-pack.json", _library_doc("picked/p.jar")
    )
    _write_json(
        tmp_path / "instances" / "Skipped" / "mmc-pack.json", _library_doc("skipped/s.jar")
    )
    for rel in ("base/base.jar", "picked/p.jar", "skipped/s.jar"):
        _write(tmp_path / "libraries" / rel, b"data")

    everything = scan_unused_libraries(tmp_path)
    assert everything.candidates == []

    scoped = scan_unused_libraries(tmp_path, {"Picked"})
    assert [c.relative_path for c in scoped.candidates] == ["skipped/s.jar"]
    assert scoped.referenced_files == 2


def test_scan_unused_assets(tmp_path):
    _write_json(
        tmp_path / "assets" / "indexes" / "17.json",
        {"objects": {"sound.ogg": {"hash": "ab12", "size": 1}}},
    )
    _write(tmp_path / "assets" / "objects" / "ab" / "ab12", b"k" * 5)
    orphan = _write(tmp_path / "assets" / "objects" / "cd" / "cd34", b"o" * 20)

    summary = scan_unused_assets(tmp_path)
    assert [c.hash for c in summary.candidates] == ["cd34"]
    assert summary.candidates[0].bytes == len(orphan)
    assert summary.total_bytes == len(orphan)
    assert summary.referenced_hashes == 1


def test_scan_unused_assets_without_indexes(tmp_path):
    _write(tmp_path / "assets" / "objects" / "ab" / "ab12", b"k")
    summary = scan_unused_assets(tmp_path)
    assert summary.candidates == []
    assert summary.referenced_hashes == 0


def test_cleanup_targets_from_unused_libraries(tmp_path):
    summary = UnusedLibrariesSummary(
        root=tmp_path,
        candidates=[
            UnusedLibrary("a/a.jar", tmp_path / "a.jar", 30),
            UnusedLibrary("b/b.jar", tmp_path / "b.jar", 20),
            UnusedLibrary("c/c.jar", tmp_path / "c.jar", 10),
        ],
        total_bytes=60,
        referenced_files=1,
    )
    targets = cleanup_targets_from_unused_libraries(summary, 2)
    assert [t.label for t in targets] == ["unused-library/a/a.jar", "unused-library/b/b.jar"]
    assert {t.kind for t in targets} == {"advanced"}
    assert targets[0].path == tmp_path / "a.jar"


def test_cleanup_targets_from_unused_assets(tmp_path):
    summary = UnusedAssetsSummary(
        root=tmp_path,
        candidates=[UnusedAsset("ff00", tmp_path / "ff00", 7)],
        total_bytes=7,
        referenced_hashes=3,
    )
    targets = cleanup_targets_from_unused_assets(summary, 5000)
    assert [(t.kind, t.label, t.path) for t in targets] == [
        ("advanced", "unused-asset/ff00", tmp_path / "ff00")
    ]
    assert cleanup_targets_from_unused_assets(summary, 0) == []