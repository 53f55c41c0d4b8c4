"""Moving files and directories to the user's trash instead of deleting them."""

from __future__ import annotations

import itertools
import os
import shutil
import sys
from collections.abc import Iterator
from datetime import datetime
from pathlib import Path
from urllib.parse import quote


class TrashError(OSError):
    """Raised when a path cannot be moved to the trash."""


def _candidate_names(name: str) -> Iterator[str]:
    yield name
    for number in itertools.count(2):
        yield f"{name}.{number}"


def _move(source: Path, destination: Path) -> None:
    try:
        shutil.move(str(source), str(destination))
    except OSError as exc:
        raise TrashError(f"failed to move {source} to trash: {exc}") from exc


def _move_to_home_trash(source: Path) -> Path:
    trash_dir = Path.home() / ".Trash"
    try:
        trash_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise TrashError(f"failed to create trash directory: {trash_dir}") from exc
    for name in _candidate_names(source.name):
        destination = trash_dir / name
        if not os.path.lexists(destination):
            _move(source, destination)
            return destination
    raise TrashError(f"no free name in trash for {source}")


def _move_to_freedesktop_trash(source: Path) -> Path:
    data_home = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    base = Path(data_home) / "Trash"
    files_dir = base / "files"
    info_dir = base / "info"
    try:
        files_dir.mkdir(parents=True, exist_ok=True)
        info_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise TrashError(f"failed to create trash directory: {base}") from exc

    deleted_at = datetime.now().strftime("%Y-%m-%dT%H:%M:%S")
    info_body = f"[Trash Info]\nPath={quote(str(source), safe='/')}\nDeletionDate={deleted_at}\n"

    for name in _candidate_names(source.name):
        info_path = info_dir / f"{name}.trashinfo"
        try:
            fd = os.open(info_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
        except FileExistsError:
            continue
        except OSError as exc:
            raise TrashError(f"failed to write trash info: {info_path}") from exc
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(info_body)

        destination = files_dir / name
        if os.path.lexists(destination):
            info_path.unlink(missing_ok=True)
            continue
        try:
            _move(source, destination)
        except TrashError:
            info_path.unlink(missing_ok=True)
            raise
        return destination
    raise TrashError(f"no free name in trash for {source}")


def move_to_trash(path: Path | str) -> Path:
    """Move ``path`` into the user's trash and return where it ended up."""
    path = Path(path)
    if not os.path.lexists(path):
        raise TrashError(f"no such file or directory: {path}")
    source = Path(os.path.abspath(path))
    if sys.platform == "win32":
        raise TrashError("moving to the recycle bin is not supported on this platform")
    if sys.platform == "darwin":
        return _move_to_home_trash(source)
    return _move_to_freedesktop_trash(source)