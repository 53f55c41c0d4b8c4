"""Filtering cleanup targets and moving them to the trash."""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .i18n import Language, Msg, text
from .prism import CleanupTarget
from .prompts import PromptError, confirm, multi_select
from .scan import dir_size
from .trash import TrashError, move_to_trash
from .units import human_bytes

_SECONDS_PER_DAY = 86_400


@dataclass
class CleanFilter:
    """Criteria that cleanup candidates must meet."""

    kinds: list[str] = field(default_factory=list)
    min_size_bytes: int | None = None
    older_than_days: int | None = None
    interactive_select: bool = False


@dataclass
class CleanEntry:
    """Outcome for one cleanup target."""

    label: str
    path: str
    bytes: int
    action: str
    success: bool
    message: str


@dataclass
class CleanSummary:
    """Outcome of a whole cleanup run."""

    dry_run: bool
    total_candidates: int
    total_bytes: int
    cleaned_bytes: int
    entries: list[CleanEntry]


def _modified(path: Path) -> float | None:
    try:
        return path.stat().st_mtime
    except OSError:
        return None


def filter_and_select_targets(
    targets: Iterable[CleanupTarget],
    filter: CleanFilter,
    lang: Language,
    allow_interactive: bool,
) -> list[CleanupTarget]:
    """Keep the targets matching ``filter``, largest first, optionally picked by the user."""
    kind_set = {kind.lower() for kind in filter.kinds}
    min_size = filter.min_size_bytes or 0
    now = time.time()
    threshold = (
        now - filter.older_than_days * _SECONDS_PER_DAY
        if filter.older_than_days is not None
        else None
    )

    candidates: list[tuple[CleanupTarget, int, float | None]] = []
    for target in targets:
        path = Path(target.path)
        if not path.exists():
            continue
        if kind_set and target.kind.lower() not in kind_set:
            continue
        size = dir_size(path)
        if size < min_size:
            continue
        modified = _modified(path)
        if threshold is not None and (modified is None or modified > threshold):
            continue
        candidates.append((target, size, modified))

    if not candidates:
        return []

    candidates.sort(key=lambda row: row[1], reverse=True)

    if not (filter.interactive_select and allow_interactive):
        return [target for target, _, _ in candidates]

    def describe(target: CleanupTarget, size: int, modified: float | None) -> str:
        if modified is not None and now >= modified:
            age = f"{int(now - modified) // _SECONDS_PER_DAY}d"
        else:
            age = "-"
        return f"{target.label} [{target.kind}] {human_bytes(size)} age:{age}"

    items = [describe(*row) for row in candidates]
    try:
        picked = multi_select(text(lang, Msg.CLEAN_SELECT_PROMPT), items, [True] * len(items))
    except PromptError as exc:
        raise PromptError(text(lang, Msg.CLEAN_SELECT_READ_FAILED)) from exc

    return [candidates[index][0] for index in picked]


def is_within_root(root: Path | str, path: Path | str) -> bool:
    """Return whether ``path`` resolves to a location inside ``root``."""
    try:
        resolved_root = Path(root).resolve(strict=True)
        resolved_path = Path(path).resolve(strict=True)
    except (OSError, RuntimeError):
        return False
    return resolved_path.is_relative_to(resolved_root)


def run_clean(
    root: Path | str,
    targets: Iterable[CleanupTarget],
    dry_run: bool,
    yes: bool,
    lang: Language,
) -> CleanSummary:
    """Move each target to the trash, or only report what would be moved."""
    if not dry_run and not yes:
        try:
            approved = confirm(text(lang, Msg.CLEAN_CONFIRM_PROMPT), False)
        except PromptError as exc:
            raise PromptError(text(lang, Msg.CLEAN_CONFIRM_READ_FAILED)) from exc
        if not approved:
            return CleanSummary(
                dry_run=dry_run, total_candidates=0, total_bytes=0, cleaned_bytes=0, entries=[]
            )

    entries: list[CleanEntry] = []
    total_bytes = 0
    cleaned_bytes = 0

    for target in targets:
        path = Path(target.path)
        if not path.exists():
            continue

        size = dir_size(path)
        total_bytes += size
        entry = CleanEntry(
            label=target.label,
            path=str(path),
            bytes=size,
            action="dry-run" if dry_run else "trash",
            success=True,
            message="",
        )
        entries.append(entry)

        if not is_within_root(root, path):
            entry.success = False
            entry.message = text(lang, Msg.CLEAN_PATH_OUTSIDE_ROOT)
            continue

        if dry_run:
            entry.message = text(lang, Msg.CLEAN_SCHEDULED)
            cleaned_bytes += size
            continue

        try:
            move_to_trash(path)
        except TrashError as exc:
            entry.success = False
            entry.message = f"{text(lang, Msg.CLEAN_FAILED_PREFIX)}: {exc}"
        else:
            entry.message = text(lang, Msg.CLEAN_MOVED_TO_TRASH)
            cleaned_bytes += size

    return CleanSummary(
        dry_run=dry_run,
        total_candidates=len(entries),
        total_bytes=total_bytes,
        cleaned_bytes=cleaned_bytes,
        entries=entries,
    )