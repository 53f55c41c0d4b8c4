"""Plain-text output of the mods, worlds, usage and cleanup reports."""

from __future__ import annotations

from .cleaner import CleanSummary
from .i18n import Language, Msg, text
from .models import DuplicateModsSummary, UsageSummary, WorldsSummary
from .units import human_bytes

_BREAKDOWN_LIMIT = 6


def print_mods(summary: DuplicateModsSummary, lang: Language) -> None:
    """Print duplicate mod groups and the space they waste."""
    if not summary.duplicates:
        print(text(lang, Msg.NO_DUPLICATE_MODS))
        return

    print(text(lang, Msg.DUPLICATE_MODS))
    for entry in summary.duplicates:
        print(f"- {entry.mod_name} ({human_bytes(entry.bytes)})")
        print(f"  {', '.join(entry.instances)}")
    print(f"{text(lang, Msg.DUPLICATE_GROUPS)}: {summary.duplicate_groups}")
    print(
        f"{text(lang, Msg.POTENTIAL_RECLAIMABLE)}: {human_bytes(summary.potential_reclaim_bytes)}"
    )


def print_worlds(summary: WorldsSummary, lang: Language) -> None:
    """Print every world's size and, if present, its largest parts."""
    if not summary.worlds:
        print(text(lang, Msg.NO_WORLDS_DETECTED))
    else:
        print(text(lang, Msg.WORLDS))
        for row in summary.worlds:
            print(f"- {row.instance}/{row.world} ({human_bytes(row.bytes)})")
            for part in row.breakdown[:_BREAKDOWN_LIMIT]:
                print(f"  - {part.bucket}: {human_bytes(part.bytes)}")
    print(f"{text(lang, Msg.TOTAL_WORLD_SIZE)}: {human_bytes(summary.total_world_bytes)}")


def print_usage(summary: UsageSummary, lang: Language) -> None:
    """Print each instance's size and the total."""
    print(text(lang, Msg.INSTANCE_USAGE))
    for row in summary.instances:
        print(f"- {row.instance}: {human_bytes(row.bytes)}")
    print(f"{text(lang, Msg.TOTAL_INSTANCE_SIZE)}: {human_bytes(summary.total_bytes)}")


def print_clean(summary: CleanSummary, lang: Language) -> None:
    """Print the outcome of each cleanup entry and the bytes reclaimed."""
    if summary.entries:
        print(text(lang, Msg.CLEANUP_RESULT))
        for entry in summary.entries:
            status = "ok" if entry.success else "ng"
            print(
                f"- {entry.label} [{entry.action}] {human_bytes(entry.bytes)} "
                f"({status}) {entry.message}"
            )
    heading = text(lang, Msg.DRY_RUN_RECLAIMABLE if summary.dry_run else Msg.CLEANED)
    print(f"{heading}: {human_bytes(summary.cleaned_bytes)}")