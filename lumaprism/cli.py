"""Command-line arguments of the ``luma`` command."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

from .i18n import Language

_VERSION = "0.0.1"
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class LogLevel(IntEnum):
    """Verbosity of diagnostic logging, ordered from quietest to loudest."""

    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    def as_logging_level(self) -> int:
        """Return the matching level of the ``logging`` module."""
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.TRACE: TRACE,
}


@dataclass
class CleanMode:
    """Resolved options of the ``clean`` command."""

    dry_run: bool = True
    yes: bool = False
    include_unused_libraries: bool = False
    include_unused_assets: bool = False
    kinds: list[str] = field(default_factory=list)
    min_size_bytes: int | None = None
    older_than_days: int | None = None
    select: bool = False


def _log_level(raw: str) -> LogLevel:
    try:
        return LogLevel[raw.strip().upper()]
    except KeyError:
        choices = ", ".join(level.name.lower() for level in LogLevel)
        raise argparse.ArgumentTypeError(f"invalid log level {raw!r} (choose from {choices})")


def _language(raw: str) -> Language:
    try:
        return Language(raw.strip().lower())
    except ValueError:
        choices = ", ".join(lang.value for lang in Language)
        raise argparse.ArgumentTypeError(f"invalid language {raw!r} (choose from {choices})")


def _days(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of days: {raw!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"number of days must not be negative: {raw!r}")
    return value


def _add_global_options(parser: argparse.ArgumentParser, suppress: bool) -> None:
    def default(value):
        return argparse.SUPPRESS if suppress else value

    parser.add_argument(
        "--path",
        type=Path,
        default=default(None),
        help="PrismLauncher root path. Uses OS default when omitted.",
    )
    parser.add_argument(
        "--json", action="store_true", default=default(False), help="Emit JSON output"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default(False),
        help="Enable verbose output",
    )
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=default(LogLevel.WARN),
        metavar="{error,warn,info,debug,trace}",
        help="Log level",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="luma", description="Analyze and clean PrismLauncher disk usage"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    _add_global_options(parser, suppress=False)

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    def add(name: str, help_text: str) -> argparse.ArgumentParser:
        sub = commands.add_parser(name, help=help_text, description=help_text)
        _add_global_options(sub, suppress=True)
        return sub

    scan = add("scan", "Analyze reclaimable storage")
    scan.add_argument(
        "--all-instances",
        action="store_true",
        help="Scan all instances without interactive selection",
    )
    scan.add_argument(
        "--instance",
        dest="instances",
        action="append",
        default=[],
        help="Restrict scan to specific instances (repeatable)",
    )

    clean = add("clean", "Clean targets (dry-run by default)")
    clean.add_argument("--dry-run", action="store_true", help="Explicitly force dry-run mode")
    clean.add_argument(
        "--apply", action="store_true", help="Actually delete files (move to trash)"
    )
    clean.add_argument("-y", "--yes", action="store_true", help="Skip confirmation prompt")
    clean.add_argument(
        "--include-unused-libraries",
        action="store_true",
        help="Include detected unused libraries as clean candidates",
    )
    clean.add_argument(
        "--include-unused-assets",
        action="store_true",
        help="Include detected unused assets as clean candidates",
    )
    clean.add_argument(
        "--kind",
        dest="kinds",
        action="append",
        default=[],
        help="Filter by target kind (repeatable: global, instance, advanced)",
    )
    clean.add_argument("--min-size", help="Minimum size filter (e.g. 500MB, 2GB, 1024)")
    clean.add_argument(
        "--older-than-days",
        type=_days,
        help="Keep only candidates older than N days (by modified time)",
    )
    clean.add_argument(
        "--select",
        action="store_true",
        help="Interactively select filtered candidates before cleaning",
    )

    add("mods", "Detect duplicate mods across instances")

    worlds = add("worlds", "Analyze world sizes")
    worlds.add_argument(
        "--breakdown",
        action="store_true",
        help="Show per-world breakdown (region/playerdata/poi/etc.)",
    )

    add("usage", "Show per-instance usage")

    config = add("config", "Manage luma configuration")
    config.add_argument(
        "--lang",
        type=_language,
        metavar="{en,ja}",
        help="Set default output language",
    )
    config.add_argument("--show", action="store_true", help="Print current configuration")

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments; ``None`` reads them from ``sys.argv``."""
    return build_parser().parse_args(argv)