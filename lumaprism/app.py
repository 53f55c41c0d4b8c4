"""The ``luma`` command: wiring arguments to scanners, cleaners and reports."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Collection, Iterable, Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from . import cleaner, config, prism, scan, summaries, unused
from .cli import CleanMode, LogLevel, parse_args
from .i18n import Language, Msg, text
from .models import to_jsonable
from .pager import present_scan_report
from .prompts import PromptError, multi_select, select
from .units import parse_size_to_bytes

_PACKAGE_LOGGER = __name__.partition(".")[0]
_log = logging.getLogger(__name__)
_MAX_UNUSED_LIBRARIES = 2000
_MAX_UNUSED_ASSETS = 5000


def init_logging(level: LogLevel, verbose: bool) -> LogLevel:
    """Configure the package logger; ``verbose`` raises the level to at least debug."""
    effective = LogLevel.DEBUG if verbose and level < LogLevel.DEBUG else level
    logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s.%(msecs)03d %(levelname)s %(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    logger.addHandler(handler)
    logger.setLevel(effective.as_logging_level())
    return effective


def _print_json(value: Any) -> None:
    print(json.dumps(to_jsonable(value), indent=2, ensure_ascii=False))


@contextmanager
def _status(message: str, lang: Language, enabled: bool) -> Iterator[None]:
    if not enabled:
        yield
        return
    print(f"{message} ... ", end="", flush=True)
    try:
        yield
    except BaseException:
        print(text(lang, Msg.STATUS_FAILED))
        raise
    print(text(lang, Msg.STATUS_DONE))


def run_config(lang: Language | None, show: bool) -> None:
    """Show, set or interactively choose the default output language."""
    cfg = config.load_config()

    if show:
        _print_json(cfg.to_dict())
        return

    if lang is None:
        default_index = 1 if cfg.language is Language.JA else 0
        try:
            chosen = select(
                text(cfg.language, Msg.CONFIG_PROMPT_DEFAULT_LANGUAGE),
                ["English", "日本語"],
                default_index,
            )
        except PromptError as exc:
            raise PromptError(text(cfg.language, Msg.CONFIG_READ_SELECTION_FAILED)) from exc
        lang = Language.JA if chosen == 1 else Language.EN

    cfg.language = lang
    config.save_config(cfg)
    print("saved: " + json.dumps(cfg.to_dict(), indent=2, ensure_ascii=False))


def resolve_selected_instances(
    root: Path | str,
    instances: Sequence[str],
    all_instances: bool,
    non_interactive: bool,
    lang: Language,
) -> set[str] | None:
    """Return the instances to scan, or ``None`` for all of them."""
    if all_instances:
        return None
    if instances:
        return set(instances)
    if non_interactive:
        return None

    available = prism.list_instances(root)
    if len(available) <= 1:
        return None

    try:
        picked = multi_select(text(lang, Msg.SELECT_INSTANCES_PROMPT), available)
    except PromptError as exc:
        raise PromptError(text(lang, Msg.SELECT_INSTANCES_READ_FAILED)) from exc

    if not picked:
        return None
    return {available[index] for index in picked if 0 <= index < len(available)}


def filter_cleanup_targets_by_instances(
    targets: Iterable[prism.CleanupTarget], selected: Collection[str] | None
) -> list[prism.CleanupTarget]:
    """Drop instance targets whose instance is not among ``selected``."""
    targets = list(targets)
    if selected is None:
        return targets
    return [
        target
        for target in targets
        if target.kind != "instance" or target.label.split("/")[0] in selected
    ]


def _run_scan(args, root: Path, lang: Language) -> None:
    selected = resolve_selected_instances(
        root, args.instances, args.all_instances, args.json, lang
    )
    targets = filter_cleanup_targets_by_instances(prism.collect_cleanup_targets(root), selected)
    show = not args.json

    with _status(text(lang, Msg.TASK_SCAN_CLEANUP), lang, show):
        summary = scan.scan_cleanup_targets(root, targets)
    with _status(text(lang, Msg.TASK_SCAN_UNUSED_LIBRARIES), lang, show):
        unused_libraries = unused.scan_unused_libraries(root, selected)
    with _status(text(lang, Msg.TASK_SCAN_UNUSED_ASSETS), lang, show):
        unused_assets = unused.scan_unused_assets(root)

    if args.json:
        _print_json(
            {
                "cleanup": summary,
                "unused_libraries": unused_libraries,
                "unused_assets": unused_assets,
            }
        )
    else:
        present_scan_report(summary, unused_libraries, unused_assets, lang)


def _run_clean(args, root: Path, lang: Language) -> None:
    min_size_bytes = parse_size_to_bytes(args.min_size) if args.min_size is not None else None
    mode = CleanMode(
        dry_run=args.dry_run or not args.apply,
        yes=args.yes,
        include_unused_libraries=args.include_unused_libraries,
        include_unused_assets=args.include_unused_assets,
        kinds=list(args.kinds),
        min_size_bytes=min_size_bytes,
        older_than_days=args.older_than_days,
        select=args.select,
    )
    show = not args.json

    targets = prism.collect_cleanup_targets(root)
    if mode.include_unused_libraries:
        with _status(text(lang, Msg.TASK_SCAN_UNUSED_LIBRARIES), lang, show):
            libraries = unused.scan_unused_libraries(root)
        targets.extend(
            unused.cleanup_targets_from_unused_libraries(libraries, _MAX_UNUSED_LIBRARIES)
        )
    if mode.include_unused_assets:
        with _status(text(lang, Msg.TASK_SCAN_UNUSED_ASSETS), lang, show):
            assets = unused.scan_unused_assets(root)
        targets.extend(unused.cleanup_targets_from_unused_assets(assets, _MAX_UNUSED_ASSETS))

    clean_filter = cleaner.CleanFilter(
        kinds=list(mode.kinds),
        min_size_bytes=mode.min_size_bytes,
        older_than_days=mode.older_than_days,
        interactive_select=mode.select,
    )
    targets = cleaner.filter_and_select_targets(targets, clean_filter, lang, show)

    with _status(text(lang, Msg.TASK_CLEAN_TARGETS), lang, show):
        summary = cleaner.run_clean(root, targets, mode.dry_run, mode.yes, lang)

    if args.json:
        _print_json(summary)
    else:
        summaries.print_clean(summary, lang)


def run(argv: Sequence[str] | None = None) -> None:
    """Parse ``argv`` and carry out the requested command."""
    args = parse_args(argv)
    init_logging(args.log_level, args.verbose)
    if args.verbose:
        _log.debug("arguments: %s", args)

    if args.command == "config":
        run_config(args.lang, args.show)
        return

    root = prism.resolve_root(args.path)
    lang = config.load_config().language

    if not root.exists():
        raise FileNotFoundError(f"{text(lang, Msg.ROOT_MISSING)}: {root}")
    if args.verbose:
        print(f"{text(lang, Msg.ROOT_LABEL)}: {root}", file=sys.stderr)
    _log.info("root=%s", root)

    show = not args.json
    if args.command == "scan":
        _run_scan(args, root, lang)
    elif args.command == "clean":
        _run_clean(args, root, lang)
    elif args.command == "mods":
        with _status(text(lang, Msg.TASK_SCAN_DUPLICATE_MODS), lang, show):
            mods = scan.scan_duplicate_mods(root)
        if args.json:
            _print_json(mods)
        else:
            summaries.print_mods(mods, lang)
    elif args.command == "worlds":
        with _status(text(lang, Msg.TASK_SCAN_WORLDS), lang, show):
            worlds = scan.scan_world_sizes(root, None, args.breakdown)
        if args.json:
            _print_json(worlds)
        else:
            summaries.print_worlds(worlds, lang)
    elif args.command == "usage":
        with _status(text(lang, Msg.TASK_SCAN_USAGE), lang, show):
            usage = scan.scan_instance_usage(root)
        if args.json:
            _print_json(usage)
        else:
            summaries.print_usage(usage, lang)


def _describe(err: BaseException) -> str:
    lines = [str(err) or type(err).__name__]
    causes = []
    cause = err.__cause__
    while cause is not None:
        causes.append(str(cause) or type(cause).__name__)
        cause = cause.__cause__
    if causes:
        lines.append("")
        lines.append("Caused by:")
        lines.extend(f"    {message}" for message in causes)
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the ``luma`` command; returns the process exit status."""
    try:
        run(argv)
    except Exception as err:
        print(f"error: {_describe(err)}", file=sys.stderr)
        return 1
    return 0