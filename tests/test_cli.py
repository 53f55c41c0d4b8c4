import logging
from pathlib import Path

import pytest

from lumaprism.cli import CleanMode, LogLevel, build_parser, parse_args
from lumaprism.i18n import Language


def test_global_defaults():
    args = parse_args(["usage"])
    assert args.command == "usage"
    assert args.path is None
    assert args.json is False
    assert args.verbose is False
    assert args.log_level is LogLevel.WARN


def test_global_options_before_subcommand():
    args = parse_args(["--json", "--path", "/tmp/prism", "-v", "mods"])
    assert args.json is True
    assert args.verbose is True
    assert args.path == Path("/tmp/prism")
    assert args.command == "mods"


def test_global_options_after_subcommand():
    args = parse_args(["usage", "--json", "--log-level", "debug"])
    assert args.json is True
    assert args.log_level is LogLevel.DEBUG


def test_scan_repeatable_instances():
    args = parse_args(["scan", "--instance", "A", "--instance", "B"])
    assert args.instances == ["A", "B"]
    assert args.all_instances is False


def test_scan_all_instances_flag():
    args = parse_args(["scan", "--all-instances"])
    assert args.all_instances is True
    assert args.instances == []


def test_clean_defaults():
    args = parse_args(["clean"])
    assert (args.dry_run, args.apply, args.yes, args.select) == (False, False, False, False)
    assert args.kinds == []
    assert args.min_size is None
    assert args.older_than_days is None


def test_clean_options():
    args = parse_args(
        ["clean", "--apply", "-y", "--kind", "global", "--kind", "instance",
         "--min-size", "500MB", "--older-than-days", "30", "--include-unused-assets"]
    )
    assert args.apply is True
    assert args.yes is True
    assert args.kinds == ["global", "instance"]
    assert args.min_size == "500MB"
    assert args.older_than_days == 30
    assert args.include_unused_assets is True
    assert args.include_unused_libraries is False


def test_negative_days_rejected():
    with pytest.raises(SystemExit):
        parse_args(["clean", "--older-than-days", "-1"])


def test_invalid_log_level_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--log-level", "loud", "usage"])


def test_subcommand_required():
    with pytest.raises(SystemExit):
        parse_args([])


def test_config_language():
    args = parse_args(["config", "--lang", "ja"])
    assert args.lang is Language.JA
    assert args.show is False


def test_config_invalid_language():
    with pytest.raises(SystemExit):
        parse_args(["config", "--lang", "fr"])


def test_worlds_breakdown():
    assert parse_args(["worlds", "--breakdown"]).breakdown is True
    assert parse_args(["worlds"]).breakdown is False


def test_log_level_ordering():
    parsed = [
        parse_args(["--log-level", name, "usage"]).log_level
        for name in ("trace", "error", "debug", "warn", "info")
    ]
    assert sorted(parsed) == [
        LogLevel.ERROR,
        LogLevel.WARN,
        LogLevel.INFO,
        LogLevel.DEBUG,
        LogLevel.TRACE,
    ]
    assert parsed[4] < parsed[2]


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (LogLevel.ERROR, logging.ERROR),
        (LogLevel.WARN, logging.WARNING),
        (LogLevel.INFO, logging.INFO),
        (LogLevel.DEBUG, logging.DEBUG),
    ],
)
def test_as_logging_level(level, expected):
    assert level.as_logging_level() == expected


def test_trace_is_below_debug():
    assert LogLevel.TRACE.as_logging_level() < logging.DEBUG


def test_clean_mode_defaults():
    mode = CleanMode()
    assert mode.dry_run is True
    assert mode.kinds == []


def test_build_parser_prog():
    assert build_parser().prog == "luma"