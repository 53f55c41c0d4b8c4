"""The scan report and a simple keyboard-driven terminal pager."""

from __future__ import annotations

import os
import re
import select
import shutil
import sys
import unicodedata
from collections.abc import Sequence
from pathlib import Path

from .i18n import Language, Msg, text
from .models import CleanupSummary, UnusedAssetsSummary, UnusedLibrariesSummary
from .units import human_bytes

if os.name == "nt":
    import msvcrt
else:
    import termios
    import tty

_ANSI = re.compile(r"\x1b\[[0-9;]*m")
_RESET = "\x1b[0m"
_CLEAR = "\x1b[2J\x1b[H"
_NEXT_KEYS = frozenset({"right", "down", "j", "l"})
_PREV_KEYS = frozenset({"left", "up", "h", "k"})
_QUIT_KEYS = frozenset({"enter", "escape", "q"})
_ARROWS = {"A": "up", "B": "down", "C": "right", "D": "left"}
_WINDOWS_ARROWS = {"H": "up", "P": "down", "M": "right", "K": "left"}


def _is_terminal() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def _style(message: str, *codes: str) -> str:
    if not _is_terminal():
        return message
    return "".join(f"\x1b[{code}m" for code in codes) + message + _RESET


def _char_width(ch: str) -> int:
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def _width(value: str) -> int:
    return sum(_char_width(ch) for ch in _ANSI.sub("", value))


def _truncate(line: str, width: int, tail: str = "...") -> str:
    if _width(line) <= width:
        return line
    budget = max(width - _width(tail), 0)
    out: list[str] = []
    used = 0
    pos = 0
    styled = False
    while pos < len(line):
        match = _ANSI.match(line, pos)
        if match:
            out.append(match.group())
            styled = True
            pos = match.end()
            continue
        ch_width = _char_width(line[pos])
        if used + ch_width > budget:
            break
        out.append(line[pos])
        used += ch_width
        pos += 1
    out.append(tail)
    if styled:
        out.append(_RESET)
    return "".join(out)


def _plain_key(ch: str) -> str:
    if ch in ("\r", "\n"):
        return "enter"
    if ch == "\x03":
        raise KeyboardInterrupt
    if ch == "\x1b":
        return "escape"
    return ch


def _read_key() -> str:
    if os.name == "nt":
        ch = msvcrt.getwch()
        if ch in ("\x00", "\xe0"):
            return _WINDOWS_ARROWS.get(msvcrt.getwch(), "")
        return _plain_key(ch)

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = os.read(fd, 1).decode(errors="replace")
        if ch != "\x1b":
            return _plain_key(ch)
        ready, _, _ = select.select([fd], [], [], 0.05)
        if not ready:
            return "escape"
        sequence = os.read(fd, 2).decode(errors="replace")
        if len(sequence) == 2 and sequence[0] in "[O":
            return _ARROWS.get(sequence[1], "")
        return ""
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def to_relative(root: Path | str, path: Path | str) -> str:
    """Show ``path`` relative to ``root`` with forward slashes when it lies below it."""
    path = Path(path)
    try:
        relative = path.relative_to(root)
    except ValueError:
        return str(path).replace("\\", "/")
    shown = relative.as_posix()
    return "" if shown == "." else shown.replace("\\", "/")


def build_scan_lines(
    summary: CleanupSummary,
    unused_libs: UnusedLibrariesSummary,
    unused_assets: UnusedAssetsSummary,
    lang: Language,
) -> list[str]:
    """Lay out the scan report as lines of text."""
    lines = [_style(text(lang, Msg.SCAN_TITLE), "1", "36"), ""]

    lines.append(text(lang, Msg.SCAN_SAFE_TARGETS))
    for entry in summary.entries:
        rel = to_relative(summary.root, entry.path)
        lines.append(f"{entry.label:<18} {human_bytes(entry.bytes):>10}  {rel}")
    lines.append(f"{text(lang, Msg.SCAN_SAFE_TOTAL)}: {human_bytes(summary.total_bytes)}")
    lines.append("")

    lines.append(text(lang, Msg.SCAN_UNUSED_LIBRARIES))
    if unused_libs.candidates:
        lines.extend(
            f"{human_bytes(entry.bytes):>10}  {entry.relative_path}"
            for entry in unused_libs.candidates
        )
    else:
        lines.append(text(lang, Msg.SCAN_NONE))
    lines.append(
        f"{text(lang, Msg.SCAN_UNUSED_LIBRARIES_TOTAL)}: {human_bytes(unused_libs.total_bytes)}"
    )
    lines.append("")

    lines.append(text(lang, Msg.SCAN_UNUSED_ASSETS))
    if unused_assets.candidates:
        lines.extend(
            f"{human_bytes(entry.bytes):>10}  {to_relative(unused_assets.root, entry.path)}"
            for entry in unused_assets.candidates
        )
    else:
        lines.append(text(lang, Msg.SCAN_NONE))
    lines.append(
        f"{text(lang, Msg.SCAN_UNUSED_ASSETS_TOTAL)}: {human_bytes(unused_assets.total_bytes)}"
    )
    return lines


def page_lines(lines: Sequence[str], lang: Language) -> None:
    """Show ``lines`` page by page on a terminal, or print them all otherwise."""
    if not _is_terminal():
        for line in lines:
            print(line)
        return

    out = sys.stdout
    page = 0
    while True:
        size = shutil.get_terminal_size()
        page_height = max(size.lines - 3, 1)
        total_pages = max(-(-len(lines) // page_height), 1)
        page = min(page, total_pages - 1)
        start = page * page_height

        out.write(_CLEAR)
        for line in lines[start : start + page_height]:
            out.write(_truncate(line, size.columns) + "\n")
        help_line = (
            text(lang, Msg.PAGER_HELP)
            .replace("{page}", str(page + 1))
            .replace("{total}", str(total_pages))
        )
        out.write(_style(help_line, "2") + "\n")
        out.flush()

        key = _read_key()
        if key in _NEXT_KEYS:
            if page + 1 < total_pages:
                page += 1
        elif key in _PREV_KEYS:
            page = max(page - 1, 0)
        elif key in _QUIT_KEYS:
            out.write(_CLEAR)
            out.flush()
            break


def present_scan_report(
    summary: CleanupSummary,
    unused_libs: UnusedLibrariesSummary,
    unused_assets: UnusedAssetsSummary,
    lang: Language,
) -> None:
    """Build the scan report and show it through the pager."""
    page_lines(build_scan_lines(summary, unused_libs, unused_assets, lang), lang)