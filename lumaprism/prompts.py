"""Minimal line-based interactive prompts on the terminal."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence


class PromptError(Exception):
    """Raised when an answer cannot be read from the user."""


def _say(line: str) -> None:
    sys.stderr.write(line + "\n")
    sys.stderr.flush()


def _ask(question: str) -> str:
    sys.stderr.write(question)
    sys.stderr.flush()
    try:
        line = sys.stdin.readline()
    except (OSError, ValueError, KeyboardInterrupt) as exc:
        raise PromptError("failed to read input") from exc
    if not line:
        raise PromptError("input ended before an answer was given")
    return line.strip()


def confirm(prompt: str, default: bool = False) -> bool:
    """Ask a yes/no question; an empty answer gives ``default``."""
    hint = "[Y/n]" if default else "[y/N]"
    while True:
        answer = _ask(f"{prompt} {hint} ").lower()
        if not answer:
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        _say("please answer y or n")


def select(prompt: str, items: Sequence[str], default: int = 0) -> int:
    """Ask for one of ``items`` and return its index."""
    items = list(items)
    if not items:
        raise ValueError("no items to select from")
    if not 0 <= default < len(items):
        raise ValueError(f"default index out of range: {default}")

    _say(prompt)
    for number, item in enumerate(items, start=1):
        marker = ">" if number - 1 == default else " "
        _say(f"{marker} {number}) {item}")

    while True:
        answer = _ask(f"choice [{default + 1}]: ")
        if not answer:
            return default
        if answer.isdigit() and 1 <= int(answer) <= len(items):
            return int(answer) - 1
        _say(f"enter a number between 1 and {len(items)}")


def _parse_selection(answer: str, count: int) -> list[int] | None:
    chosen: set[int] = set()
    for token in filter(None, re.split(r"[,\s]+", answer)):
        low, sep, high = token.partition("-")
        if sep:
            if not (low.isdigit() and high.isdigit()):
                return None
            first, last = int(low), int(high)
            if not 1 <= first <= last <= count:
                return None
            chosen.update(range(first - 1, last))
        else:
            if not token.isdigit() or not 1 <= int(token) <= count:
                return None
            chosen.add(int(token) - 1)
    return sorted(chosen)


def multi_select(
    prompt: str, items: Sequence[str], defaults: Iterable[bool] | None = None
) -> list[int]:
    """Ask for any number of ``items`` and return the chosen indices in order."""
    items = list(items)
    if not items:
        return []
    marks = list(defaults or [])[: len(items)]
    marks += [False] * (len(items) - len(marks))

    _say(prompt)
    for number, (item, marked) in enumerate(zip(items, marks), start=1):
        _say(f"[{'x' if marked else ' '}] {number}) {item}")

    while True:
        answer = _ask("numbers or ranges (e.g. 1,3-4), 'all' or 'none' [keep marked]: ")
        lowered = answer.lower()
        if not answer:
            return [index for index, marked in enumerate(marks) if marked]
        if lowered == "all":
            return list(range(len(items)))
        if lowered == "none":
            return []
        parsed = _parse_selection(answer, len(items))
        if parsed is not None:
            return parsed
        _say(f"invalid selection; use numbers between 1 and {len(items)}")