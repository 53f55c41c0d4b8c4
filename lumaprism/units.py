"""Formatting and parsing of byte sizes."""

from __future__ import annotations

_BINARY_PREFIXES = ("Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi")

_SUFFIX_MULTIPLIERS = {
    "": 1.0,
    "b": 1.0,
    "k": 1024.0,
    "kb": 1024.0,
    "kib": 1024.0,
    "m": 1024.0**2,
    "mb": 1024.0**2,
    "mib": 1024.0**2,
    "g": 1024.0**3,
    "gb": 1024.0**3,
    "gib": 1024.0**3,
    "t": 1024.0**4,
    "tb": 1024.0**4,
    "tib": 1024.0**4,
}

_U64_MAX = (1 << 64) - 1


def human_bytes(num: int) -> str:
    """Format a byte count with binary prefixes, e.g. ``1.50 MiB``."""
    value = float(num)
    if value < 1024:
        return f"{value:.0f} B"
    prefix_index = 0
    while value >= 1024 and prefix_index < len(_BINARY_PREFIXES):
        value /= 1024
        prefix_index += 1
    return f"{value:.2f} {_BINARY_PREFIXES[prefix_index - 1]}B"


def _ascii_lower(raw: str) -> str:
    return "".join(ch.lower() if ch.isascii() else ch for ch in raw)


def parse_size_to_bytes(raw: str) -> int:
    """Parse a size such as ``500MB``, ``2 GiB`` or ``1024`` into bytes."""
    normalized = _ascii_lower(raw.strip())
    split_at = next(
        (
            index
            for index, ch in enumerate(normalized)
            if not (ch.isascii() and ch.isdigit()) and ch != "."
        ),
        len(normalized),
    )
    number = normalized[:split_at].strip()
    suffix = normalized[split_at:].strip()

    if not number:
        raise ValueError(f"invalid size: {raw}")
    try:
        value = float(number)
    except ValueError as exc:
        raise ValueError(f"invalid size number: {raw}") from exc

    multiplier = _SUFFIX_MULTIPLIERS.get(suffix)
    if multiplier is None:
        raise ValueError(f"unsupported size suffix: {raw}")

    return min(int(value * multiplier), _U64_MAX)