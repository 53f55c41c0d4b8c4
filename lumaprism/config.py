"""Persistent user configuration stored as JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import platformdirs

from .i18n import Language

_SERIALIZED_NAMES = {Language.EN: "En", Language.JA: "Ja"}
_FROM_SERIALIZED = {name: lang for lang, name in _SERIALIZED_NAMES.items()}


@dataclass
class AppConfig:
    """User preferences."""

    language: Language = Language.EN

    def to_dict(self) -> dict:
        """Return the JSON-ready form of this configuration."""
        return {"language": _SERIALIZED_NAMES[self.language]}


def _from_dict(data: object, path: Path) -> AppConfig:
    if not isinstance(data, dict) or "language" not in data:
        raise ValueError(f"failed to parse config: {path}")
    language = _FROM_SERIALIZED.get(data["language"]) if isinstance(data["language"], str) else None
    if language is None:
        raise ValueError(f"failed to parse config: {path}")
    return AppConfig(language=language)


def config_path() -> Path:
    """Return the location of the configuration file."""
    base = platformdirs.user_config_path(appauthor=False, roaming=True)
    return base / "luma-prism" / "config.json"


def load_config(path: Path | None = None) -> AppConfig:
    """Load the configuration, falling back to defaults when the file is absent."""
    path = Path(path) if path is not None else config_path()
    if not path.exists():
        return AppConfig()
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise OSError(f"failed to read config: {path}") from exc
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ValueError(f"failed to parse config: {path}") from exc
    return _from_dict(data, path)


def save_config(cfg: AppConfig, path: Path | None = None) -> None:
    """Write the configuration, creating its directory if needed."""
    path = Path(path) if path is not None else config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OSError(f"failed to create config dir: {path.parent}") from exc
    body = json.dumps(cfg.to_dict(), indent=2, ensure_ascii=False)
    try:
        path.write_text(body, encoding="utf-8")
    except OSError as exc:
        raise OSError(f"failed to write config: {path}") from exc