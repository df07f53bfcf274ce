"""Loading helpers for pattern files, target lists and settings files."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from ..errors import ConfigError

CONFIG_EXTENSIONS = (".yaml", ".yml", ".json")
DEFAULT_PATTERNS_FILE = "patterns.json"


def _read_file(path: Path) -> dict:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigError(f"file not found: {path}") from exc
    except OSError as exc:
        raise ConfigError(f"error reading {path}: {exc}") from exc
    try:
        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text) or {}
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"error parsing {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file must contain a mapping: {path}")
    return data


def load_patterns(path: Path) -> dict[str, str]:
    """Return the name -> regex source mapping stored in ``path``."""

    payload = _read_file(path)
    patterns: dict[str, str] = {}
    for name, source in payload.items():
        if not isinstance(name, str) or not name.strip():
            raise ConfigError(f"pattern names must be non-empty strings: {path}")
        if not isinstance(source, str):
            raise ConfigError(f"pattern {name!r} must map to a regex string: {path}")
        patterns[name] = source
    return patterns


def load_targets(path: Path) -> list[str]:
    """Read one URL per line, skipping blank lines."""

    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError as exc:
        raise ConfigError(f"error opening URL file: {path}") from exc
    except OSError as exc:
        raise ConfigError(f"error reading URL file {path}: {exc}") from exc
    targets = [line.strip() for line in lines if line.strip()]
    if not targets:
        raise ConfigError("no URLs found in the list")
    return targets


def load_settings(path: Path) -> dict:
    """Read a settings file whose keys mirror ``ScanSettings`` fields."""

    if path.suffix not in CONFIG_EXTENSIONS:
        raise ConfigError(f"unsupported settings file type: {path.suffix or path.name}")
    return _read_file(path)


__all__ = [
    "CONFIG_EXTENSIONS",
    "DEFAULT_PATTERNS_FILE",
    "load_patterns",
    "load_settings",
    "load_targets",
]
