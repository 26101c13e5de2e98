"""Configuration loading and normalization."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from config.merge import merge_sections
from config.models import Config, LogConfig


BASE_DIR = Path(__file__).resolve().parent.parent
MODULE_CONFIG_PATHS = {
    "log": BASE_DIR / "dlog" / "config.json",
}


def _as_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, list):
        return [str(v) for v in value]
    return [str(value)]


def _as_level(value: Any, default: str) -> str | int:
    if value is None:
        return default
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return value
    return str(value)


def _load_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _load_default_sections() -> Dict[str, Any]:
    raw: Dict[str, Any] = {}
    for section, file_path in MODULE_CONFIG_PATHS.items():
        if file_path.exists():
            raw[section] = _load_json(file_path)
    return raw


def config_from_dict(raw: Dict[str, Any]) -> Config:
    """Build a Config instance from a raw dictionary."""
    log_raw = raw.get("log", {}) or {}
    defaults = LogConfig()

    flags_raw = log_raw.get("flags")
    log = LogConfig(
        level=_as_level(log_raw.get("level"), str(defaults.level)),
        stream=str(log_raw.get("stream") or defaults.stream),
        prefix=str(log_raw.get("prefix", "") or ""),
        flags=defaults.flags if flags_raw is None else _as_list(flags_raw),
    )
    return Config(log=log)


def load_config(path: Path | None) -> Config:
    """Load config data into a Config instance."""
    raw = _load_default_sections()
    if path is not None:
        raw = merge_sections(raw, _load_json(path))
    return config_from_dict(raw)
