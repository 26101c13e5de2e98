"""Helpers that build a ready-to-use ``StdLogger``."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, TextIO

from config.models import LogConfig
from dlog.levels import parse_level
from dlog.logger import StdLogger
from dlog.writer import FLAG_NAMES, LineWriter, SHORTFILE, STD_FLAGS
from logshim import Level


DEFAULT_FLAGS = STD_FLAGS | SHORTFILE


def new(
    stream: TextIO | str | None = None,
    level: Any = Level.WARN,
    *,
    prefix: str = "",
    flags: int = DEFAULT_FLAGS,
) -> StdLogger:
    """Create a logger writing to ``stream`` at threshold ``level``.

    ``level`` may be a ``Level``, its number or its name (``"debug"``).
    """
    return StdLogger(LineWriter(stream, prefix=prefix, flags=flags), parse_level(level))


def flags_from_names(names: List[str]) -> int:
    """Combine writer flag names, ignoring unknown ones."""
    flags = 0
    for name in names:
        flags |= FLAG_NAMES.get(name.strip().lower(), 0)
    return flags


def from_config(cfg: LogConfig) -> StdLogger:
    """Build a logger from a ``LogConfig``.

    A stream other than ``stdout`` or ``stderr`` is treated as a file path
    and opened for appending; the file stays open for the life of the process.
    """
    stream: TextIO | str = cfg.stream
    if cfg.stream not in ("stdout", "stderr"):
        path = Path(cfg.stream)
        path.parent.mkdir(parents=True, exist_ok=True)
        stream = path.open("a", encoding="utf-8")
    return new(
        stream,
        cfg.level,
        prefix=cfg.prefix,
        flags=flags_from_names(cfg.flags),
    )
