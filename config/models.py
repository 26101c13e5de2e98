"""Configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class LogConfig:
    """Logger configuration settings."""

    level: str | int = "warn"
    stream: str = "stderr"
    prefix: str = ""
    flags: List[str] = field(default_factory=lambda: ["date", "time", "shortfile"])


@dataclass
class Config:
    """Top-level configuration container."""

    log: LogConfig
