"""Severity levels shared by every logging backend."""

from __future__ import annotations

from enum import IntEnum


class Level(IntEnum):
    """Ordered log severity. Larger values are more severe."""

    DEBUG = 10
    INFO = 20
    NOTICE = 25
    WARN = 30
    ERROR = 40

    def admits(self, severity: Level) -> bool:
        """Return True when a logger at this threshold emits ``severity``."""
        return int(severity) >= int(self)
