"""Exceptions raised or reported by the dlog adapter."""

from __future__ import annotations

from typing import Any


class DlogError(Exception):
    """Base class for dlog errors."""


class InvalidLevelError(DlogError, ValueError):
    """A severity value outside the known levels."""

    def __init__(self, value: Any, fallback: str = "WARN") -> None:
        super().__init__(f"invalid log level {value!r}, defaulting to {fallback} level")
        self.value = value
        self.fallback = fallback
