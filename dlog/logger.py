"""Logger facade adapting the logshim contract onto ``LineWriter``."""

from __future__ import annotations

from typing import Any

from dlog.levels import ERROR_WORD, translate_level
from dlog.message import StdMessage
from dlog.writer import LineWriter
from logshim import Level


class StdLogger:
    """Leveled logger writing plain text lines.

    The threshold is fixed at construction. An invalid threshold is reported
    once through the writer and replaced with ``Level.WARN``.
    """

    def __init__(self, writer: LineWriter, level: Any = Level.WARN) -> None:
        if writer is None:
            raise TypeError("StdLogger requires a LineWriter")
        _, err = translate_level(level)
        if err is not None:
            writer.print(ERROR_WORD, f" log configuration error: {err}")
            level = Level.WARN
        self._name = "StdLog"
        self._level = Level(level)
        self._writer = writer

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> Level:
        return self._level

    @property
    def writer(self) -> LineWriter:
        return self._writer

    def _message(self, severity: Level) -> StdMessage:
        return StdMessage(self._writer, severity, self._level.admits(severity))

    def err(self, error: BaseException | None) -> StdMessage:
        """Start an ERROR message carrying ``error``, or INFO when it is None."""
        severity = Level.INFO if error is None else Level.ERROR
        return self._message(severity).err(error)

    with_error = err

    def error(self) -> StdMessage:
        return self._message(Level.ERROR)

    def warn(self) -> StdMessage:
        return self._message(Level.WARN)

    def notice(self) -> StdMessage:
        # NOTICE has no word of its own in the backend; it logs as INFO.
        return self._message(Level.INFO)

    def info(self) -> StdMessage:
        return self._message(Level.INFO)

    def debug(self) -> StdMessage:
        return self._message(Level.DEBUG)
