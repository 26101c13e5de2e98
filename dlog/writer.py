"""Line-oriented writer used as the dlog backend."""

from __future__ import annotations

import os
import sys
import threading
from datetime import datetime, timezone
from typing import TextIO, Tuple


DATE = 1
TIME = 2
MICROSECONDS = 4
LONGFILE = 8
SHORTFILE = 16
UTC = 32
STD_FLAGS = DATE | TIME

FLAG_NAMES = {
    "date": DATE,
    "time": TIME,
    "microseconds": MICROSECONDS,
    "longfile": LONGFILE,
    "shortfile": SHORTFILE,
    "utc": UTC,
}

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


def _is_internal(filename: str) -> bool:
    return os.path.dirname(os.path.abspath(filename)) == _PACKAGE_DIR


def _find_caller() -> Tuple[str, int]:
    frame = sys._getframe(1)
    while frame is not None and _is_internal(frame.f_code.co_filename):
        frame = frame.f_back
    if frame is None:
        return "???", 0
    return frame.f_code.co_filename, frame.f_lineno


class LineWriter:
    """Write one header-prefixed line per ``print`` call.

    ``stream`` may be a file object, ``"stdout"`` / ``"stderr"`` or ``None``
    (stderr). Named streams are looked up on every write so that a replaced
    ``sys.stdout`` is honoured.
    """

    def __init__(
        self,
        stream: TextIO | str | None = None,
        prefix: str = "",
        flags: int = STD_FLAGS,
    ) -> None:
        self._stream = stream
        self._prefix = prefix
        self._flags = flags
        self._lock = threading.Lock()

    @property
    def flags(self) -> int:
        return self._flags

    @property
    def prefix(self) -> str:
        return self._prefix

    def _target(self) -> TextIO:
        stream = self._stream
        if stream is None or stream == "stderr":
            return sys.stderr
        if stream == "stdout":
            return sys.stdout
        return stream

    def _header(self) -> str:
        flags = self._flags
        parts = [self._prefix]
        if flags & (DATE | TIME | MICROSECONDS):
            now = datetime.now(timezone.utc) if flags & UTC else datetime.now()
            if flags & DATE:
                parts.append(now.strftime("%Y/%m/%d "))
            if flags & (TIME | MICROSECONDS):
                parts.append(now.strftime("%H:%M:%S"))
                if flags & MICROSECONDS:
                    parts.append(f".{now.microsecond:06d}")
                parts.append(" ")
        if flags & (SHORTFILE | LONGFILE):
            filename, lineno = _find_caller()
            if flags & SHORTFILE:
                filename = os.path.basename(filename)
            parts.append(f"{filename}:{lineno}: ")
        return "".join(parts)

    def print(self, *parts: object) -> None:
        """Concatenate ``parts`` and write them as a single line."""
        line = self._header() + "".join(str(part) for part in parts)
        if not line.endswith("\n"):
            line += "\n"
        with self._lock:
            stream = self._target()
            stream.write(line)
            flush = getattr(stream, "flush", None)
            if flush is not None:
                flush()
