"""Single-use message builder returned by ``StdLogger``."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Callable, List, Tuple

from dlog.levels import ERROR_WORD, translate_level
from dlog.writer import LineWriter
from logshim import Level


_INT64_SPAN = 1 << 64
_INT64_MIN = 1 << 63


def _format_bool(val: bool) -> str:
    return "true" if val else "false"


def _fraction(whole: int, frac: int, width: int) -> str:
    if not frac:
        return str(whole)
    return f"{whole}.{frac:0{width}d}".rstrip("0")


def _format_duration(val: timedelta | float) -> str:
    """Render a duration compactly, e.g. ``1h2m3s``, ``1.5s`` or ``250ms``."""
    if isinstance(val, timedelta):
        micros = (val.days * 86400 + val.seconds) * 1_000_000 + val.microseconds
    else:
        micros = round(float(val) * 1_000_000)
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)
    if micros < 1000:
        return f"{sign}{micros}µs"
    if micros < 1_000_000:
        return f"{sign}{_fraction(*divmod(micros, 1000), 3)}ms"
    hours, rem = divmod(micros, 3_600_000_000)
    minutes, rem = divmod(rem, 60_000_000)
    seconds = _fraction(*divmod(rem, 1_000_000), 6)
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"


def _format_time(val: datetime) -> str:
    text = val.strftime("%Y-%m-%d %H:%M:%S")
    if val.microsecond:
        text = f"{text}.{val.microsecond:06d}".rstrip("0")
    if val.utcoffset() is not None:
        text = f"{text} {val.strftime('%z')}"
        zone = val.tzname()
        if zone:
            text = f"{text} {zone}"
    return text


def _safe_repr(val: Any) -> str:
    try:
        return repr(val)
    except Exception:
        return object.__repr__(val)


def _render(formatter: Callable[[Any], str], val: Any) -> str:
    """Apply ``formatter``, falling back to ``!Type(repr)`` when it fails."""
    try:
        return formatter(val)
    except Exception:
        return f"!{type(val).__name__}({_safe_repr(val)})"


def _format_int(val: int) -> str:
    return str(int(val))


def _format_int64(val: int) -> str:
    return str((int(val) + _INT64_MIN) % _INT64_SPAN - _INT64_MIN)


def _format_uint64(val: int) -> str:
    return str(int(val) % _INT64_SPAN)


def _format_args(format: str, args: Tuple[Any, ...]) -> str:
    try:
        return format % args
    except Exception as exc:
        rendered = " ".join(_render(repr, arg) for arg in args)
        return f"{format} %!({type(exc).__name__} {rendered})"


class StdMessage:
    """Accumulate fields and write them once.

    A message belongs to the caller that created it. Sharing one instance
    between threads is a misuse and is not guarded.
    """

    def __init__(self, writer: LineWriter, level: Level, active: bool) -> None:
        self._writer = writer
        self._level = level
        self._active = active
        self._parts: List[str] = []

    @property
    def active(self) -> bool:
        return self._active

    @property
    def level(self) -> Level:
        return self._level

    def _field(self, key: str, formatter: Callable[[Any], str], val: Any) -> StdMessage:
        if self._active:
            self._parts.append(f" {key}: {_render(formatter, val)}")
        return self

    def err(self, error: BaseException | None) -> StdMessage:
        if self._active:
            self._parts.append(f" error: {_render(str, error)}")
        return self

    def boolean(self, key: str, val: bool) -> StdMessage:
        return self._field(key, _format_bool, val)

    def dur(self, key: str, val: timedelta | float) -> StdMessage:
        return self._field(key, _format_duration, val)

    def integer(self, key: str, val: int) -> StdMessage:
        return self._field(key, _format_int, val)

    def int64(self, key: str, val: int) -> StdMessage:
        return self._field(key, _format_int64, val)

    def uint64(self, key: str, val: int) -> StdMessage:
        return self._field(key, _format_uint64, val)

    def string(self, key: str, val: str) -> StdMessage:
        return self._field(key, str, val)

    def timestamp(self, key: str, val: datetime) -> StdMessage:
        return self._field(key, _format_time, val)

    def msg(self, val: str) -> None:
        """Write the message with ``val`` as its text, at most once."""
        if not self._active:
            return
        try:
            word, err = translate_level(self._level)
            if err is not None:
                # Unreachable while StdLogger corrects invalid thresholds.
                self._writer.print(ERROR_WORD, f" log configuration error: {err}")
            self._parts.append(" ")
            self._parts.append(_render(str, val))
            self._writer.print(word, "".join(self._parts))
        finally:
            self._active = False

    def msgf(self, format: str, *args: Any) -> None:
        """Format ``args`` into ``format`` with ``%`` substitution, then ``msg``.

        A failed substitution never raises; the line carries the raw format
        and the arguments after a ``%!(<error> ...)`` marker.
        """
        if not self._active:
            return
        self.msg(_format_args(format, args) if args else format)
