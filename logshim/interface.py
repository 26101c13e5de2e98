"""Backend-agnostic logging contract.

A backend provides a ``Logger`` that hands out one ``Message`` per log
statement. Fields are chained onto the message and a single ``msg`` or
``msgf`` call commits it.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Protocol


class Message(Protocol):
    def err(self, error: BaseException | None) -> Message: ...
    def boolean(self, key: str, val: bool) -> Message: ...
    def dur(self, key: str, val: timedelta | float) -> Message: ...
    def integer(self, key: str, val: int) -> Message: ...
    def int64(self, key: str, val: int) -> Message: ...
    def uint64(self, key: str, val: int) -> Message: ...
    def string(self, key: str, val: str) -> Message: ...
    def timestamp(self, key: str, val: datetime) -> Message: ...
    def msg(self, val: str) -> None: ...
    def msgf(self, format: str, *args: Any) -> None: ...


class Logger(Protocol):
    @property
    def name(self) -> str: ...
    def err(self, error: BaseException | None) -> Message: ...
    def error(self) -> Message: ...
    def warn(self) -> Message: ...
    def notice(self) -> Message: ...
    def info(self) -> Message: ...
    def debug(self) -> Message: ...


class NopMessage:
    """Message that discards everything."""

    def err(self, error: BaseException | None) -> NopMessage:
        return self

    def boolean(self, key: str, val: bool) -> NopMessage:
        return self

    def dur(self, key: str, val: timedelta | float) -> NopMessage:
        return self

    def integer(self, key: str, val: int) -> NopMessage:
        return self

    def int64(self, key: str, val: int) -> NopMessage:
        return self

    def uint64(self, key: str, val: int) -> NopMessage:
        return self

    def string(self, key: str, val: str) -> NopMessage:
        return self

    def timestamp(self, key: str, val: datetime) -> NopMessage:
        return self

    def msg(self, val: str) -> None:
        pass

    def msgf(self, format: str, *args: Any) -> None:
        pass


_NOP_MESSAGE = NopMessage()


class NopLogger:
    """Logger used until a real backend is installed."""

    @property
    def name(self) -> str:
        return "NopLog"

    def err(self, error: BaseException | None) -> NopMessage:
        return _NOP_MESSAGE

    def error(self) -> NopMessage:
        return _NOP_MESSAGE

    def warn(self) -> NopMessage:
        return _NOP_MESSAGE

    def notice(self) -> NopMessage:
        return _NOP_MESSAGE

    def info(self) -> NopMessage:
        return _NOP_MESSAGE

    def debug(self) -> NopMessage:
        return _NOP_MESSAGE
