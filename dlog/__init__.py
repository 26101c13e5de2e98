"""Plain-text adapter for the logshim logging contract."""

from dlog.errors import DlogError, InvalidLevelError
from dlog.factory import DEFAULT_FLAGS, flags_from_names, from_config, new
from dlog.levels import parse_level, translate_level
from dlog.logger import StdLogger
from dlog.message import StdMessage
from dlog.writer import (
    DATE,
    LONGFILE,
    MICROSECONDS,
    SHORTFILE,
    STD_FLAGS,
    TIME,
    UTC,
    LineWriter,
)

__all__ = [
    "DATE",
    "DEFAULT_FLAGS",
    "DlogError",
    "InvalidLevelError",
    "LONGFILE",
    "LineWriter",
    "MICROSECONDS",
    "SHORTFILE",
    "STD_FLAGS",
    "StdLogger",
    "StdMessage",
    "TIME",
    "UTC",
    "flags_from_names",
    "from_config",
    "new",
    "parse_level",
    "translate_level",
]
