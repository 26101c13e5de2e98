"""Generic logging shim facade."""

from logshim.default import get_logger, install_logger
from logshim.interface import Logger, Message, NopLogger, NopMessage
from logshim.level import Level

__all__ = [
    "Level",
    "Logger",
    "Message",
    "NopLogger",
    "NopMessage",
    "get_logger",
    "install_logger",
]
