"""Process-wide default logger slot."""

from __future__ import annotations

from logshim.interface import Logger, NopLogger


_LOGGER: Logger = NopLogger()


def install_logger(logger: Logger) -> Logger:
    """Install ``logger`` as the shared default and return it."""
    global _LOGGER
    _LOGGER = logger
    return logger


def get_logger() -> Logger:
    """Return the shared logger instance."""
    return _LOGGER
