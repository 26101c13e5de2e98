"""Translation between shim levels and the words the line writer prints."""

from __future__ import annotations

from typing import Any, Tuple

from dlog.errors import InvalidLevelError
from logshim import Level


ERROR_WORD = "ERROR"
WARN_WORD = "WARN"
INFO_WORD = "INFO"
DEBUG_WORD = "DEBUG"

_WORDS = {
    Level.ERROR: ERROR_WORD,
    Level.WARN: WARN_WORD,
    Level.NOTICE: INFO_WORD,
    Level.INFO: INFO_WORD,
    Level.DEBUG: DEBUG_WORD,
}

_ALIASES = {"WARNING": "WARN", "ERR": "ERROR", "INFORMATION": "INFO"}


def translate_level(level: Any) -> Tuple[str, InvalidLevelError | None]:
    """Map a level to its backend word.

    Args:
        level: A ``Level`` or its integer value.

    Returns:
        The backend word and ``None``, or ``"WARN"`` and the error describing
        the rejected value.
    """
    try:
        return _WORDS[Level(level)], None
    except (TypeError, ValueError):
        return WARN_WORD, InvalidLevelError(level, fallback=WARN_WORD)


def parse_level(value: Any) -> Any:
    """Resolve a level name or number, returning unparseable input as given."""
    if isinstance(value, Level):
        return value
    if isinstance(value, str):
        text = value.strip().upper()
        if text.lstrip("-").isdigit():
            return parse_level(int(text))
        name = _ALIASES.get(text, text)
        return Level.__members__.get(name, value)
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Level(value)
        except ValueError:
            return value
    return value
