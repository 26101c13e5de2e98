import pytest

from dlog import InvalidLevelError, parse_level, translate_level
from logshim import Level


@pytest.mark.parametrize(
    "level, word",
    [
        (Level.ERROR, "ERROR"),
        (Level.WARN, "WARN"),
        (Level.NOTICE, "INFO"),
        (Level.INFO, "INFO"),
        (Level.DEBUG, "DEBUG"),
    ],
)
def test_translate_level_maps_valid_levels(level: Level, word: str) -> None:
    assert translate_level(level) == (word, None)


def test_translate_level_accepts_plain_ints() -> None:
    assert translate_level(40) == ("ERROR", None)


@pytest.mark.parametrize("value", [99, -1, 0, "WARN", None, 3.5])
def test_translate_level_falls_back_to_warn(value) -> None:
    word, err = translate_level(value)
    assert word == "WARN"
    assert isinstance(err, InvalidLevelError)
    assert isinstance(err, ValueError)
    assert err.value == value
    assert "defaulting to WARN" in str(err)


def test_levels_are_ordered_by_severity() -> None:
    assert Level.DEBUG < Level.INFO < Level.NOTICE < Level.WARN < Level.ERROR
    assert Level.WARN.admits(Level.ERROR)
    assert Level.WARN.admits(Level.WARN)
    assert not Level.WARN.admits(Level.INFO)


def test_parse_level_reads_names_and_numbers() -> None:
    assert parse_level("warn") is Level.WARN
    assert parse_level(" Warning ") is Level.WARN
    assert parse_level("notice") is Level.NOTICE
    assert parse_level("10") is Level.DEBUG
    assert parse_level(40) is Level.ERROR
    assert parse_level(Level.INFO) is Level.INFO


def test_parse_level_returns_unknown_input_unchanged() -> None:
    assert parse_level("loud") == "loud"
    assert parse_level(99) == 99
