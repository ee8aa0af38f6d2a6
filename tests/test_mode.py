import pytest

from argsift.exceptions import ConfigurationError, ModeConflictError
from argsift.mode import DEFAULT_MODE, ParseMode, validate_mode


def test_default_mode():
    assert DEFAULT_MODE is ParseMode.PREFER_FLAG
    assert int(ParseMode.PREFER_FLAG) == 1
    assert int(ParseMode.SINGLE_DASH_MULTIFLAG) == 8


@pytest.mark.parametrize(
    "value, expected",
    [
        ("param", ParseMode.PREFER_PARAM),
        ("PREFER_FLAG", ParseMode.PREFER_FLAG),
        ("no-split", ParseMode.NO_SPLIT_ON_EQUALS),
        ("param|multiflag", ParseMode.PREFER_PARAM | ParseMode.SINGLE_DASH_MULTIFLAG),
        ("flag, no_equals", ParseMode.PREFER_FLAG | ParseMode.NO_SPLIT_ON_EQUALS),
        (5, ParseMode.PREFER_FLAG | ParseMode.NO_SPLIT_ON_EQUALS),
        (0, ParseMode(0)),
        (ParseMode.PREFER_PARAM, ParseMode.PREFER_PARAM),
    ],
)
def test_coerce(value, expected):
    assert ParseMode.coerce(value) == expected


@pytest.mark.parametrize("value", ["bogus", "", 16, -1, True, 1.5, None])
def test_coerce_invalid(value):
    with pytest.raises(ValueError):
        ParseMode.coerce(value)


def test_validate_mode_conflict():
    with pytest.raises(ModeConflictError):
        validate_mode(ParseMode.PREFER_FLAG | ParseMode.PREFER_PARAM)
    with pytest.raises(ConfigurationError):
        validate_mode("flag|param")
    with pytest.raises(ModeConflictError):
        validate_mode(3)


def test_validate_mode_passes_through():
    mode = ParseMode.PREFER_PARAM | ParseMode.NO_SPLIT_ON_EQUALS
    assert validate_mode(mode) == mode
    assert validate_mode(0) == ParseMode(0)


def test_str():
    assert str(ParseMode.PREFER_PARAM | ParseMode.SINGLE_DASH_MULTIFLAG) == (
        "prefer_param|single_dash_multiflag"
    )
    assert str(ParseMode(0)) == "none"
