from datetime import datetime
from enum import Enum
from typing import Optional

import pytest

from argsift.exceptions import ConversionError, MissingValueError
from argsift.parser import MISSING, TokenParser, parse


class Level(Enum):
    LOW = 1
    HIGH = 2


@pytest.fixture
def parser() -> TokenParser:
    return parse(
        ["build", "7", "-v", "--jobs", "4", "--ratio=0.25", "--name", "abc"],
        params=["jobs", "name"],
    )


def test_flag_single_and_aliases(parser):
    assert parser.flag("v")
    assert parser.flag("--v")
    assert parser.flag(["verbose", "v"])
    assert not parser.flag(["quiet", "q"])
    assert parser["v"] is True
    assert parser[["verbose", "v"]] is True
    assert parser["q"] is False


def test_positional_index(parser):
    assert parser[0] == "build"
    assert parser[1] == "7"
    assert parser[5] == ""
    assert parser.positional(1, type=int).unwrap() == 7


def test_positional_missing(parser):
    result = parser.positional(9)
    assert not result
    assert result.is_missing
    assert result.text is None
    with pytest.raises(MissingValueError):
        result.unwrap()
    assert parser.positional(-1).is_missing


def test_positional_default_round_trip(parser):
    result = parser.positional(9, default=3.5)
    assert result.ok
    assert result.value == 3.5
    assert result.text == "3.5"


def test_param_lookup(parser):
    assert parser.param("jobs").unwrap() == "4"
    assert parser.param("--jobs", type=int).unwrap() == 4
    assert parser.param("ratio", type=float).unwrap() == 0.25
    assert parser.has_param(["j", "jobs"])
    assert not parser.has_param("missing")


def test_param_first_matching_alias_wins(parser):
    assert parser.param(["n", "name", "jobs"]).unwrap() == "abc"
    assert parser.param(["jobs", "name"]).unwrap() == "4"


def test_param_missing_and_default(parser):
    result = parser.param(["lvl", "level"])
    assert result.is_missing
    assert result.unwrap_or("none") == "none"

    assert parser.param("level", default=2).unwrap() == 2
    assert parser.param("level", default=True).unwrap() is True
    assert parser.param("level", default=Level.HIGH).unwrap() is Level.HIGH
    assert parser.param("level", default="x").unwrap() == "x"


def test_present_value_ignores_default(parser):
    assert parser.param("jobs", default=1).unwrap() == 4


def test_conversion_failure_is_not_raised(parser):
    result = parser.param("name", type=int)
    assert not result
    assert result.is_conversion_error
    assert result.text == "abc"
    with pytest.raises(ConversionError) as excinfo:
        result.unwrap()
    assert excinfo.value.text == "abc"
    assert excinfo.value.target_type is int


def test_default_converted_with_explicit_type(parser):
    result = parser.param("timeout", default="2.5", type=float)
    assert result.unwrap() == 2.5
    assert parser.param("when", default=datetime(2024, 1, 2, 3, 4)).unwrap() == datetime(
        2024, 1, 2, 3, 4
    )


def test_repeated_queries_identical(parser):
    assert parser.param("jobs", type=int) == parser.param("jobs", type=int)
    assert parser.param("nope") == parser.param("nope")
    assert parser.param("name", type=int) == parser.param("name", type=int)
    assert parser.positional(0) == parser.positional(0)
    assert parser.flag("v") == parser.flag("v")


def test_containers_are_read_only(parser):
    with pytest.raises(TypeError):
        parser.params["jobs"] = "9"  # type: ignore[index]
    flags = parser.flags
    flags["v"] += 10
    assert parser.flags["v"] == 1


def test_missing_sentinel():
    assert not MISSING
    assert repr(MISSING) == "MISSING"


def test_none_default_returned_as_is(parser):
    result = parser.param("level", default=None)
    assert result.ok
    assert result.value is None
    assert result.text is None
    assert parser.param("level", default=None, type=Optional[int]).unwrap() is None
    assert parser.positional(9, default=None).unwrap() is None
    assert parser.param("jobs", default=None, type=Optional[int]).unwrap() == 4
