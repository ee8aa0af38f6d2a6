# Argsift Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseMode`, the bitmask that tunes how `TokenParser` classifies tokens.

Members can be combined with `|`. `PREFER_FLAG` and `PREFER_PARAM` are mutually
exclusive; `validate_mode()` rejects masks that set both.

Supports coercion from config-friendly strings:

Example:
    ParseMode.coerce("param")              → ParseMode.PREFER_PARAM
    ParseMode.coerce("param|multiflag")    → PREFER_PARAM | SINGLE_DASH_MULTIFLAG
    ParseMode.coerce(5)                    → PREFER_FLAG | NO_SPLIT_ON_EQUALS
"""
from __future__ import annotations

import re
from enum import IntFlag

from argsift.exceptions import ModeConflictError


class ParseMode(IntFlag):
    """
    Classification modes for `TokenParser.parse()`.

    Members:
        PREFER_FLAG: An unregistered option followed by a value token is a flag,
            the value token becomes a positional argument (default).
        PREFER_PARAM: An unregistered option followed by a value token is a
            parameter taking that token as its value.
        NO_SPLIT_ON_EQUALS: Do not split `--name=value` into a parameter.
        SINGLE_DASH_MULTIFLAG: Expand `-abc` into the flags `a`, `b` and `c`.

    Aliases:
        - "flag" → "prefer_flag"
        - "param" → "prefer_param"
        - "no_split" / "no_equals" → "no_split_on_equals"
        - "multiflag" → "single_dash_multiflag"
    """

    PREFER_FLAG = 1 << 0
    PREFER_PARAM = 1 << 1
    NO_SPLIT_ON_EQUALS = 1 << 2
    SINGLE_DASH_MULTIFLAG = 1 << 3

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "flag": "prefer_flag",
            "param": "prefer_param",
            "no_split": "no_split_on_equals",
            "no_equals": "no_split_on_equals",
            "multiflag": "single_dash_multiflag",
        }
        return aliases.get(value, value)

    @classmethod
    def from_name(cls, name: str) -> ParseMode:
        """Resolve a single member name or alias, case and dash insensitive."""
        normalized = name.strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.name.lower() == alias:
                return member
        valid = ", ".join(member.name.lower() for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{name}'. Must be one of: {valid}")

    @classmethod
    def coerce(cls, value: ParseMode | int | str) -> ParseMode:
        """
        Convert an int mask, a member, or a string of names into a `ParseMode`.

        String input may join several names with `|`, `,` or whitespace.

        Raises:
            ValueError: If a name is unknown or the mask has undefined bits.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        if isinstance(value, int):
            known = 0
            for member in cls:
                known |= member.value
            if value < 0 or value & ~known:
                raise ValueError(f"Invalid {cls.__name__} mask: {value}")
            return cls(value)
        if isinstance(value, str):
            names = [part for part in re.split(r"[|,\s]+", value) if part]
            if not names:
                raise ValueError(f"Invalid {cls.__name__}: '{value}'")
            mode = cls(0)
            for name in names:
                mode |= cls.from_name(name)
            return mode
        raise ValueError(f"Invalid {cls.__name__}: {value!r}")

    def __str__(self) -> str:
        names = [member.name.lower() for member in type(self) if member in self]
        return "|".join(names) or "none"


DEFAULT_MODE = ParseMode.PREFER_FLAG


def validate_mode(mode: ParseMode | int | str) -> ParseMode:
    """
    Coerce and validate a mode mask before classification starts.

    Raises:
        ModeConflictError: If both PREFER_FLAG and PREFER_PARAM are set.
        ValueError: If the mask cannot be coerced.
    """
    mode = ParseMode.coerce(mode)
    if ParseMode.PREFER_FLAG in mode and ParseMode.PREFER_PARAM in mode:
        raise ModeConflictError(
            "PREFER_FLAG and PREFER_PARAM are mutually exclusive; set at most one"
        )
    return mode
