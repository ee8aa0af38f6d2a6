# Argsift Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value conversion utilities for the Argsift accessor layer.

Accessors hand back strings. This module turns those strings into typed values
and turns typed default values back into strings, so that a caller-supplied
default goes through exactly the same conversion as a value read from the
command line.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string or raw value to an Enum instance.
- coerce_value: General-purpose coercion to a target type (unions, enums, etc.).
- parse_value: `coerce_value` that reports failure through a `Result`.
- format_value: Symmetric formatter used for default values.
"""
import types
from datetime import date, datetime
from enum import Enum, EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

from argsift.exceptions import ConversionError
from argsift.logger import logger
from argsift.parser.parser_types import Result

TRUE_STRINGS = frozenset({"true", "t", "1", "yes", "y", "on"})
FALSE_STRINGS = frozenset({"false", "f", "0", "no", "n", "off"})


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts 'true', 'yes', 'on', '1' and their negatives, case insensitive.

    Raises:
        ValueError: If the string is not a recognised boolean spelling.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUE_STRINGS:
        return True
    elif normalized in FALSE_STRINGS:
        return False
    raise ValueError(f"'{value}' is not a boolean")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Convert a raw value or string to an Enum instance.

    Tries to resolve by name, then by value, then by the members' base type.

    Raises:
        ValueError: If the value cannot be resolved to a valid Enum member.
    """
    if isinstance(value, enum_type):
        return value

    if isinstance(value, str):
        try:
            return enum_type[value]
        except KeyError:
            pass

    base_type = type(next(iter(enum_type)).value)
    try:
        coerced_value = base_type(value)
        return enum_type(coerced_value)
    except (ValueError, TypeError):
        values = [str(enum.value) for enum in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(values)}}}") from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Attempt to convert a string to the given target type.

    Handles typing constructs such as Union, Literal, Enum, and datetime.
    Any other type is called with the string as its only argument.

    Raises:
        ValueError: If conversion fails or the value is invalid.
        TypeError: If the target type cannot be called with a string.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        if value not in args:
            raise ValueError(
                f"Value '{value}' is not a valid literal for type {target_type}"
            )
        return value

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            if arg is type(None):
                continue
            try:
                return coerce_value(value, arg)
            except (ValueError, TypeError):
                continue
        raise ValueError(f"Value '{value}' could not be coerced to any of {args}")

    if target_type is str:
        return value

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"Value '{value}' could not be parsed as a datetime") from error

    if target_type is date:
        try:
            return date_parser.parse(value).date()
        except (ValueError, OverflowError) as error:
            raise ValueError(f"Value '{value}' could not be parsed as a date") from error

    return target_type(value)


def parse_value(text: str, target_type: Any = str) -> Result[Any]:
    """
    Convert `text` to `target_type`, reporting failure through a `Result`.

    Returns:
        Result: The converted value, or a `ConversionError` carrying `text`.
    """
    try:
        value = coerce_value(text, target_type)
    except (ValueError, TypeError) as error:
        logger.debug("Conversion of %r to %s failed: %s", text, target_type, error)
        return Result.failure(ConversionError(text, target_type, str(error)), text=text)
    return Result.success(value, text)


def format_value(value: Any) -> str:
    """
    Format a typed value as the string `parse_value` would read it back from.

    Floats keep full round-trip precision, booleans become 'true'/'false',
    enum members their name and dates their ISO form.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)
