# Argsift Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result types for the Argsift accessor layer.

Accessors never raise for a missing or unconvertible value. Instead they return
a `Result` holding either the converted value or the `LookupFailure` that
explains why there is none:

- `MissingValueError`: the positional index or parameter name was never recorded.
- `ConversionError`: the text was recorded but could not be converted.

Contents:
- `MISSING`: Sentinel for "no default supplied".
- `Result`: Value-or-error container with `unwrap()` / `unwrap_or()` helpers.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from argsift.exceptions import ConversionError, LookupFailure, MissingValueError

T = TypeVar("T")


class _Missing:
    """Sentinel type for an omitted default."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of an accessor lookup.

    Attributes:
        value: The converted value, or None when the lookup failed.
        text: The string the value was converted from, or None when absent.
        error: The failure, or None on success.
    """

    value: T | None = None
    text: str | None = None
    error: LookupFailure | None = None

    @classmethod
    def success(cls, value: T, text: str) -> Result[T]:
        return cls(value=value, text=text)

    @classmethod
    def missing(cls, key: Any) -> Result[Any]:
        return cls(error=MissingValueError(key))

    @classmethod
    def failure(cls, error: LookupFailure, text: str | None = None) -> Result[Any]:
        return cls(text=text, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_missing(self) -> bool:
        return isinstance(self.error, MissingValueError)

    @property
    def is_conversion_error(self) -> bool:
        return isinstance(self.error, ConversionError)

    def unwrap(self) -> T:
        """Return the value, raising the stored error if the lookup failed."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: Any) -> Any:
        """Return the value, or `default` if the lookup failed."""
        if self.error is not None:
            return default
        return self.value

    def __bool__(self) -> bool:
        return self.ok
