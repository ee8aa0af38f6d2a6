# Argsift Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argsift.

Configuration problems (conflicting mode bits, malformed input vectors) are
raised immediately. Lookup problems (a missing value or a value that cannot be
converted) are never raised by the accessors; they are carried inside a
`Result` and only raised when the caller asks for it via `Result.unwrap()`.

All exceptions inherit from `ArgsiftError`.

Exception Hierarchy:
- ArgsiftError
    ├── ConfigurationError
    │   └── ModeConflictError
    ├── EmptyTokenError
    └── LookupFailure
        ├── MissingValueError
        └── ConversionError
"""
from __future__ import annotations

from typing import Any


class ArgsiftError(Exception):
    """Base exception for Argsift."""


class ConfigurationError(ArgsiftError):
    """Exception raised when the parser is configured inconsistently."""


class ModeConflictError(ConfigurationError):
    """Exception raised when mutually exclusive mode bits are both set."""


class EmptyTokenError(ArgsiftError):
    """Exception raised when the input vector contains an empty token."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Empty token at position {index} cannot be classified")


class LookupFailure(ArgsiftError):
    """Base class for failed accessor lookups. Compares by type and message."""

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class MissingValueError(LookupFailure):
    """Raised by `Result.unwrap()` when the requested value was never recorded."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"No value recorded for {key!r}")


class ConversionError(LookupFailure):
    """Raised by `Result.unwrap()` when a recorded value could not be converted."""

    def __init__(self, text: str, target_type: Any, reason: str = ""):
        self.text = text
        self.target_type = target_type
        type_name = getattr(target_type, "__name__", str(target_type))
        message = f"Value {text!r} could not be converted to {type_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
