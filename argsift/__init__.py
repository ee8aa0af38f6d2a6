"""
Argsift Token Classifier

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ArgsiftError,
    ConfigurationError,
    ConversionError,
    EmptyTokenError,
    MissingValueError,
    ModeConflictError,
)
from .mode import ParseMode, validate_mode
from .parser import MISSING, Registry, Result, TokenParser, parse

logger = logging.getLogger("argsift")

__version__ = "0.1.0"

__all__ = [
    "ArgsiftError",
    "ConfigurationError",
    "ConversionError",
    "EmptyTokenError",
    "MISSING",
    "MissingValueError",
    "ModeConflictError",
    "ParseMode",
    "Registry",
    "Result",
    "TokenParser",
    "parse",
    "validate_mode",
]
