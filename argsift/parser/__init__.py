"""
Argsift Token Classifier

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .parser_types import MISSING, Result
from .registry import Registry
from .token_parser import TokenParser, parse
from .tokens import is_number, is_option, strip_option_prefix
from .utils import coerce_value, format_value, parse_value

__all__ = [
    "MISSING",
    "Registry",
    "Result",
    "TokenParser",
    "coerce_value",
    "format_value",
    "is_number",
    "is_option",
    "parse",
    "parse_value",
    "strip_option_prefix",
]
