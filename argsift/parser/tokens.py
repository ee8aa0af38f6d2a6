# Argsift Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token-level predicates shared by the registry and the classifier.

- `is_number`: Whether a token is a signed decimal literal such as `-3.14`.
- `is_option`: Whether a token starts with an option marker (`-` or `/`)
  and is not a number.
- `strip_option_prefix`: Canonical option name of a token.
"""
import re

OPTION_MARKERS = ("-", "/")

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def is_number(token: str) -> bool:
    """Return True if the whole token is a decimal literal, sign included."""
    return _NUMBER_RE.fullmatch(token) is not None


def is_option(token: str) -> bool:
    """
    Return True if the token names an option.

    Numeric detection wins over dash detection, so `-3.14` is never an option.
    """
    if not token:
        raise ValueError("Cannot classify an empty token")
    if is_number(token):
        return False
    return token.startswith(OPTION_MARKERS)


def strip_option_prefix(name: str) -> str:
    """
    Strip leading option markers from a name.

    Dashes are stripped first. If the name had no leading dash, or consisted
    only of dashes, leading slashes are stripped instead. If that leaves
    nothing, the name is returned unchanged, so `-` and `--` map to themselves.
    Mixed prefixes are stripped until the name stops changing, so `-/x` and
    `/-x` both become `x` and stripping an already stripped name is a no-op.
    """
    while True:
        stripped = _strip_once(name)
        if stripped == name:
            return stripped
        name = stripped


def _strip_once(name: str) -> str:
    stripped = name.lstrip("-")
    if stripped and stripped != name:
        return stripped
    stripped = name.lstrip("/")
    return stripped or name
