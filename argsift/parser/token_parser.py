# Argsift Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `TokenParser`, a heuristic command-line token classifier.

Unlike argparse, `TokenParser` does not need every option declared up front.
It takes the raw argument vector and splits it into three containers:

- positional arguments, in input order
- flags, a multiset of option names without values
- parameters, a name → value mapping (first occurrence wins)

Whether an option followed by a plain token is a flag or a parameter is decided
by lookahead, by the names registered as parameters, and by the `ParseMode` bits.

Public Interface:
- `add_param(...)` / `add_params(...)`: Pre-declare names as parameters.
- `parse(...)`: Classify a token vector.
- `flag(...)`, `flag_count(...)`: Boolean and counted flag lookups.
- `positional(...)`, `param(...)`: Typed lookups returning a `Result`.
- `positionals`, `flags`, `params`: Read-only views of the containers.

Example Usage:
    parser = TokenParser(params=["--out"])
    parser.parse(["build", "-v", "--out", "dist", "--jobs=4"])

    parser.positionals                       # ('build',)
    parser["v"]                              # True
    parser.param("out").unwrap()             # 'dist'
    parser.param(["j", "jobs"], type=int).unwrap()   # 4
    parser.param("level", default=2).unwrap()        # 2
"""
from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Sequence

from argsift.exceptions import EmptyTokenError
from argsift.logger import logger
from argsift.mode import DEFAULT_MODE, ParseMode, validate_mode
from argsift.parser.parser_types import MISSING, Result
from argsift.parser.registry import Registry
from argsift.parser.tokens import is_option, strip_option_prefix
from argsift.parser.utils import format_value, parse_value


def _as_names(names: str | Iterable[str]) -> tuple[str, ...]:
    if isinstance(names, str):
        return (names,)
    return tuple(names)


class TokenParser:
    """
    Classifies command-line tokens into positionals, flags and parameters.

    Features:
    - No up-front declaration of flags.
    - Optional registration of names that always take a value.
    - `--name=value` splitting (disable with `NO_SPLIT_ON_EQUALS`).
    - Negative numbers are always positional values, never options.
    - `-abc` expansion into single-character flags (`SINGLE_DASH_MULTIFLAG`).
    - `/name` options in addition to `-name` and `--name`.
    - Typed accessors with defaults that never raise on missing values.

    Each call to `parse()` starts from empty containers; registered names are kept.
    """

    def __init__(
        self,
        params: Iterable[str] | None = None,
        registry: Registry | None = None,
    ) -> None:
        self.registry: Registry = registry if registry is not None else Registry()
        if params:
            self.registry.register_many(params)
        self.mode: ParseMode = DEFAULT_MODE
        self._positionals: list[str] = []
        self._params: dict[str, str] = {}
        self._flags: Counter[str] = Counter()

    def add_param(self, name: str) -> None:
        """Register `name` as a parameter that always takes the next token."""
        self.registry.register(name)

    def add_params(self, names: Iterable[str]) -> None:
        """Register several parameter names."""
        self.registry.register_many(names)

    def _reset(self) -> None:
        self._positionals = []
        self._params = {}
        self._flags = Counter()

    def _insert_param(self, name: str, value: str) -> None:
        if name in self._params:
            logger.debug(
                "Ignoring repeated parameter '%s'=%r, keeping %r",
                name,
                value,
                self._params[name],
            )
            return
        self._params[name] = value

    def _expand_multiflag(self, name: str) -> str | None:
        """
        Record each character of a single-dash bundle as a flag.

        A trailing character that is a registered parameter is held back and
        returned so it can take the next token as its value.
        """
        held = None
        if name and self.registry.is_registered(name[-1]):
            held = name[-1]
            name = name[:-1]
        for char in name:
            self._flags[char] += 1
        return held

    def parse(
        self,
        tokens: Sequence[str],
        mode: ParseMode | int | str = DEFAULT_MODE,
    ) -> TokenParser:
        """
        Classify `tokens` into positionals, flags and parameters.

        Args:
            tokens (Sequence[str]): The argument vector. Whether the program name
                is included is up to the caller.
            mode (ParseMode | int | str): Classification mode bits.

        Returns:
            TokenParser: This parser, for chaining.

        Raises:
            ModeConflictError: If PREFER_FLAG and PREFER_PARAM are both set.
            EmptyTokenError: If any token is an empty string.
            TypeError: If any token is not a string.
        """
        mode = validate_mode(mode)
        if isinstance(tokens, str):
            raise TypeError("parse() expects a sequence of tokens, not a str")
        tokens = list(tokens)
        for index, token in enumerate(tokens):
            if not isinstance(token, str):
                raise TypeError(
                    f"Token at position {index} must be a str, got {type(token).__name__}"
                )
            if not token:
                raise EmptyTokenError(index)

        self._reset()
        self.mode = mode
        prefer_param = ParseMode.PREFER_PARAM in mode
        split_on_equals = ParseMode.NO_SPLIT_ON_EQUALS not in mode
        multiflag = ParseMode.SINGLE_DASH_MULTIFLAG in mode

        i = 0
        while i < len(tokens):
            token = tokens[i]
            if not is_option(token):
                self._positionals.append(token)
                i += 1
                continue

            name = strip_option_prefix(token)

            if split_on_equals and "=" in name:
                key, _, value = name.partition("=")
                self._insert_param(key, value)
                i += 1
                continue

            single_dash = len(token) - len(name) == 1 and token.startswith("-")
            if multiflag and single_dash and not self.registry.is_registered(name):
                held = self._expand_multiflag(name)
                if held is None:
                    i += 1
                    continue
                name = held

            # An option directly followed by another option, or at the end of
            # the vector, has no value to take.
            if i == len(tokens) - 1 or is_option(tokens[i + 1]):
                self._flags[name] += 1
                i += 1
                continue

            if self.registry.is_registered(name) or prefer_param:
                self._insert_param(name, tokens[i + 1])
                i += 2
            else:
                self._flags[name] += 1
                i += 1

        logger.debug(
            "Classified %d tokens (mode=%s): %d positional, %d flag, %d param",
            len(tokens),
            mode,
            len(self._positionals),
            sum(self._flags.values()),
            len(self._params),
        )
        return self

    @property
    def positionals(self) -> tuple[str, ...]:
        """Positional arguments in input order."""
        return tuple(self._positionals)

    @property
    def params(self) -> Mapping[str, str]:
        """Read-only view of the recorded parameters."""
        return MappingProxyType(self._params)

    @property
    def flags(self) -> Counter[str]:
        """Copy of the flag multiset, keyed by stripped name."""
        return Counter(self._flags)

    def flag(self, names: str | Iterable[str]) -> bool:
        """Return True if any of `names` was recorded as a flag."""
        return any(
            strip_option_prefix(name) in self._flags for name in _as_names(names)
        )

    def flag_count(self, names: str | Iterable[str]) -> int:
        """Return how many times any of `names` was recorded as a flag."""
        stripped = {strip_option_prefix(name) for name in _as_names(names)}
        return sum(self._flags[name] for name in stripped)

    def has_param(self, names: str | Iterable[str]) -> bool:
        """Return True if any of `names` was recorded as a parameter."""
        return any(strip_option_prefix(name) in self._params for name in _as_names(names))

    def _resolve(
        self,
        text: str | None,
        key: Any,
        default: Any,
        target_type: Any,
    ) -> Result[Any]:
        if target_type is None:
            target_type = str if default is MISSING else type(default)
        if text is None:
            if default is MISSING:
                return Result.missing(key)
            if default is None:
                return Result.success(None, None)
            text = format_value(default)
        return parse_value(text, target_type)

    def positional(
        self,
        index: int,
        default: Any = MISSING,
        type: Any = None,
    ) -> Result[Any]:
        """
        Look up a positional argument by index.

        Args:
            index (int): Zero-based position among the positional arguments.
            default (Any): Value used when the index is out of range. It is
                formatted to a string and converted like a recorded value.
            type (Any): Target type. Defaults to the type of `default`, else str.

        Returns:
            Result: The converted value, or a `MissingValueError` /
            `ConversionError` failure.
        """
        text = None
        if 0 <= index < len(self._positionals):
            text = self._positionals[index]
        return self._resolve(text, index, default, type)

    def param(
        self,
        names: str | Iterable[str],
        default: Any = MISSING,
        type: Any = None,
    ) -> Result[Any]:
        """
        Look up a parameter by name or by a list of aliases.

        The first alias that was recorded wins.

        Args:
            names (str | Iterable[str]): Name or aliases, with or without dashes.
            default (Any): Value used when no alias was recorded.
            type (Any): Target type. Defaults to the type of `default`, else str.

        Returns:
            Result: The converted value, or a `MissingValueError` /
            `ConversionError` failure.
        """
        aliases = _as_names(names)
        text = None
        for name in aliases:
            text = self._params.get(strip_option_prefix(name))
            if text is not None:
                break
        key = aliases[0] if len(aliases) == 1 else aliases
        return self._resolve(text, key, default, type)

    def __getitem__(self, key: int | str | Iterable[str]) -> Any:
        """
        `parser[0]` returns a positional or "", `parser["v"]` and
        `parser[["v", "verbose"]]` return flag membership.
        """
        if isinstance(key, bool):
            raise TypeError("TokenParser indices must be int, str or a list of str")
        if isinstance(key, int):
            if 0 <= key < len(self._positionals):
                return self._positionals[key]
            return ""
        return self.flag(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._positionals)

    def __len__(self) -> int:
        return len(self._positionals)

    def __str__(self) -> str:
        return (
            f"TokenParser(positionals={len(self._positionals)}, "
            f"flags={sum(self._flags.values())}, params={len(self._params)}, "
            f"registered={len(self.registry)})"
        )

    def __repr__(self) -> str:
        return str(self)


def parse(
    tokens: Sequence[str],
    mode: ParseMode | int | str = DEFAULT_MODE,
    params: Iterable[str] | None = None,
) -> TokenParser:
    """Create a `TokenParser`, register `params`, and classify `tokens`."""
    return TokenParser(params=params).parse(tokens, mode)
