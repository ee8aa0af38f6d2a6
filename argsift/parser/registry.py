# Argsift Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Registry`, the set of option names the caller declares as parameters.

A registered name always takes the following token as its value, regardless of
the `PREFER_FLAG` / `PREFER_PARAM` mode bits. Names are stored in their
stripped form, so `--out`, `-out` and `out` register the same entry.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from argsift.logger import logger
from argsift.parser.tokens import strip_option_prefix


class Registry:
    """Set of pre-declared parameter names."""

    def __init__(self, names: Iterable[str] | None = None) -> None:
        self._names: set[str] = set()
        if names:
            self.register_many(names)

    def register(self, name: str) -> None:
        """Register a single parameter name. Duplicates are a no-op."""
        stripped = strip_option_prefix(name)
        if stripped in self._names:
            return
        self._names.add(stripped)
        logger.debug("Registered parameter name '%s'", stripped)

    def register_many(self, names: Iterable[str]) -> None:
        if isinstance(names, str):
            raise TypeError("register_many() expects an iterable of names, not a str")
        for name in names:
            self.register(name)

    def is_registered(self, name: str) -> bool:
        return strip_option_prefix(name) in self._names

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"Registry({sorted(self._names)!r})"
