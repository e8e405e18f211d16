"""Registry of layout tables keyed by ordered language pair."""

from __future__ import annotations

import itertools
import logging
from types import MappingProxyType
from typing import Iterable, Mapping

import layoutfix.log  # noqa: F401  registers the TRACE level
from layoutfix.core import maps
from layoutfix.core.errors import ConfigurationError
from layoutfix.core.languages import Language

logger = logging.getLogger(__name__)

Pair = tuple[Language, Language]


class LayoutRegistry:
    """Read-only after construction; lookups are safe from any thread."""

    def __init__(self) -> None:
        self._tables: dict[Pair, Mapping[str, str]] = {}

    def register(self, lang_from: Language | str, lang_to: Language | str,
                 table: Mapping[str, str]) -> None:
        """Store a frozen copy of *table* for the ordered pair."""
        src = Language.parse(lang_from)
        dst = Language.parse(lang_to)
        if src == dst:
            raise ConfigurationError(f"Refusing to register a table from {src} to itself")
        if (src, dst) in self._tables:
            raise ConfigurationError(f"Table {src}->{dst} is already registered")

        for key, value in table.items():
            if len(key) != 1 or len(value) != 1:
                raise ConfigurationError(
                    f"Table {src}->{dst} has a non single-character entry: {key!r} -> {value!r}"
                )

        self._tables[(src, dst)] = MappingProxyType(dict(table))
        logger.trace("Registered layout table %s->%s (%d keys)", src, dst, len(table))

    def table(self, lang_from: Language | str, lang_to: Language | str) -> Mapping[str, str]:
        src = Language.parse(lang_from)
        dst = Language.parse(lang_to)
        try:
            return self._tables[(src, dst)]
        except KeyError:
            raise ConfigurationError(f"No layout table registered for {src}->{dst}") from None

    def supports(self, lang_from: Language | str, lang_to: Language | str) -> bool:
        try:
            self.table(lang_from, lang_to)
        except ConfigurationError:
            return False
        return True

    def pairs(self) -> list[Pair]:
        return sorted(self._tables, key=lambda pair: (pair[0].value, pair[1].value))

    def missing_pairs(self, languages: Iterable[Language] = Language) -> list[Pair]:
        """Ordered pairs of distinct *languages* that have no table."""
        return [
            pair for pair in itertools.permutations(languages, 2)
            if pair not in self._tables
        ]

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, pair: object) -> bool:
        return pair in self._tables


def build_default_registry() -> LayoutRegistry:
    registry = LayoutRegistry()
    registry.register(Language.ENG, Language.UKR, maps.ENG_TO_UKR)
    registry.register(Language.UKR, Language.ENG, maps.UKR_TO_ENG)
    registry.register(Language.ENG, Language.RUS, maps.ENG_TO_RUS)
    registry.register(Language.RUS, Language.ENG, maps.RUS_TO_ENG)
    registry.register(Language.UKR, Language.RUS, maps.UKR_TO_RUS)
    registry.register(Language.RUS, Language.UKR, maps.RUS_TO_UKR)
    return registry


DEFAULT_REGISTRY: LayoutRegistry = build_default_registry()
