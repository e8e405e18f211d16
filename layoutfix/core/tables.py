"""Helpers for building layout tables from one another."""

from __future__ import annotations

from typing import Mapping

from layoutfix.core.errors import ConfigurationError


def invert_table(table: Mapping[str, str]) -> dict[str, str]:
    """Return the reverse of *table*.

    Raises ConfigurationError when two keys share a value, because the
    reverse direction would then be ambiguous.
    """
    inverted: dict[str, str] = {}
    for key, value in table.items():
        if value in inverted:
            raise ConfigurationError(
                f"Cannot invert table: {inverted[value]!r} and {key!r} both map to {value!r}"
            )
        inverted[value] = key
    return inverted


def compose_tables(first: Mapping[str, str], second: Mapping[str, str]) -> dict[str, str]:
    """Chain two tables that share a middle layout.

    ``first`` maps A -> B and ``second`` maps B -> C. Characters of B that
    ``second`` does not know stay as they are (same key, same character).
    Entries that end up mapping a character to itself are dropped.
    """
    composed: dict[str, str] = {}
    for key, middle in first.items():
        target = second.get(middle, middle)
        if target != key:
            composed[key] = target
    return composed
