"""Exceptions raised by the layout transform engine."""

from __future__ import annotations


class ConfigurationError(Exception):
    """A language tag or layout pair has no registered table.

    Raised for build-time inconsistencies between the supported languages
    and the registered tables, never for the text being converted.
    """
