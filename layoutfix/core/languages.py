"""Supported keyboard layouts."""

from __future__ import annotations

from enum import Enum

from layoutfix.core.errors import ConfigurationError


class Language(str, Enum):
    """Tag of a supported keyboard layout.

    New layouts are added here and get their tables registered in
    :mod:`layoutfix.core.registry`; the converter itself never changes.
    """

    ENG = "eng"
    UKR = "ukr"
    RUS = "rus"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, tag: Language | str) -> Language:
        """Return the member for *tag*, raising ConfigurationError if unknown."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(str(tag).strip().lower())
        except ValueError:
            known = ", ".join(lang.value for lang in cls)
            raise ConfigurationError(
                f"Unknown language tag {tag!r} (supported: {known})"
            ) from None

    def __str__(self) -> str:
        return self.value


_DISPLAY_NAMES: dict[Language, str] = {
    Language.ENG: "🇬🇧 English",
    Language.UKR: "🇺🇦 Ukrainian",
    Language.RUS: "🇷🇺 Russian",
}
