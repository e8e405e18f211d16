"""Pure text conversion functions (no side effects, fully testable)."""

from __future__ import annotations

from layoutfix.core.languages import Language
from layoutfix.core.registry import DEFAULT_REGISTRY, LayoutRegistry


def transform_text(text: str, lang_from: Language | str, lang_to: Language | str,
                   registry: LayoutRegistry = DEFAULT_REGISTRY) -> str:
    """Rewrite *text* typed under ``lang_from`` into what ``lang_to`` would give.

    Every character is looked up on its own, case-sensitively, in the table
    for the ordered pair; characters the table does not know are copied
    unchanged, so the result always has the same length as *text*.

    Args:
        text:      Text typed with the wrong layout active.
        lang_from: Layout the keys were labelled for.
        lang_to:   Layout the user meant to type in.
        registry:  Table source, :data:`DEFAULT_REGISTRY` unless overridden.

    Raises:
        ConfigurationError: unknown tag, or no table for the pair.
    """
    src = Language.parse(lang_from)
    dst = Language.parse(lang_to)
    if src == dst:
        return text

    table = registry.table(src, dst)
    return "".join(table.get(ch, ch) for ch in text)
