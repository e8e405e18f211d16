"""Tests for the layout tables and the helpers that build them."""

from __future__ import annotations

import pytest

from layoutfix.core import ConfigurationError, transform_text
from layoutfix.core.maps import (
    ENG_TO_RUS,
    ENG_TO_UKR,
    RUS_TO_ENG,
    RUS_TO_UKR,
    UKR_TO_ENG,
    UKR_TO_RUS,
)
from layoutfix.core.registry import DEFAULT_REGISTRY
from layoutfix.core.tables import compose_tables, invert_table

QWERTY_LETTERS = "qwertyuiopasdfghjklzxcvbnm"


class TestInvertTable:
    def test_inverts(self):
        assert invert_table({"a": "b", "c": "d"}) == {"b": "a", "d": "c"}

    def test_refuses_duplicate_values(self):
        with pytest.raises(ConfigurationError, match="both map to"):
            invert_table({"a": "x", "b": "x"})


class TestComposeTables:
    def test_chains_through_middle(self):
        assert compose_tables({"a": "b"}, {"b": "c"}) == {"a": "c"}

    def test_unknown_middle_kept(self):
        assert compose_tables({"a": "b"}, {}) == {"a": "b"}

    def test_identity_entries_dropped(self):
        assert compose_tables({"a": "b"}, {"b": "a"}) == {}


class TestCoverage:
    @pytest.mark.parametrize("table", [ENG_TO_UKR, ENG_TO_RUS], ids=["ukr", "rus"])
    def test_all_letter_keys_mapped(self, table):
        for ch in QWERTY_LETTERS:
            assert ch in table, f"Missing mapping for: {ch}"
            assert ch.upper() in table, f"Missing mapping for: {ch.upper()}"

    def test_ukrainian_specific_letters(self):
        assert ENG_TO_UKR["s"] == "і"
        assert ENG_TO_UKR["]"] == "ї"
        assert ENG_TO_UKR["'"] == "є"
        assert ENG_TO_UKR["\\"] == "ґ"
        assert ENG_TO_UKR["|"] == "Ґ"

    def test_russian_specific_letters(self):
        assert ENG_TO_RUS["s"] == "ы"
        assert ENG_TO_RUS["]"] == "ъ"
        assert ENG_TO_RUS["`"] == "ё"

    def test_digits_not_mapped(self):
        for table in (ENG_TO_UKR, ENG_TO_RUS, UKR_TO_ENG, RUS_TO_ENG):
            assert not any(ch.isdigit() for ch in table)

    def test_cyrillic_pair_uses_shared_positions(self):
        assert UKR_TO_RUS["і"] == "ы"
        assert UKR_TO_RUS["ї"] == "ъ"
        assert "й" not in UKR_TO_RUS  # same letter on the same key


class TestReverseTables:
    @pytest.mark.parametrize("forward, backward", [
        (ENG_TO_UKR, UKR_TO_ENG),
        (ENG_TO_RUS, RUS_TO_ENG),
        (UKR_TO_RUS, RUS_TO_UKR),
    ], ids=["eng-ukr", "eng-rus", "ukr-rus"])
    def test_literal_inverse(self, forward, backward):
        assert len(forward) == len(backward)
        for key, value in forward.items():
            assert backward[value] == key

    @pytest.mark.parametrize("pair", DEFAULT_REGISTRY.pairs(), ids=lambda p: f"{p[0]}-{p[1]}")
    def test_round_trip_over_table_keys(self, pair):
        src, dst = pair
        text = "".join(DEFAULT_REGISTRY.table(src, dst))
        converted = transform_text(text, src, dst)
        assert transform_text(converted, dst, src) == text
