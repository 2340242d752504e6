"""Tests for the English grammar.

WHY: English is the reference grammar: capitalised words, no "and", no
hyphens, silent zero groups. These tests pin the exact text for the
numbers users most often check by eye and for the range boundaries.

HOW: Values are spelled through the session-scoped ``english`` fixture
and compared with full expected strings, trailing separator included.
"""

import random

import pytest

from number_speller.core.context import INT64_MAX, INT64_MIN, UINT64_MAX, SpellerContext, spell
from number_speller.grammars.english import build_english


class TestSmallNumbers:

    @pytest.mark.parametrize("value, expected", [
        (0, "Zero "),
        (1, "One "),
        (9, "Nine "),
        (10, "Ten "),
        (12, "Twelve "),
        (15, "Fifteen "),
        (19, "Nineteen "),
        (20, "Twenty "),
        (21, "Twenty One "),
        (90, "Ninety "),
        (99, "Ninety Nine "),
    ])
    def test_below_hundred(self, english, value, expected):
        assert spell(english, value) == expected

    @pytest.mark.parametrize("value, expected", [
        (100, "One Hundred "),
        (101, "One Hundred One "),
        (110, "One Hundred Ten "),
        (999, "Nine Hundred Ninety Nine "),
    ])
    def test_hundreds(self, english, value, expected):
        assert spell(english, value) == expected


class TestGroups:

    @pytest.mark.parametrize("value, expected", [
        (1000, "One Thousand "),
        (1010, "One Thousand Ten "),
        (1100, "One Thousand One Hundred "),
        (100000, "One Hundred Thousand "),
        (1000000, "One Million "),
        (1000001, "One Million One "),
        (2000000, "Two Million "),
        (1000000000, "One Billion "),
        (1234567, "One Million Two Hundred Thirty Four Thousand Five Hundred Sixty Seven "),
    ])
    def test_multipliers(self, english, value, expected):
        assert spell(english, value) == expected

    def test_zero_groups_are_silent(self, english):
        assert "Thousand" not in spell(english, 5000000)

    def test_largest_value(self, english):
        assert spell(english, INT64_MAX) == (
            "Nine Quintillion Two Hundred Twenty Three Quadrillion "
            "Three Hundred Seventy Two Trillion Thirty Six Billion "
            "Eight Hundred Fifty Four Million Seven Hundred Seventy Five Thousand "
            "Eight Hundred Seven "
        )

    def test_unsigned_maximum_magnitude(self, english):
        assert SpellerContext.from_magnitude(UINT64_MAX).evaluate(english) == (
            "Eighteen Quintillion Four Hundred Forty Six Quadrillion "
            "Seven Hundred Forty Four Trillion Seventy Three Billion "
            "Seven Hundred Nine Million Five Hundred Fifty One Thousand "
            "Six Hundred Fifteen "
        )


class TestNegativeNumbers:

    def test_minus_five(self, english):
        assert spell(english, -5) == "Minus Five "

    def test_minus_thousand(self, english):
        assert spell(english, -1000) == "Minus One Thousand "

    def test_smallest_value(self, english):
        assert spell(english, INT64_MIN) == (
            "Minus Nine Quintillion Two Hundred Twenty Three Quadrillion "
            "Three Hundred Seventy Two Trillion Thirty Six Billion "
            "Eight Hundred Fifty Four Million Seven Hundred Seventy Five Thousand "
            "Eight Hundred Eight "
        )

    def test_negative_zero_is_zero(self, english):
        assert spell(english, -0) == spell(english, 0)

    def test_negative_mirrors_positive(self, english):
        for value in (1, 21, 342, 1000001, INT64_MAX):
            assert spell(english, -value) == "Minus " + spell(english, value)


class TestInvariants:
    """Properties that hold for every value."""

    @pytest.fixture
    def sample(self):
        rng = random.Random(20240601)
        return [rng.randint(INT64_MIN, INT64_MAX) for _ in range(200)]

    def test_every_word_has_one_trailing_space(self, english, sample):
        for value in sample:
            text = spell(english, value)
            assert text.endswith(" ")
            assert "  " not in text
            assert not text.startswith(" ")

    def test_zero_only_for_zero(self, english, sample):
        for value in sample:
            if value != 0:
                assert "Zero" not in spell(english, value)

    def test_deterministic(self, english, sample):
        for value in sample:
            assert spell(english, value) == spell(english, value)

    def test_fresh_grammar_spells_the_same(self, english, sample):
        fresh = build_english()
        for value in sample:
            assert spell(fresh, value) == spell(english, value)


class TestInputErrors:

    def test_bool_rejected(self, english):
        with pytest.raises(TypeError):
            spell(english, False)

    def test_string_rejected(self, english):
        with pytest.raises(TypeError):
            spell(english, "12")

    def test_out_of_range(self, english):
        with pytest.raises(ValueError):
            spell(english, INT64_MAX + 1)
