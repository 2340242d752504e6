"""Unit tests for the evaluation context.

WHY: The context is the only state that flows through a grammar. If a
slice lost the sign, or an override leaked out of its subtree, every
language would spell some numbers wrong.

HOW: Tests cover root construction and range checks, slicing, the
overlay (scope, identity keys, replacement, single-level redirection),
and immutability of derived contexts.

RULES:
- The probe node from conftest reveals the context a node received
"""

from __future__ import annotations

import pytest

from number_speller.core.context import (
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    SpellerContext,
    spell,
)
from number_speller.core.nodes import Agreement, Chain, Word


class TestRootContext:
    """from_value() and from_magnitude() build root contexts."""

    def test_positive_value(self):
        ctx = SpellerContext.from_value(42)
        assert ctx.magnitude == 42
        assert ctx.is_negative() is False
        assert dict(ctx.overlay) == {}

    def test_negative_value(self):
        ctx = SpellerContext.from_value(-42)
        assert ctx.magnitude == 42
        assert ctx.is_negative() is True

    def test_negative_zero_is_not_negative(self):
        assert SpellerContext.from_value(-0).is_negative() is False

    def test_most_negative_value(self):
        ctx = SpellerContext.from_value(INT64_MIN)
        assert ctx.magnitude == 2**63
        assert ctx.is_negative() is True

    def test_largest_value(self):
        assert SpellerContext.from_value(INT64_MAX).magnitude == 2**63 - 1

    def test_above_signed_range_rejected(self):
        with pytest.raises(ValueError, match="signed 64-bit"):
            SpellerContext.from_value(INT64_MAX + 1)

    def test_below_signed_range_rejected(self):
        with pytest.raises(ValueError, match="signed 64-bit"):
            SpellerContext.from_value(INT64_MIN - 1)

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            SpellerContext.from_value(True)

    def test_float_rejected(self):
        with pytest.raises(TypeError):
            SpellerContext.from_value(1.0)

    def test_unsigned_maximum(self):
        ctx = SpellerContext.from_magnitude(UINT64_MAX)
        assert ctx.magnitude == UINT64_MAX

    def test_magnitude_above_unsigned_range_rejected(self):
        with pytest.raises(ValueError, match="unsigned 64-bit"):
            SpellerContext.from_magnitude(UINT64_MAX + 1)

    def test_negative_magnitude_rejected(self):
        with pytest.raises(ValueError):
            SpellerContext(magnitude=-1)


class TestSlicing:
    """slice_high/slice_low split the magnitude at a power of ten."""

    def test_slice_high(self):
        assert SpellerContext(12345).slice_high(3).magnitude == 12

    def test_slice_low(self):
        assert SpellerContext(12345).slice_low(3).magnitude == 345

    def test_slice_beyond_digits(self):
        ctx = SpellerContext(42)
        assert ctx.slice_high(5).magnitude == 0
        assert ctx.slice_low(5).magnitude == 42

    def test_slice_at_zero_position(self):
        ctx = SpellerContext(42)
        assert ctx.slice_high(0).magnitude == 42
        assert ctx.slice_low(0).magnitude == 0

    def test_slices_keep_sign(self):
        ctx = SpellerContext.from_value(-12345)
        assert ctx.slice_high(2).is_negative() is True
        assert ctx.slice_low(2).is_negative() is True

    def test_slices_keep_overlay(self):
        source, replacement = Word("a"), Word("b")
        ctx = SpellerContext(1234).with_override(source, replacement)
        assert ctx.slice_high(2).evaluate(source) == "b "
        assert ctx.slice_low(2).evaluate(source) == "b "

    def test_slicing_does_not_mutate(self):
        ctx = SpellerContext(12345)
        ctx.slice_high(3)
        ctx.slice_low(3)
        assert ctx.magnitude == 12345

    def test_context_is_frozen(self):
        ctx = SpellerContext(1)
        with pytest.raises(AttributeError):
            ctx.magnitude = 2

    def test_full_unsigned_range_slices(self):
        ctx = SpellerContext.from_magnitude(UINT64_MAX)
        assert ctx.slice_high(18).magnitude == 18
        assert ctx.slice_low(3).magnitude == 615


class TestAtMost:
    """at_most() is an inclusive comparison."""

    def test_equal(self):
        assert SpellerContext(9).at_most(9) is True

    def test_below(self):
        assert SpellerContext(8).at_most(9) is True

    def test_above(self):
        assert SpellerContext(10).at_most(9) is False

    def test_zero(self):
        assert SpellerContext(0).at_most(0) is True


class TestOverlay:
    """with_override() redirects one node for the derived context only."""

    def test_unmapped_node_renders_itself(self):
        assert SpellerContext(0).evaluate(Word("a")) == "a "

    def test_mapped_node_renders_replacement(self):
        source, replacement = Word("a"), Word("b")
        ctx = SpellerContext(0).with_override(source, replacement)
        assert ctx.evaluate(source) == "b "

    def test_original_context_unchanged(self):
        source, replacement = Word("a"), Word("b")
        ctx = SpellerContext(0)
        ctx.with_override(source, replacement)
        assert ctx.evaluate(source) == "a "
        assert dict(ctx.overlay) == {}

    def test_keyed_by_identity(self):
        source, twin, replacement = Word("a"), Word("a"), Word("b")
        ctx = SpellerContext(0).with_override(source, replacement)
        assert ctx.evaluate(twin) == "a "

    def test_later_override_replaces_earlier(self):
        source = Word("a")
        ctx = SpellerContext(0).with_override(source, Word("b")).with_override(source, Word("c"))
        assert ctx.evaluate(source) == "c "

    def test_redirection_is_single_level(self):
        a, b, c = Word("a"), Word("b"), Word("c")
        ctx = SpellerContext(0).with_override(a, b).with_override(b, c)
        assert ctx.evaluate(a) == "b "
        assert ctx.evaluate(b) == "c "

    def test_override_scoped_to_agreement_subtree(self):
        a, b = Word("a"), Word("b")
        root = Chain(Agreement(a, b, a), a)
        assert SpellerContext(0).evaluate(root) == "b a "

    def test_override_reaches_nested_references(self):
        a, b = Word("a"), Word("b")
        root = Agreement(a, b, Chain(Chain(a, Word("x")), a))
        assert SpellerContext(0).evaluate(root) == "b x b "

    def test_replacement_sees_same_magnitude(self, magnitude_probe):
        placeholder = Word("never")
        probe = magnitude_probe("p")
        ctx = SpellerContext(77).with_override(placeholder, probe)
        assert ctx.evaluate(placeholder) == "p=77 "


class TestSpell:
    """spell() wraps a value into a root context and evaluates."""

    def test_passes_sign_and_magnitude(self, magnitude_probe):
        assert spell(magnitude_probe(), -15) == "m=-15 "

    def test_rejects_out_of_range(self, magnitude_probe):
        with pytest.raises(ValueError):
            spell(magnitude_probe(), 2**63)

    def test_rejects_non_int(self, magnitude_probe):
        with pytest.raises(TypeError):
            spell(magnitude_probe(), "15")
