"""Evaluation context threaded through a grammar.

WHY: Every node needs the same three facts to decide what to say: the
magnitude still to be spelled, whether the original number was
negative, and which grammar slots an ancestor has redirected for
agreement. Bundling them in one immutable value lets evaluation stay a
pure function of (node, context).

HOW: SpellerContext is a frozen dataclass. Slicing and overriding return
new contexts. evaluate() applies the overlay, then hands the node to the
renderer table in core.evaluator.

RULES:
- A context is never mutated; every derivation is a new value
- magnitude is an unsigned 64-bit value (0 .. 2**64 - 1)
- The sign is fixed at the root and survives every slice
- The overlay is keyed by node handle (identity), not node structure
- Overlay redirection is one level: the mapped node is rendered directly
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from number_speller.core.evaluator import render
from number_speller.core.nodes import SpellerNode

UINT64_MAX = 2**64 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_EMPTY_OVERLAY: Mapping[int, SpellerNode] = MappingProxyType({})


@dataclass(frozen=True)
class SpellerContext:
    """Magnitude, sign and agreement overlay for one evaluation step.

    Attributes:
        magnitude: Absolute value still to be spelled.
        negative: True if the original input was below zero.
        overlay: Node handle → replacement node, set by Agreement nodes.
    """

    magnitude: int
    negative: bool = False
    overlay: Mapping[int, SpellerNode] = field(default_factory=lambda: _EMPTY_OVERLAY, repr=False)

    def __post_init__(self) -> None:
        if not 0 <= self.magnitude <= UINT64_MAX:
            raise ValueError(
                "Magnitude {} is outside the unsigned 64-bit range".format(self.magnitude)
            )

    @classmethod
    def from_value(cls, value: int) -> SpellerContext:
        """Build the root context for a signed 64-bit integer.

        RULES:
        - bool is rejected even though it subclasses int
        - -2**63 is accepted; its magnitude 2**63 fits the unsigned domain

        Raises:
            TypeError: If value is not an int.
            ValueError: If value is outside the signed 64-bit range.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("Expected an int, got {}".format(type(value).__name__))
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError("Value {} is outside the signed 64-bit range".format(value))
        return cls(magnitude=abs(value), negative=value < 0)

    @classmethod
    def from_magnitude(cls, magnitude: int, negative: bool = False) -> SpellerContext:
        """Build the root context for an unsigned 64-bit magnitude."""
        return cls(magnitude=magnitude, negative=negative)

    def slice_high(self, digits: int) -> SpellerContext:
        """Context for the digits above position ``digits``."""
        return SpellerContext(self.magnitude // 10**digits, self.negative, self.overlay)

    def slice_low(self, digits: int) -> SpellerContext:
        """Context for the lowest ``digits`` digits."""
        return SpellerContext(self.magnitude % 10**digits, self.negative, self.overlay)

    def with_override(self, source: SpellerNode, replacement: SpellerNode) -> SpellerContext:
        """Context that renders ``replacement`` wherever ``source`` is evaluated."""
        overlay = dict(self.overlay)
        overlay[source.handle] = replacement
        return SpellerContext(self.magnitude, self.negative, MappingProxyType(overlay))

    def at_most(self, threshold: int) -> bool:
        return self.magnitude <= threshold

    def is_negative(self) -> bool:
        return self.negative

    def evaluate(self, node: SpellerNode) -> str:
        """Spell this context with ``node``, honouring agreement overrides."""
        return render(self.overlay.get(node.handle, node), self)


def spell(root: SpellerNode, value: int) -> str:
    """Spell a signed 64-bit integer with a grammar.

    WHY: This is the single entry point callers use; everything else in
    the core is machinery behind it.

    HOW: Wraps value into a root context (magnitude, sign, empty overlay)
    and evaluates the grammar root against it.

    Args:
        root: Root node of a grammar, e.g. from build_grammar("en").
        value: Integer in [-2**63, 2**63 - 1].

    Returns:
        The spelled text. Every word carries one trailing space.

    Raises:
        TypeError: If value is not an int.
        ValueError: If value is outside the signed 64-bit range.
    """
    return SpellerContext.from_value(value).evaluate(root)
