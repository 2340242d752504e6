"""English cardinal numeral grammar.

WHY: English is the simplest grammar the engine serves: no gender, no
case, one form per multiplier. It is the reference for what every other
grammar looks like.

HOW: A single placeholder node ``unit`` sits after every units word. It
says nothing on its own; "Hundred" and each group multiplier are spoken
by redirecting ``unit`` to the multiplier word with an Agreement node,
so one units ladder serves the ones column, the hundreds column and
every digit group.

RULES:
- Words are capitalised ("One Hundred Twenty Three")
- No "and", no hyphens: 21 is "Twenty One"
- Zero groups are silent; zero itself is "Zero"
- Groups go up to Quintillion, which covers 2**64 - 1
"""

from __future__ import annotations

from number_speller.core.nodes import (
    Agreement,
    Chain,
    DigitSplit,
    Empty,
    SignBranch,
    SpellerNode,
    Threshold,
    Word,
    counting_ladder,
)

UNITS = ["One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine"]
TEENS = [
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
    "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
]
TENS = ["Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]
SCALES = ["Thousand", "Million", "Billion", "Trillion", "Quadrillion", "Quintillion"]


def _words(names):
    return [Word(name) for name in names]


def build_english() -> SpellerNode:
    """Build the English grammar root.

    Returns:
        A SignBranch root ready for spell().
    """
    unit = Empty()

    units = Chain(counting_ladder(0, [Empty()] + _words(UNITS)), unit)
    teens = counting_ladder(10, _words(TEENS))
    tens = counting_ladder(2, _words(TENS))

    tens_and_units = Threshold(
        9, units,
        Threshold(19, Chain(teens, unit), DigitSplit(1, low=units, high=tens)),
    )
    hundreds = Threshold(0, Empty(), Agreement(unit, Word("Hundred"), units))
    triad = DigitSplit(2, low=tens_and_units, high=hundreds)

    groups = [triad] + [
        Threshold(0, Empty(), Agreement(unit, Word(scale), triad)) for scale in SCALES
    ]
    positive = groups[-1]
    for group in reversed(groups[:-1]):
        positive = DigitSplit(3, low=group, high=positive)

    return SignBranch(
        negative=Chain(Word("Minus"), positive),
        non_negative=Threshold(0, Word("Zero"), positive),
    )
