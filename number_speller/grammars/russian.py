"""Russian cardinal numeral grammar.

WHY: Russian multipliers agree with the number in front of them:
"одна тысяча", "две тысячи", "пять тысяч", and "тысяча" is feminine, so
one and two change form inside the thousands group only. This grammar
exercises the agreement machinery of the engine.

HOW: The units ladder ends every number with one of three placeholder
nodes, picked by the last digit:
  ``unit``        after 1                 (nominative singular)
  ``unit_gen``    after 2, 3, 4           (genitive singular)
  ``unit_gen_pl`` after 0, 5–9 and teens  (genitive plural)
Each group multiplier redirects the three placeholders to its own three
forms. The thousands group also redirects the words "один" and "два" to
"одна" and "две".

RULES:
- Words are lower case
- The placeholders say nothing at group level 0 unless a counted noun
  is supplied, in which case the noun agrees with the whole number
- Groups go up to квинтиллион, which covers 2**64 - 1
"""

from __future__ import annotations

from typing import Optional, Tuple

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

TEENS = [
    "десять", "одиннадцать", "двенадцать", "тринадцать", "четырнадцать",
    "пятнадцать", "шестнадцать", "семнадцать", "восемнадцать", "девятнадцать",
]
TENS = [
    "двадцать", "тридцать", "сорок", "пятьдесят",
    "шестьдесят", "семьдесят", "восемьдесят", "девяносто",
]
HUNDREDS = [
    "сто", "двести", "триста", "четыреста",
    "пятьсот", "шестьсот", "семьсот", "восемьсот", "девятьсот",
]

# (nominative singular, genitive singular, genitive plural)
SCALES = [
    ("тысяча", "тысячи", "тысяч"),
    ("миллион", "миллиона", "миллионов"),
    ("миллиард", "миллиарда", "миллиардов"),
    ("триллион", "триллиона", "триллионов"),
    ("квадриллион", "квадриллиона", "квадриллионов"),
    ("квинтиллион", "квинтиллиона", "квинтиллионов"),
]

NounForms = Tuple[str, str, str]


def _words(names):
    return [Word(name) for name in names]


def _placeholder(form: Optional[str]) -> SpellerNode:
    return Word(form) if form else Empty()


def build_russian(counted_noun: Optional[NounForms] = None) -> SpellerNode:
    """Build the Russian grammar root.

    WHY: Plain numbers need no noun, but the same agreement slots can
    carry a masculine counted noun ("двадцать один рубль",
    "пять рублей") at no extra cost.

    RULES:
    - counted_noun is (nominative singular, genitive singular, genitive
      plural); None keeps the slots silent
    - The counted noun must be masculine: one and two keep their
      masculine forms outside the thousands group

    Args:
        counted_noun: Optional forms of a masculine noun to count.

    Returns:
        A SignBranch root ready for spell().
    """
    singular, genitive, genitive_plural = counted_noun or (None, None, None)
    unit = _placeholder(singular)
    unit_gen = _placeholder(genitive)
    unit_gen_pl = _placeholder(genitive_plural)

    one = Word("один")
    two = Word("два")
    five_to_nine = counting_ladder(5, _words(["пять", "шесть", "семь", "восемь", "девять"]))

    units = counting_ladder(0, [
        unit_gen_pl,
        Chain(one, unit),
        Chain(two, unit_gen),
        Chain(Word("три"), unit_gen),
        Chain(Word("четыре"), unit_gen),
        Chain(five_to_nine, unit_gen_pl),
    ])
    teens = counting_ladder(10, _words(TEENS))
    tens = counting_ladder(2, _words(TENS))

    tens_and_units = Threshold(
        9, units,
        Threshold(19, Chain(teens, unit_gen_pl), DigitSplit(1, low=units, high=tens)),
    )
    hundreds = counting_ladder(0, [Empty()] + _words(HUNDREDS))
    triad = DigitSplit(2, low=tens_and_units, high=hundreds)

    groups = [triad]
    for index, (nominative, gen_singular, gen_plural) in enumerate(SCALES):
        node = Agreement(unit_gen_pl, Word(gen_plural), triad)
        node = Agreement(unit_gen, Word(gen_singular), node)
        node = Agreement(unit, Word(nominative), node)
        if index == 0:
            node = Agreement(two, Word("две"), node)
            node = Agreement(one, Word("одна"), node)
        groups.append(Threshold(0, Empty(), node))

    positive = groups[-1]
    for group in reversed(groups[:-1]):
        positive = DigitSplit(3, low=group, high=positive)

    return SignBranch(
        negative=Chain(Word("минус"), positive),
        non_negative=Threshold(0, Word("ноль"), positive),
    )
