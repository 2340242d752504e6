"""Speller node variants and ladder builders.

WHY: A numeral grammar is a small program: "say the tens word, then the
units word", "if the thousands group is zero say nothing", "inside this
group say 'одна' instead of 'один'". Each of those instructions is one
node kind. Grammars are wired from these nodes once and then evaluated
any number of times.

HOW: Every variant is a frozen dataclass deriving from SpellerNode.
Nodes hold only parameters and references to child nodes. Rendering
lives in core.evaluator, keyed by node type, so the variants stay plain
data.

RULES:
- Nodes are immutable and shared; the same child may have many parents
- Each node gets a unique integer ``handle`` at construction
- Equality and hashing are by identity (eq=False), never by structure:
  two ``Empty()`` nodes are different slots in a grammar
- Parameters are validated at construction, never during evaluation
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

_handles = itertools.count(1)


def _next_handle() -> int:
    return next(_handles)


@dataclass(frozen=True, eq=False)
class SpellerNode:
    """Base for all grammar nodes.

    RULES:
    - ``handle`` is assigned automatically and is unique per process
    - Subclasses must be registered in core.evaluator.RENDERERS
    """

    handle: int = field(default_factory=_next_handle, init=False, repr=False)


@dataclass(frozen=True, eq=False)
class Empty(SpellerNode):
    """Says nothing. Used for zero digits, suppressed groups and placeholders."""


@dataclass(frozen=True, eq=False)
class Word(SpellerNode):
    """A fixed vocabulary word, rendered with one trailing space."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError("Word text must be a string, got {!r}".format(self.text))


@dataclass(frozen=True, eq=False)
class Chain(SpellerNode):
    """Renders ``first`` then ``second`` against the same context."""

    first: SpellerNode
    second: SpellerNode


@dataclass(frozen=True, eq=False)
class Threshold(SpellerNode):
    """Renders ``lower`` when magnitude <= threshold, otherwise ``higher``."""

    threshold: int
    lower: SpellerNode
    higher: SpellerNode

    def __post_init__(self) -> None:
        if self.threshold < 0:
            raise ValueError("Threshold must be non-negative, got {}".format(self.threshold))


@dataclass(frozen=True, eq=False)
class SignBranch(SpellerNode):
    """Renders ``negative`` for negative input, ``non_negative`` otherwise."""

    negative: SpellerNode
    non_negative: SpellerNode


@dataclass(frozen=True, eq=False)
class DigitSplit(SpellerNode):
    """Splits the magnitude at 10**position and spells both parts.

    WHY: Digit groups (tens/units, hundreds/rest, thousands/triad) are
    each spelled by their own sub-grammar and then joined in the word
    order of the language.

    HOW: ``low`` spells ``magnitude % 10**position``, ``high`` spells
    ``magnitude // 10**position``. The high part comes first unless
    ``inverted`` is set.

    RULES:
    - position must be >= 0
    - Order depends only on ``inverted``, never on the magnitude
    """

    position: int
    low: SpellerNode
    high: SpellerNode
    inverted: bool = False

    def __post_init__(self) -> None:
        if self.position < 0:
            raise ValueError("Split position must be non-negative, got {}".format(self.position))


@dataclass(frozen=True, eq=False)
class Agreement(SpellerNode):
    """Spells ``target`` with every reference to ``source`` redirected to ``replacement``.

    WHY: Grammatical agreement ("одна тысяча", "две тысячи", "пять тысяч")
    depends on a word chosen deep inside a shared sub-grammar. Rather than
    copying that sub-grammar per case, an ancestor redirects one slot for
    the duration of a single evaluation.

    RULES:
    - The redirection is scoped to the evaluation of ``target``
    - Matching is by node identity, so ``source`` must be the very node
      object used inside ``target``
    """

    source: SpellerNode
    replacement: SpellerNode
    target: SpellerNode


def ladder(
    steps: Iterable[Tuple[int, SpellerNode]],
    default: SpellerNode,
) -> SpellerNode:
    """Build a threshold ladder from ordered (threshold, node) pairs.

    WHY: Vocabulary tables ("0 → nothing, 1 → One, 2 → Two, …") are
    sorted lookups. A right-nested chain of Threshold nodes expresses
    them with the one branch primitive the engine has.

    HOW: Folds the pairs right-to-left:
    ``Threshold(t1, n1, Threshold(t2, n2, … Threshold(tn, nn, default)))``.

    RULES:
    - Thresholds must be strictly increasing
    - A magnitude goes to the first pair whose threshold it does not
      exceed (<=, equality included), else to ``default``
    - No pairs means ``default`` itself is returned

    Args:
        steps: Ordered (threshold, node) pairs.
        default: Node used when the magnitude exceeds every threshold.

    Returns:
        The root node of the ladder.

    Raises:
        ValueError: If thresholds are not strictly increasing.
    """
    pairs: List[Tuple[int, SpellerNode]] = list(steps)
    for (previous, _), (current, _) in zip(pairs, pairs[1:]):
        if current <= previous:
            raise ValueError(
                "Ladder thresholds must be strictly increasing, got {} after {}".format(
                    current, previous
                )
            )

    node = default
    for threshold, lower in reversed(pairs):
        node = Threshold(threshold, lower, node)
    return node


def counting_ladder(start: int, nodes: Sequence[SpellerNode]) -> SpellerNode:
    """Ladder over consecutive values: start → nodes[0], start+1 → nodes[1], …

    The last node also covers every value above its position.
    """
    if not nodes:
        raise ValueError("counting_ladder needs at least one node")
    steps = [(start + offset, node) for offset, node in enumerate(nodes[:-1])]
    return ladder(steps, nodes[-1])
