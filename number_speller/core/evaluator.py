"""Rendering rules for each speller node variant.

WHY: Nodes are plain data. The behaviour of each variant lives in one
table so the full instruction set of the grammar engine can be read in
one place, and so a missing variant is caught rather than silently
spelled as nothing.

HOW: RENDERERS maps a node class to a function ``(node, context) -> str``.
render() looks the node's class up (walking the MRO so subclasses of a
variant inherit its rule) and calls the function. Child nodes are always
evaluated through ``context.evaluate`` so agreement overrides apply at
every level.

RULES:
- Every concrete SpellerNode variant must have an entry in RENDERERS
- Renderers never mutate the context; they derive new ones
- The separator after a word is a single space
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict

from number_speller.core.nodes import (
    Agreement,
    Chain,
    DigitSplit,
    Empty,
    SignBranch,
    SpellerNode,
    Threshold,
    Word,
)

if TYPE_CHECKING:
    from number_speller.core.context import SpellerContext

WORD_SEPARATOR = " "


def _render_empty(node: Empty, context: SpellerContext) -> str:
    return ""


def _render_word(node: Word, context: SpellerContext) -> str:
    return node.text + WORD_SEPARATOR


def _render_chain(node: Chain, context: SpellerContext) -> str:
    return context.evaluate(node.first) + context.evaluate(node.second)


def _render_threshold(node: Threshold, context: SpellerContext) -> str:
    if context.at_most(node.threshold):
        return context.evaluate(node.lower)
    return context.evaluate(node.higher)


def _render_sign(node: SignBranch, context: SpellerContext) -> str:
    if context.is_negative():
        return context.evaluate(node.negative)
    return context.evaluate(node.non_negative)


def _render_split(node: DigitSplit, context: SpellerContext) -> str:
    low_text = context.slice_low(node.position).evaluate(node.low)
    high_text = context.slice_high(node.position).evaluate(node.high)
    if node.inverted:
        return low_text + high_text
    return high_text + low_text


def _render_agreement(node: Agreement, context: SpellerContext) -> str:
    return context.with_override(node.source, node.replacement).evaluate(node.target)


RENDERERS: Dict[type, Callable[..., str]] = {
    Empty: _render_empty,
    Word: _render_word,
    Chain: _render_chain,
    Threshold: _render_threshold,
    SignBranch: _render_sign,
    DigitSplit: _render_split,
    Agreement: _render_agreement,
}


def render(node: SpellerNode, context: SpellerContext) -> str:
    """Render one node against a context, without overlay lookup.

    Overlay redirection is the caller's job (SpellerContext.evaluate).

    Raises:
        TypeError: If the node's type has no registered renderer.
    """
    for cls in type(node).__mro__:
        renderer = RENDERERS.get(cls)
        if renderer is not None:
            return renderer(node, context)
    raise TypeError("No renderer registered for node type {}".format(type(node).__name__))
