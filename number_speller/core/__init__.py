"""Grammar engine: speller nodes, evaluation context and dispatch.

WHY: The core package is the stable heart of the speller. Grammars for
every language are wired from these primitives, and formatters, the CLI
and the HTTP API only ever call spell().

HOW: nodes.py defines the node variants and ladder builders,
evaluator.py maps each variant to its rendering rule, context.py holds
the immutable evaluation state and the spell() entry point, ir.py the
result record.

RULES:
- Nothing in core knows about a specific language
- Node variants and the renderer table change together
"""

from number_speller.core.context import (
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    SpellerContext,
    spell,
)
from number_speller.core.ir import Spelling
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
    ladder,
)

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "UINT64_MAX",
    "Agreement",
    "Chain",
    "DigitSplit",
    "Empty",
    "SignBranch",
    "SpellerContext",
    "SpellerNode",
    "Spelling",
    "Threshold",
    "Word",
    "counting_ladder",
    "ladder",
    "spell",
]
