"""Number Speller: integers to words in several languages.

WHY: Spelling numbers correctly needs more than a lookup table: word
order changes between languages, zero groups must vanish, and some
languages inflect "thousand" and even "one" depending on the digits in
front of them. This package expresses each language's numeral grammar
as a small declarative graph and evaluates it.

HOW: The core engine (speller nodes, evaluation context, dispatch)
knows no language; the grammars (English, Russian) are built from its
primitives. The CLI,
the formatters and the HTTP API sit on top and only call spell().

RULES:
- Grammars are data built from core primitives; the core knows no language
- spell(root, value) is pure and deterministic
- Adding a language = one new module in grammars/, one registry line
"""

from number_speller.core.context import spell
from number_speller.grammars import build_grammar, get_grammar

__version__ = "0.1.0"

__all__ = ["build_grammar", "get_grammar", "spell", "__version__"]
