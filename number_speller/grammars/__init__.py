"""Grammar registry: one builder per supported language.

WHY: The CLI, the HTTP API and library callers need a single lookup from
a language tag to a grammar. Adding a language means writing one builder
module and adding one line here.

HOW: GRAMMARS maps canonical tags to zero-argument builder functions.
build_grammar() normalizes the tag and builds a fresh grammar;
get_grammar() caches one grammar per canonical tag for the process.

RULES:
- Keys are canonical tags as defined in config.LANGUAGE_ALIASES
- Builders are pure: no I/O, no global state
- Grammars are immutable, so the cached instance is safe to share
  across threads and requests
"""

from __future__ import annotations

import functools
import logging
from typing import Callable, Dict, Iterable, List

from number_speller.config import normalize_language
from number_speller.core.context import spell
from number_speller.core.ir import Spelling
from number_speller.core.nodes import SpellerNode
from number_speller.grammars.english import build_english
from number_speller.grammars.russian import build_russian

logger = logging.getLogger(__name__)

GRAMMARS: Dict[str, Callable[[], SpellerNode]] = {
    "en": build_english,
    "ru": build_russian,
}

LANGUAGE_NAMES: Dict[str, str] = {
    "en": "English",
    "ru": "Russian",
}


def build_grammar(language_tag: str) -> SpellerNode:
    """Build the grammar root for a language.

    Args:
        language_tag: Canonical tag or alias, case-insensitive ("en", "RU", "english").

    Returns:
        A freshly built grammar root.

    Raises:
        ValueError: If the language is not supported.
    """
    language = normalize_language(language_tag)
    if language not in GRAMMARS:
        raise ValueError(
            "Unsupported language '{}'. Available: {}".format(
                language_tag, ", ".join(sorted(GRAMMARS))
            )
        )
    logger.debug("Building %s grammar", LANGUAGE_NAMES.get(language, language))
    return GRAMMARS[language]()


def get_grammar(language_tag: str) -> SpellerNode:
    """Return the process-wide cached grammar for a language."""
    return _cached_grammar(normalize_language(language_tag))


@functools.lru_cache(maxsize=None)
def _cached_grammar(language: str) -> SpellerNode:
    return build_grammar(language)


def spell_in_languages(value: int, languages: Iterable[str]) -> List[Spelling]:
    """Spell one value in several languages using the cached grammars.

    WHY: The CLI and the HTTP API both produce one Spelling per requested
    language for every value; this keeps that loop in one place.

    Raises:
        TypeError: If value is not an int.
        ValueError: If value is out of range or a language is unsupported.
    """
    return [
        Spelling(value=value, language=normalize_language(tag), text=spell(get_grammar(tag), value))
        for tag in languages
    ]
