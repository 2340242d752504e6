"""Result records passed from the speller to formatters and the HTTP API.

WHY: The core returns bare strings. Surrounding programs need to know
which value and which language a string belongs to when they render
several languages per input value.

RULES:
- language is the canonical tag ("en", "ru"), never an alias
- text is exactly what spell() returned, trailing separator included
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Spelling:
    """One value spelled in one language."""

    value: int
    language: str
    text: str
