"""Configuration constants, language tags, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. Language aliases and defaults are plain data
structures, not buried in logic, so adding a language or changing a
default is a one-line edit.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values read from the environment with sensible
defaults. normalize_language() and parse_language_list() turn user
input into canonical tags.

RULES:
- Canonical tags are lower-case ISO 639-1 codes ("en", "ru")
- Aliases are matched case-insensitively after stripping whitespace
- Unknown tags pass through normalized (lower-cased) so the grammar
  registry can report them with the full list of languages
- All defaults can be overridden via NUMBER_SPELLER_* environment variables
- An unknown NUMBER_SPELLER_LOG_LEVEL falls back to WARNING
"""

from __future__ import annotations

import os
from typing import Dict, List

from dotenv import load_dotenv

# Load .env from the working directory (where the program is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Language tags
# ---------------------------------------------------------------------------

LANGUAGE_ALIASES: Dict[str, str] = {
    "en": "en",
    "en-us": "en",
    "en-gb": "en",
    "english": "en",
    "ru": "ru",
    "ru-ru": "ru",
    "russian": "ru",
}


def normalize_language(tag: str) -> str:
    """Map a language tag or alias to its canonical form.

    RULES:
    - Case-insensitive, surrounding whitespace ignored
    - "_" is accepted in place of "-" ("en_US" → "en")
    - Unknown tags are returned lower-cased, not rejected
    """
    key = tag.strip().lower().replace("_", "-")
    return LANGUAGE_ALIASES.get(key, key)


def parse_language_list(text: str) -> List[str]:
    """Split a comma-separated language list into canonical tags.

    Empty items are dropped and duplicates keep their first position.
    """
    languages: List[str] = []
    for item in text.split(","):
        if not item.strip():
            continue
        language = normalize_language(item)
        if language not in languages:
            languages.append(language)
    return languages


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

LOG_LEVELS: List[str] = ["DEBUG", "INFO", "WARNING", "ERROR"]


def parse_log_level(text: str, default: str = "WARNING") -> str:
    """Upper-case a log level name; names outside LOG_LEVELS give ``default``."""
    level = text.strip().upper()
    return level if level in LOG_LEVELS else default


DEFAULT_LANGUAGES: List[str] = parse_language_list(
    os.getenv("NUMBER_SPELLER_LANGUAGES", "en,ru")
)
DEFAULT_FORMAT = os.getenv("NUMBER_SPELLER_FORMAT", "plain_text")
LOG_LEVEL = parse_log_level(os.getenv("NUMBER_SPELLER_LOG_LEVEL", "WARNING"))

# ---------------------------------------------------------------------------
# HTTP API
# ---------------------------------------------------------------------------

API_HOST = os.getenv("NUMBER_SPELLER_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("NUMBER_SPELLER_API_PORT", "8000"))
MAX_BATCH_SIZE = int(os.getenv("NUMBER_SPELLER_MAX_BATCH_SIZE", "1000"))
