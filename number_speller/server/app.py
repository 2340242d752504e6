"""FastAPI application exposing the spellers over HTTP.

WHY: Other tools (web front ends, chat bots, data pipelines in other
languages) need spelled numbers without embedding Python. FastAPI
provides request validation, automatic OpenAPI documentation and a
thread pool for the synchronous spelling work.

HOW: A single FastAPI app exposes four endpoints grouped by tags.
Grammars come from the process-wide cache in number_speller.grammars,
built once per language and shared by every request. Spelling is pure
and synchronous, so the endpoints are plain ``def`` functions that
FastAPI runs in its worker thread pool.

RULES:
- All endpoints have OpenAPI descriptions on every parameter and response
- 400 errors use the ErrorResponse schema; 422 validation errors keep
  FastAPI's HTTPValidationError schema
- Unknown or explicitly empty languages → 400; malformed or out-of-range
  values → 422
- Languages default to config.DEFAULT_LANGUAGES
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from typing import Annotated, List, Optional

from fastapi import FastAPI, HTTPException, Path, Query

from number_speller import __version__
from number_speller.config import (
    API_HOST,
    API_PORT,
    DEFAULT_LANGUAGES,
    normalize_language,
    parse_language_list,
)
from number_speller.core.context import INT64_MAX, INT64_MIN
from number_speller.grammars import GRAMMARS, LANGUAGE_NAMES, spell_in_languages
from number_speller.server.models import (
    ErrorResponse,
    HealthResponse,
    LanguageInfo,
    SpellBatchRequest,
    SpellingItem,
    SpellResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Number Speller API",
    description=(
        "REST API for spelling signed 64-bit integers as words in several "
        "languages (English, Russian). Spell one value with GET or a batch "
        "with POST."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _resolve_languages(tags: Optional[List[str]]) -> List[str]:
    """Normalize requested tags, falling back to the configured defaults.

    None means "not given" and selects config.DEFAULT_LANGUAGES; the
    defaults go through the same checks as requested tags.

    Raises HTTPException(400) for an explicit empty list or unsupported
    languages.
    """
    if tags is None:
        tags = DEFAULT_LANGUAGES
    if not tags:
        raise HTTPException(status_code=400, detail="No languages given")

    languages: List[str] = []
    for tag in tags:
        language = normalize_language(tag)
        if language not in GRAMMARS:
            raise HTTPException(
                status_code=400,
                detail="Unsupported language '{}'. Available: {}".format(
                    tag, ", ".join(sorted(GRAMMARS))
                ),
            )
        if language not in languages:
            languages.append(language)
    return languages


def _spell_response(value: int, languages: List[str]) -> SpellResponse:
    spellings = spell_in_languages(value, languages)
    return SpellResponse(
        value=value,
        spellings=[SpellingItem(language=s.language, text=s.text) for s in spellings],
    )


# ---------------------------------------------------------------------------
# Endpoints: Spellings
# ---------------------------------------------------------------------------


@app.get(
    "/spellings/{value}",
    response_model=SpellResponse,
    tags=["spellings"],
    summary="Spell a single value",
    description="Spell one integer in each requested language.",
    responses={
        400: {"model": ErrorResponse, "description": "Unsupported or empty language list"},
    },
)
def get_spelling(
    value: Annotated[
        int,
        Path(ge=INT64_MIN, le=INT64_MAX, description="Integer in [-2**63, 2**63 - 1]."),
    ],
    languages: Annotated[
        Optional[str],
        Query(description="Comma-separated language tags (e.g. 'en,ru'). Defaults to all configured."),
    ] = None,
) -> SpellResponse:
    tags = parse_language_list(languages) if languages is not None else None
    return _spell_response(value, _resolve_languages(tags))


@app.post(
    "/spellings",
    response_model=List[SpellResponse],
    tags=["spellings"],
    summary="Spell a batch of values",
    description=(
        "Spell several integers in each requested language. Results are "
        "returned in request order."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Unsupported or empty language list"},
    },
)
def spell_batch(request: SpellBatchRequest) -> List[SpellResponse]:
    languages = _resolve_languages(request.languages)
    logger.info("Spelling batch of %d value(s) in %s", len(request.values), ", ".join(languages))
    return [_spell_response(value, languages) for value in request.values]


# ---------------------------------------------------------------------------
# Endpoints: Languages
# ---------------------------------------------------------------------------


@app.get(
    "/languages",
    response_model=List[LanguageInfo],
    tags=["languages"],
    summary="List supported languages",
    description="Returns every language tag accepted by the spelling endpoints.",
)
def list_languages() -> List[LanguageInfo]:
    return [
        LanguageInfo(tag=tag, name=LANGUAGE_NAMES.get(tag, tag))
        for tag in sorted(GRAMMARS)
    ]


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the number-speller-api console script."""
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
