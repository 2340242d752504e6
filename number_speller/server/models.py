"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation. Pydantic
models enforce field types at runtime and generate JSON Schema that
appears in the /docs UI.

HOW: Each endpoint has its own request and/or response model. Value
range limits are expressed as Field constraints so out-of-range input is
rejected with 422 before any grammar runs.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Values are limited to the signed 64-bit range
- Language tags in responses are canonical ("en", "ru")
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import BaseModel, Field

from number_speller.config import MAX_BATCH_SIZE
from number_speller.core.context import INT64_MAX, INT64_MIN

# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class SpellBatchRequest(BaseModel):
    """Several values to spell in one call.

    RULES:
    - values: 1 .. MAX_BATCH_SIZE integers in the signed 64-bit range
    - languages: optional; omitted or null selects the configured
      languages, an empty list is rejected with 400
    """

    values: List[Int64] = Field(
        min_length=1,
        max_length=MAX_BATCH_SIZE,
        description="Integers to spell, each in [-2**63, 2**63 - 1].",
    )
    languages: Optional[List[str]] = Field(
        default=None,
        description="Language tags (e.g. 'en', 'ru'). Defaults to the server's configured languages.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {"values": [0, 21, -1000], "languages": ["en", "ru"]},
        ]
    }}


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class SpellingItem(BaseModel):
    """One value spelled in one language."""

    language: str = Field(description="Canonical language tag.")
    text: str = Field(description="Spelled text, each word followed by one space.")


class SpellResponse(BaseModel):
    """All requested spellings of a single value."""

    value: int = Field(ge=INT64_MIN, le=INT64_MAX, description="The spelled value.")
    spellings: List[SpellingItem] = Field(description="One entry per requested language.")

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "value": 2000,
                "spellings": [
                    {"language": "en", "text": "Two Thousand "},
                    {"language": "ru", "text": "две тысячи "},
                ],
            }
        ]
    }}


class LanguageInfo(BaseModel):
    """Description of a supported language."""

    tag: str = Field(description="Canonical language tag used in requests.")
    name: str = Field(description="Human-readable language name.")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
