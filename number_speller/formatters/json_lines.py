"""JSON Lines formatter: one validated record per value.

WHY: Downstream tools (data pipelines, test fixtures, other services)
want machine-readable output that keeps the value and every language
together. One JSON object per line streams well and can be appended to.

HOW: Builds ``{"value": ..., "spellings": {"<lang>": "<text>"}}`` for the
value, validates it with jsonschema against spelling_record.schema.json
(shipped next to this module), then serializes it on one line.

RULES:
- One JSON object per input value, newline-terminated
- Language keys are canonical tags, in the order given
- Non-ASCII text is written as-is (ensure_ascii=False)
- Validate output against the schema before returning; raise on failure
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from number_speller.core.ir import Spelling
from number_speller.formatters.base import BaseFormatter

_SCHEMA_PATH = Path(__file__).resolve().parent / "spelling_record.schema.json"

_CACHED_SCHEMA: Optional[Dict[str, Any]] = None


def _get_schema() -> Dict[str, Any]:
    """Load the record schema from disk, cached after the first call."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


class JsonLinesFormatter(BaseFormatter):
    """Formatter that writes one JSON record per value.

    RULES:
    - All spellings must belong to the same value
    - Schema validation is mandatory
    """

    @property
    def name(self) -> str:
        return "JSON Lines"

    @property
    def media_type(self) -> str:
        return "application/x-ndjson"

    def format(self, spellings: List[Spelling]) -> str:
        """Convert the spellings of one value into a JSON line.

        Raises:
            ValueError: If spellings is empty or mixes several values.
            jsonschema.ValidationError: If the record does not conform
                to the schema.
        """
        if not spellings:
            raise ValueError("Cannot format an empty list of spellings")
        values = {spelling.value for spelling in spellings}
        if len(values) != 1:
            raise ValueError(
                "All spellings in one record must share a value, got {}".format(sorted(values))
            )

        record: Dict[str, Any] = {
            "value": spellings[0].value,
            "spellings": {spelling.language: spelling.text for spelling in spellings},
        }
        jsonschema.validate(instance=record, schema=_get_schema())

        return json.dumps(record, ensure_ascii=False) + "\n"
