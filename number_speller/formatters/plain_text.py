"""Plain text formatter: one line per language.

WHY: The classic output of the speller is a bare list of spelled
numbers, one per line, ready for diffing against reference files or
piping into other tools.

RULES:
- One line per Spelling, in the order given
- Text is written exactly as spelled, trailing separator included
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from number_speller.core.ir import Spelling
from number_speller.formatters.base import BaseFormatter


class PlainTextFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Plain Text"

    @property
    def media_type(self) -> str:
        return "text/plain"

    def format(self, spellings: List[Spelling]) -> str:
        return "".join("{}\n".format(spelling.text) for spelling in spellings)
