"""Abstract base formatter for spelled output.

WHY: The CLI writes the spellings of each input value in one of several
layouts. This base class enforces a consistent interface so the CLI can
work with any formatter generically.

HOW: BaseFormatter is an ABC with three requirements: a ``name``
property, a ``media_type`` property and a ``format()`` method that turns
the spellings of one value into a block of output text.

RULES:
- ``format()`` receives all spellings of ONE value, in language order
- The returned text ends with a newline so blocks can be streamed
- Formatters are stateless; one instance may format any number of values

To add a new output format:
1. Create a new file in formatters/
2. Subclass BaseFormatter
3. Implement name, media_type and format()
4. Register in FORMATTERS dict in formatters/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from number_speller.core.ir import Spelling


class BaseFormatter(ABC):
    """Abstract base for all output formatters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Plain Text'."""

    @property
    @abstractmethod
    def media_type(self) -> str:
        """MIME type of the produced text, e.g. 'text/plain'."""

    @abstractmethod
    def format(self, spellings: List[Spelling]) -> str:
        """Render the spellings of one value.

        Args:
            spellings: One Spelling per configured language, all for the
                       same value.

        Returns:
            Output text for this value, newline-terminated.
        """
