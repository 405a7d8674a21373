"""
Base parser protocol / ABC for formatbridge.

All format-specific parsers implement this interface. The contract is:
1. Parser options (e.g. the flat-file separator) are given to __init__.
2. parse() takes the full input text and returns a ParseResult.
3. ParseResult.value is a plain Python value (dict / list / scalars)
   that ``json.dumps`` can encode directly.

Parsers hold no state between calls: each parse() builds its own
working state, so one parser instance can be reused freely.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class ParseResult:
    """Standardized output from any parser.

    Attributes:
        value: The parsed data. A list of documents for YAML, a list of
            records for flat files, a section mapping for INI.
        format_name: Registry name of the format that produced it.
        line_count: Number of content lines consumed (blank and comment
            lines excluded).
    """
    value: Any
    format_name: str = ""
    line_count: int = 0


class BaseParser(ABC):
    """Abstract base class for text format parsers."""

    format_name: str = ""

    @abstractmethod
    def parse(self, text: str) -> ParseResult:
        """Parse the full input text.

        Raises:
            MalformedStructureError: If the text breaks the format's structure.
        """
