"""
INI section parser for formatbridge.

Produces a two-level mapping ``{section: {key: value}}``. All values
stay strings; there is no scalar coercion for INI.

Rules:
- Blank lines and lines starting with ``#`` or ``;`` are skipped.
- ``[name]`` opens a section. Repeating a name re-opens it empty.
- ``key = value`` is split on the first ``=``; both sides are trimmed.
- A key line before any section, or a non-section line without ``=``,
  raises MalformedStructureError.
"""

from __future__ import annotations

import logging

from formatbridge.exceptions import MalformedStructureError
from formatbridge.parsers.base import BaseParser, ParseResult

logger = logging.getLogger(__name__)

_COMMENT_PREFIXES = ("#", ";")


class IniParser(BaseParser):
    """Parser for ``[section]`` / ``key = value`` text."""

    format_name = "ini"

    def parse(self, text: str) -> ParseResult:
        sections: dict[str, dict[str, str]] = {}
        current: dict[str, str] | None = None
        content_lines = 0

        for lineno, raw in enumerate(text.split("\n"), start=1):
            line = raw.strip()
            if not line or line.startswith(_COMMENT_PREFIXES):
                continue
            content_lines += 1

            if line.startswith("[") and line.endswith("]"):
                name = line[1:-1].strip()
                if name in sections:
                    logger.debug("Section [%s] re-opened on line %d; prior keys cleared", name, lineno)
                current = sections[name] = {}
                continue

            key, equals, value = line.partition("=")
            if not equals:
                raise MalformedStructureError(
                    f"Invalid INI on line {lineno}: expected 'key = value' or '[section]': {line}"
                )
            if current is None:
                raise MalformedStructureError(
                    f"Invalid INI on line {lineno}: key appears before any [section] header: {line}"
                )
            current[key.strip()] = value.strip()

        logger.info("Parsed INI: %d section(s)", len(sections))
        return ParseResult(value=sections, format_name=self.format_name, line_count=content_lines)


def parse_ini(text: str) -> dict[str, dict[str, str]]:
    """Parse INI text into ``{section: {key: value}}``."""
    return IniParser().parse(text).value
