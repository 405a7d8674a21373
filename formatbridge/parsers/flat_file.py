"""
Delimiter-separated flat-file parser for formatbridge.

Input structure:
  - First non-blank line: header row, split on the separator.
  - Every later non-blank line: one data row with exactly as many
    fields as the header.

Output:
  - A list of records (``dict[str, str]``), one per data row, in input
    order. Keys are the trimmed header fields, values the trimmed cells.

There is no quoting or escaping: a separator inside a cell always
splits it. A trailing ``\\r`` is dropped before splitting, so ``\\r\\n``
input is handled like ``\\n`` input; cells are trimmed after splitting.
"""

from __future__ import annotations

import logging

from formatbridge.exceptions import MalformedStructureError, MissingArgumentError
from formatbridge.parsers.base import BaseParser, ParseResult

logger = logging.getLogger(__name__)


class FlatFileParser(BaseParser):
    """Parser for header + rows text tables (CSV is the ``,`` case)."""

    format_name = "flat_file"

    def __init__(self, separator: str = ",") -> None:
        if not separator:
            raise MissingArgumentError("A non-empty field separator is required")
        self.separator = separator

    def parse(self, text: str) -> ParseResult:
        records: list[dict[str, str]] = []
        header: list[str] | None = None
        content_lines = 0

        for lineno, raw in enumerate(text.split("\n"), start=1):
            if not raw.strip():
                continue
            content_lines += 1
            # Only the line ending is removed before splitting: with a
            # whitespace separator, edge cells may be empty.
            line = raw.rstrip("\r\n")
            fields = line.split(self.separator)

            if header is None:
                header = [f.strip() for f in fields]
                logger.debug("Flat-file header on line %d: %s", lineno, header)
                continue

            if len(fields) != len(header):
                raise MalformedStructureError(
                    f"Invalid flat file: data mismatch with the header on line {lineno} "
                    f"(expected {len(header)} fields, found {len(fields)}): {line}"
                )
            records.append({key: cell.strip() for key, cell in zip(header, fields)})

        logger.info(
            "Parsed flat file: %d record(s), %d column(s)",
            len(records),
            len(header) if header else 0,
        )
        return ParseResult(value=records, format_name=self.format_name, line_count=content_lines)


def parse_flat_file(text: str, separator: str) -> list[dict[str, str]]:
    """Parse a delimiter-separated table into a list of records."""
    return FlatFileParser(separator).parse(text).value
