"""
Emitters: decoded JSON values -> flat-file and INI text.

Both emitters check the value's shape before writing anything and
raise JsonShapeError when it does not fit the target format:

- flat file: a list of flat objects (scalar values only), all with the
  same keys as the first object.
- INI: an object whose values are flat objects.

Cells are rendered the way JSON scalars read in text form: ``None`` as
an empty string, booleans as ``true`` / ``false``, everything else via
``str()``.
"""

from __future__ import annotations

import logging
from typing import Any

from formatbridge.exceptions import JsonShapeError, MalformedStructureError

logger = logging.getLogger(__name__)


def render_cell(value: Any) -> str:
    """Render a JSON scalar as flat text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        raise JsonShapeError(f"Expected a scalar value, got {type(value).__name__}: {value!r}")
    return str(value)


def _check_flat_record(record: Any, index: int) -> dict[str, Any]:
    if not isinstance(record, dict):
        raise JsonShapeError(
            f"Expected an array of objects; element {index} is {type(record).__name__}"
        )
    for key, value in record.items():
        if isinstance(value, (dict, list)):
            raise JsonShapeError(
                f"Record {index} is not flat: field '{key}' holds a nested {type(value).__name__}"
            )
    return record


def check_flat_records(value: Any) -> list[str]:
    """Validate a list of flat records and return its header.

    The header is the first record's keys (empty for an empty list).

    Raises:
        JsonShapeError: If *value* is not a list of flat objects sharing
            the first object's keys.
    """
    if not isinstance(value, list):
        raise JsonShapeError(f"Expected a JSON array of objects, got {type(value).__name__}")
    if not value:
        return []

    header = list(_check_flat_record(value[0], 0).keys())
    for index, record in enumerate(value[1:], start=1):
        record = _check_flat_record(record, index)
        if set(record) != set(header):
            raise JsonShapeError(
                f"Record {index} keys {sorted(record)} do not match the header {sorted(header)}"
            )
    return header


def emit_flat_file(value: Any, line_separator: str = "\n", separator: str = ",") -> str:
    """Render a list of flat records as a delimited table.

    The header is the first record's keys. Every line, the header
    included, ends with *line_separator*. An empty list renders as an
    empty string.

    Raises:
        JsonShapeError: If *value* is not a list of flat objects sharing
            the first object's keys.
        MalformedStructureError: If a header field or cell contains the
            field or line separator (there is no quoting to protect it).
    """
    header = check_flat_records(value)
    if not value:
        return ""

    rows = [header]
    rows.extend([render_cell(record[key]) for key in header] for record in value)

    for row in rows:
        for cell in row:
            if separator in cell or line_separator in cell:
                raise MalformedStructureError(
                    f"Cannot write cell {cell!r}: it contains the field or line separator"
                )

    logger.info("Emitted flat file: %d record(s), %d column(s)", len(value), len(header))
    return "".join(separator.join(row) + line_separator for row in rows)


_LINE_BREAKS = ("\n", "\r")


def _check_ini_text(text: str, what: str, forbidden: tuple[str, ...]) -> None:
    for token in forbidden + _LINE_BREAKS:
        if token in text:
            raise MalformedStructureError(f"Cannot write INI {what} {text!r}: it contains {token!r}")


def emit_ini(value: Any, key_value_separator: str = "=") -> str:
    """Render ``{section: {key: value}}`` as INI text.

    Each section is written as ``[name]``, its ``key=value`` lines, then
    a blank line.

    Raises:
        JsonShapeError: If *value* is not an object of flat objects.
        MalformedStructureError: If text would not read back as written:
            a section name with ``]`` or a line break, a key with ``=``
            or a line break, or a value with a line break.
    """
    if not isinstance(value, dict):
        raise JsonShapeError(f"Expected a JSON object of sections, got {type(value).__name__}")

    lines: list[str] = []
    for name, section in value.items():
        if not isinstance(section, dict):
            raise JsonShapeError(
                f"Section '{name}' must be an object, got {type(section).__name__}"
            )
        _check_ini_text(name, "section name", ("]",))
        lines.append(f"[{name}]")
        for key, item in section.items():
            if isinstance(item, (dict, list)):
                raise JsonShapeError(
                    f"Section '{name}' is not flat: key '{key}' holds a nested {type(item).__name__}"
                )
            cell = render_cell(item)
            _check_ini_text(key, "key", ("=",))
            _check_ini_text(cell, "value", ())
            lines.append(f"{key}{key_value_separator}{cell}")
        lines.append("")

    logger.info("Emitted INI: %d section(s)", len(value))
    return "".join(line + "\n" for line in lines)
