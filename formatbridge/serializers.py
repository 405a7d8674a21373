"""
JSON serializers for formatbridge.

- ``to_json(format, text)``: parse *text* with the format's parser and
  encode the result as JSON text (insertion order kept).
- ``from_json(format, json_text)``: decode *json_text* and write it
  back out with the format's emitter.

JSON decode errors are not wrapped; ``json.JSONDecodeError`` reaches
the caller unchanged. Format options (``separator``, ``line_separator``,
``key_value_separator``) can be passed as keyword arguments and
override the matching ConverterConfig section for that call only.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from formatbridge.config import ConverterConfig
from formatbridge.exceptions import MissingArgumentError, UnknownFormatError
from formatbridge.formats import get_format

logger = logging.getLogger(__name__)


def require_text(name: str, value: Any) -> str:
    """Check that a required string argument was supplied.

    Raises:
        MissingArgumentError: If *value* is None.
        TypeError: If *value* is not a string.
    """
    if value is None:
        raise MissingArgumentError(f"Missing required argument: '{name}'")
    if not isinstance(value, str):
        raise TypeError(f"'{name}' must be a string, got {type(value).__name__}")
    return value


def encode_json(value: Any, config: ConverterConfig | None = None) -> str:
    """Encode a parsed value as JSON text using the json_output settings."""
    settings = (config or ConverterConfig()).json_output
    return json.dumps(
        value, indent=settings.indent, ensure_ascii=settings.ensure_ascii, allow_nan=False
    )


def to_json(
    format_name: str,
    text: str,
    config: ConverterConfig | None = None,
    **options: Any,
) -> str:
    """Convert *text* in *format_name* to JSON text.

    Raises:
        MissingArgumentError: If *text* or an option is None.
        UnknownFormatError: If *format_name* is not registered.
        MalformedStructureError: If *text* breaks the format's structure.
        InvalidDocumentStreamError: If YAML content precedes the first marker.
    """
    require_text("text", text)
    spec = get_format(format_name)
    config = spec.resolve_config(config, options)

    result = spec.build_parser(config).parse(text)
    logger.info("Converted %s -> JSON (%d content line(s))", spec.name, result.line_count)
    return encode_json(result.value, config)


def from_json(
    format_name: str,
    json_text: str,
    config: ConverterConfig | None = None,
    **options: Any,
) -> str:
    """Convert JSON text to *format_name* text.

    Raises:
        MissingArgumentError: If *json_text* or an option is None.
        UnknownFormatError: If *format_name* is unknown or read only.
        json.JSONDecodeError: If *json_text* is not valid JSON.
        JsonShapeError: If the decoded value has the wrong shape.
    """
    require_text("json_text", json_text)
    spec = get_format(format_name)
    if not spec.writable:
        raise UnknownFormatError(f"Format '{spec.name}' cannot be written from JSON")
    config = spec.resolve_config(config, options)

    value = json.loads(json_text)
    output = spec.emit(value, config)
    logger.info("Converted JSON -> %s (%d char(s))", spec.name, len(output))
    return output
