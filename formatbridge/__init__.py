"""
formatbridge: convert YAML-subset, flat-file (CSV) and INI text to and
from JSON.

Public API surface:

- ``yaml_to_json(text)`` -- multi-document YAML-subset stream -> JSON
  array with one element per document.
- ``flat_file_to_json(text, separator)`` -- header + rows table -> JSON
  array of string-valued records.
- ``json_to_flat_file(json_text, line_separator, separator)`` -- JSON
  array of flat objects -> delimited table.
- ``ini_to_json(text)`` -- INI sections -> JSON object of objects.
- ``json_to_ini(json_text)`` -- JSON object of objects -> INI text.
- ``to_json(format, text)`` / ``from_json(format, json_text)`` --
  format-name dispatch over the registry (``yaml``, ``flat_file``,
  ``csv``, ``ini``).

Everything above is string-in / string-out. ``convert_file`` and
``export_value`` add a file layer on top (JSON, Parquet or any
writable text format).
"""

from __future__ import annotations

from formatbridge.config import ConverterConfig, load_config, save_config
from formatbridge.exceptions import (
    ConfigValidationError,
    ExportError,
    FormatBridgeError,
    InvalidDocumentStreamError,
    JsonShapeError,
    MalformedStructureError,
    MissingArgumentError,
    UnknownFormatError,
)
from formatbridge.export import convert_file, export_value
from formatbridge.formats import available_formats
from formatbridge.frame import flat_file_to_frame, frame_to_records, records_to_frame
from formatbridge.parsers import coerce_scalar, parse_flat_file, parse_ini, parse_yaml_stream
from formatbridge.serializers import from_json, require_text, to_json

__all__ = [
    "yaml_to_json",
    "flat_file_to_json",
    "json_to_flat_file",
    "ini_to_json",
    "json_to_ini",
    "to_json",
    "from_json",
    "available_formats",
    "coerce_scalar",
    "parse_yaml_stream",
    "parse_flat_file",
    "parse_ini",
    "records_to_frame",
    "frame_to_records",
    "flat_file_to_frame",
    "export_value",
    "convert_file",
    "ConverterConfig",
    "load_config",
    "save_config",
    "FormatBridgeError",
    "MissingArgumentError",
    "MalformedStructureError",
    "InvalidDocumentStreamError",
    "JsonShapeError",
    "UnknownFormatError",
    "ConfigValidationError",
    "ExportError",
]


def yaml_to_json(text: str, config: ConverterConfig | None = None) -> str:
    """Convert a YAML-subset stream to a JSON array of documents.

    Example::

        >>> print(yaml_to_json("a: 1\\nb: true", ConverterConfig(json_output={"indent": None})))
        [{"a": 1, "b": true}]

    Raises:
        MissingArgumentError: If *text* is None.
        InvalidDocumentStreamError: If content precedes the first ``---``.
        MalformedStructureError: If indentation or a key line is invalid.
    """
    return to_json("yaml", text, config)


def flat_file_to_json(text: str, separator: str, config: ConverterConfig | None = None) -> str:
    """Convert a delimited table to a JSON array of records.

    Raises:
        MissingArgumentError: If *text* or *separator* is None.
        MalformedStructureError: If a row's field count differs from the header.
    """
    require_text("separator", separator)
    return to_json("flat_file", text, config, separator=separator)


def json_to_flat_file(
    json_text: str,
    line_separator: str,
    separator: str,
    config: ConverterConfig | None = None,
) -> str:
    """Convert a JSON array of flat objects to a delimited table.

    Raises:
        MissingArgumentError: If any argument is None.
        json.JSONDecodeError: If *json_text* is not valid JSON.
        JsonShapeError: If the value is not an array of flat objects.
    """
    require_text("line_separator", line_separator)
    require_text("separator", separator)
    return from_json(
        "flat_file", json_text, config, line_separator=line_separator, separator=separator
    )


def ini_to_json(text: str, config: ConverterConfig | None = None) -> str:
    """Convert INI text to a JSON object of sections.

    Raises:
        MissingArgumentError: If *text* is None.
        MalformedStructureError: If a key line has no section or no ``=``.
    """
    return to_json("ini", text, config)


def json_to_ini(json_text: str, config: ConverterConfig | None = None) -> str:
    """Convert a JSON object of objects to INI text.

    Raises:
        MissingArgumentError: If *json_text* is None.
        json.JSONDecodeError: If *json_text* is not valid JSON.
        JsonShapeError: If the value is not an object of flat objects.
    """
    return from_json("ini", json_text, config)
