"""
File exporter for formatbridge.

The string API never touches the filesystem; this module is the thin
layer for callers that want files in and files out.

Output formats:
  json     -- the JSON text produced by ``encode_json``
  parquet  -- flat records only, written through pandas + pyarrow
  <name>   -- any writable registry format (csv, flat_file, ini),
              written with its emitter

``convert_file`` infers missing input/output formats from the file
suffixes (see ``SUFFIX_FORMATS``; ``.json`` and ``.parquet`` map to
themselves).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from formatbridge.config import ConverterConfig
from formatbridge.exceptions import ExportError, UnknownFormatError
from formatbridge.formats import SUFFIX_FORMATS, get_format
from formatbridge.frame import records_to_frame
from formatbridge.serializers import encode_json

logger = logging.getLogger(__name__)

_DATA_FORMATS = {"json", "parquet"}


def _infer_format(path: Path, role: str) -> str:
    suffix = path.suffix.lower()
    if suffix[1:] in _DATA_FORMATS:
        return suffix[1:]
    name = SUFFIX_FORMATS.get(suffix)
    if name is None:
        raise UnknownFormatError(
            f"Cannot infer the {role} format from '{path.name}'; pass it explicitly"
        )
    return name


def _render(value: Any, output_format: str, config: ConverterConfig) -> str:
    if output_format == "json":
        return encode_json(value, config)
    spec = get_format(output_format)
    return spec.emit(value, spec.resolve_config(config, {}))


def export_value(
    value: Any,
    path: str | Path,
    output_format: str = "json",
    config: ConverterConfig | None = None,
) -> str:
    """Write a parsed value to *path* in *output_format*.

    The parent directory is created if it does not exist.

    Returns:
        The written file path as a string.

    Raises:
        ExportError: If the value cannot be written in *output_format*,
            or if writing fails for any reason.
    """
    path = Path(path)
    config = config or ConverterConfig()
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        if output_format == "parquet":
            df = records_to_frame(value)
            df.to_parquet(path, index=False, engine="pyarrow")
            logger.info("Exported %s (%d rows, %d cols)", path.name, len(df), len(df.columns))
        else:
            text = _render(value, output_format, config)
            path.write_text(text, encoding="utf-8")
            logger.info("Exported %s as %s (%d chars)", path.name, output_format, len(text))
    except Exception as exc:
        raise ExportError(f"Failed to write {path.name} as {output_format}: {exc}") from exc

    return str(path)


def convert_file(
    input_path: str | Path,
    output_path: str | Path,
    input_format: str | None = None,
    output_format: str | None = None,
    config: ConverterConfig | None = None,
) -> str:
    """Read *input_path*, parse it, and export the result to *output_path*.

    Args:
        input_path: Source text file.
        output_path: Destination file.
        input_format: Registry format of the source; inferred from the
            suffix if None.
        output_format: ``json``, ``parquet`` or a writable registry
            format; inferred from the suffix if None.
        config: Converter options; defaults to ``ConverterConfig()``.

    Returns:
        The written file path as a string.

    Raises:
        FileNotFoundError: If *input_path* does not exist.
        UnknownFormatError: If a format cannot be inferred or is unknown.
        MalformedStructureError: If the source text is malformed.
        ExportError: If writing the output fails.
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    config = config or ConverterConfig()

    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    input_format = input_format or _infer_format(input_path, "input")
    output_format = output_format or _infer_format(output_path, "output")

    spec = get_format(input_format)
    text = input_path.read_text(encoding="utf-8-sig")
    result = spec.build_parser(spec.resolve_config(config, {})).parse(text)
    logger.info(
        "Parsed %s as %s (%d content line(s))", input_path.name, spec.name, result.line_count
    )
    return export_value(result.value, output_path, output_format, config)
