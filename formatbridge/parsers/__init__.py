"""
Parsers sub-package for formatbridge.

Contains format-specific parsers that convert input text into plain
Python values (dict / list / scalars) ready for JSON encoding.

Design: Strategy Pattern
- base.py defines the BaseParser ABC and the ParseResult dataclass.
- yaml_stream.py implements YamlStreamParser for multi-document YAML-subset streams.
- scalars.py implements the scalar coercion used by the YAML parser.
- flat_file.py implements FlatFileParser for header + rows delimited tables.
- ini.py implements IniParser for ``[section]`` / ``key = value`` files.

The format registry (formats.py) selects the parser class by format name.
"""

from formatbridge.parsers.base import BaseParser, ParseResult
from formatbridge.parsers.flat_file import FlatFileParser, parse_flat_file
from formatbridge.parsers.ini import IniParser, parse_ini
from formatbridge.parsers.scalars import coerce_scalar
from formatbridge.parsers.yaml_stream import YamlStreamParser, parse_yaml_stream

__all__ = [
    "BaseParser",
    "ParseResult",
    "FlatFileParser",
    "IniParser",
    "YamlStreamParser",
    "coerce_scalar",
    "parse_flat_file",
    "parse_ini",
    "parse_yaml_stream",
]
