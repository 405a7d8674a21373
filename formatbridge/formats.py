"""
Format registry for formatbridge.

Maps a format name to its parser class, its emitter (if the format can
be written back from JSON), and the ConverterConfig section holding its
options.

Design: Strategy Pattern
- get_format() returns a FormatSpec; callers never branch on names.
- build_parser() / emit() pull their keyword options from the
  ConverterConfig section named by the FormatSpec.

Registered formats:
  yaml       -- multi-document YAML subset (read only)
  flat_file  -- delimited table, separator from config
  csv        -- flat_file with ',' as the default separator
  ini        -- [section] / key = value
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from pydantic import ValidationError

from formatbridge.config import ConverterConfig
from formatbridge.emitters import emit_flat_file, emit_ini
from formatbridge.exceptions import MalformedStructureError, MissingArgumentError, UnknownFormatError
from formatbridge.parsers.base import BaseParser
from formatbridge.parsers.flat_file import FlatFileParser
from formatbridge.parsers.ini import IniParser
from formatbridge.parsers.yaml_stream import YamlStreamParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormatSpec:
    """How to read (and optionally write) one text format.

    Attributes:
        name: Registry name.
        parser_cls: BaseParser subclass that reads the format.
        config_section: ConverterConfig attribute holding this format's
            options, or None if the format takes no options.
        parser_options: Option names passed to ``parser_cls(...)``.
        emitter: Callable ``(value, **options) -> str`` that writes the
            format from a decoded JSON value; None if read only.
        emitter_options: Option names passed to the emitter.
        defaults: Option values applied before caller overrides.
    """
    name: str
    parser_cls: type[BaseParser]
    config_section: str | None = None
    parser_options: tuple[str, ...] = ()
    emitter: Callable[..., str] | None = None
    emitter_options: tuple[str, ...] = ()
    defaults: dict[str, Any] = field(default_factory=dict)

    @property
    def writable(self) -> bool:
        return self.emitter is not None

    def resolve_config(
        self, config: ConverterConfig | None, options: dict[str, Any]
    ) -> ConverterConfig:
        """Merge format defaults and caller options into a validated config.

        Raises:
            MissingArgumentError: If an option is passed as None or "".
            TypeError: If an option is not known for this format.
            MalformedStructureError: If the merged options fail validation,
                e.g. a field separator equal to the line separator.
        """
        config = config or ConverterConfig()
        overrides = {**self.defaults, **options}
        if not overrides:
            return config

        missing = [name for name, value in overrides.items() if value is None or value == ""]
        if missing:
            raise MissingArgumentError(f"Missing required argument(s) for '{self.name}': {missing}")
        if self.config_section is None:
            raise TypeError(f"Format '{self.name}' takes no options, got {sorted(overrides)}")

        data = config.model_dump()
        unknown = set(overrides) - set(data[self.config_section])
        if unknown:
            raise TypeError(f"Unknown option(s) for format '{self.name}': {sorted(unknown)}")
        data[self.config_section].update(overrides)
        try:
            return ConverterConfig.model_validate(data)
        except ValidationError as exc:
            raise MalformedStructureError(
                f"Invalid option(s) for format '{self.name}' {overrides}: {exc}"
            ) from exc

    def _section_kwargs(self, config: ConverterConfig, names: tuple[str, ...]) -> dict[str, Any]:
        if not names:
            return {}
        section = getattr(config, self.config_section)
        return {name: getattr(section, name) for name in names}

    def build_parser(self, config: ConverterConfig) -> BaseParser:
        return self.parser_cls(**self._section_kwargs(config, self.parser_options))

    def emit(self, value: Any, config: ConverterConfig) -> str:
        if self.emitter is None:
            raise UnknownFormatError(f"Format '{self.name}' cannot be written from JSON")
        return self.emitter(value, **self._section_kwargs(config, self.emitter_options))


_FORMATS: dict[str, FormatSpec] = {
    "yaml": FormatSpec(name="yaml", parser_cls=YamlStreamParser),
    "flat_file": FormatSpec(
        name="flat_file",
        parser_cls=FlatFileParser,
        config_section="flat_file",
        parser_options=("separator",),
        emitter=emit_flat_file,
        emitter_options=("line_separator", "separator"),
    ),
    "csv": FormatSpec(
        name="csv",
        parser_cls=FlatFileParser,
        config_section="flat_file",
        parser_options=("separator",),
        emitter=emit_flat_file,
        emitter_options=("line_separator", "separator"),
        defaults={"separator": ","},
    ),
    "ini": FormatSpec(
        name="ini",
        parser_cls=IniParser,
        config_section="ini",
        emitter=emit_ini,
        emitter_options=("key_value_separator",),
    ),
}

# File suffix -> format name, used by convert_file() when no format is given
SUFFIX_FORMATS: dict[str, str] = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".csv": "csv",
    ".txt": "flat_file",
    ".ini": "ini",
    ".cfg": "ini",
}


def available_formats() -> list[str]:
    return sorted(_FORMATS)


def get_format(name: str) -> FormatSpec:
    """Look up a registered format by name.

    Raises:
        UnknownFormatError: If *name* is not registered.
    """
    spec = _FORMATS.get(name)
    if spec is None:
        raise UnknownFormatError(
            f"Unknown format: '{name}'. Supported formats: {available_formats()}"
        )
    return spec
