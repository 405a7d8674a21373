"""
Configuration models and YAML I/O for formatbridge.

This module defines the Pydantic models holding conversion options,
plus helpers for loading and saving them as a YAML file.

Key models:
- ConverterConfig: Top-level config (json_output + flat_file + ini).
- JsonOutputConfig: How JSON text is rendered (indent, ASCII escaping).
- FlatFileConfig: Field and line separators for delimited tables.
- IniConfig: The separator written between INI keys and values.

Key functions:
- load_config(path) -> ConverterConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

Every string operation in formatbridge works without a config; a
default ConverterConfig is used when none is passed.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from formatbridge.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class JsonOutputConfig(BaseModel):
    """JSON rendering settings."""

    indent: int | None = Field(
        2, ge=0, description="Indentation width; None renders compact single-line JSON"
    )
    ensure_ascii: bool = Field(
        False, description="If True, escape non-ASCII characters as \\uXXXX"
    )


class FlatFileConfig(BaseModel):
    """Delimited table settings."""

    separator: str = Field(",", min_length=1, description="Field separator (may be a substring)")
    line_separator: str = Field("\n", min_length=1, description="Line terminator for emitted tables")

    @model_validator(mode="after")
    def _check_separators_differ(self) -> FlatFileConfig:
        if self.separator == self.line_separator:
            raise ValueError("separator and line_separator must differ")
        return self


class IniConfig(BaseModel):
    """INI emitter settings."""

    key_value_separator: str = Field(
        "=", min_length=1, description="Written between key and value, e.g. '=' or ' = '"
    )


class ConverterConfig(BaseModel):
    """Top-level configuration for formatbridge."""

    json_output: JsonOutputConfig = Field(default_factory=JsonOutputConfig)
    flat_file: FlatFileConfig = Field(default_factory=FlatFileConfig)
    ini: IniConfig = Field(default_factory=IniConfig)


def load_config(path: str | Path) -> ConverterConfig:
    """Load and validate a converter config YAML file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty or not a mapping.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must contain a mapping, got {type(raw).__name__}: {path}"
        )
    logger.info("Loaded config from %s", path)
    return ConverterConfig.model_validate(raw)


def save_config(config: ConverterConfig, path: str | Path) -> None:
    """Serialize a ConverterConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# formatbridge configuration\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)
