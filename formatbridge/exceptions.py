"""
Custom exception hierarchy for formatbridge.

Callers can catch a specific failure (e.g. MalformedStructureError vs
InvalidDocumentStreamError) or everything the library raises via
FormatBridgeError. JSON decode failures are not wrapped: they surface
as ``json.JSONDecodeError`` from the standard library.
"""


class FormatBridgeError(Exception):
    """Base exception for all formatbridge errors."""


class MissingArgumentError(FormatBridgeError):
    """Raised when a required argument was not supplied (``None``)."""


class MalformedStructureError(FormatBridgeError):
    """Raised when input text breaks the structure its format requires.

    Examples:
    - A flat-file data row whose field count disagrees with the header.
    - A YAML line indented where no child scope was opened.
    - A YAML key line without a colon.
    - An INI key line before any ``[section]`` header.
    """


class InvalidDocumentStreamError(FormatBridgeError):
    """Raised when YAML content appears before the first ``---`` marker
    of a stream that uses markers."""


class JsonShapeError(FormatBridgeError, TypeError):
    """Raised when a decoded JSON value does not have the shape a target
    format needs (e.g. a nested value where a flat record is expected)."""


class UnknownFormatError(FormatBridgeError):
    """Raised when a format name is not registered, or has no emitter."""


class ConfigValidationError(FormatBridgeError):
    """Raised when a converter config file is empty or unusable."""


class ExportError(FormatBridgeError):
    """Raised when the exporter fails to write an output file.

    For example, permission errors, unsupported formats, or a value
    that cannot be laid out as a table.
    """
