"""
Scalar value coercion for the YAML stream parser.

Converts a trimmed token into a typed value:

- ``""``                -> ``{}`` (empty-object placeholder: no inline
  value, nested structure may follow)
- ``"null"`` / ``"~"``  -> ``None``
- ``"true"`` / ``"false"`` -> ``True`` / ``False``
- numeric text          -> ``int`` or ``float`` (ASCII digits only;
  a float outside the float64 range stays text)
- anything else         -> the text unchanged

Quotes are kept: ``'"13.3"'`` stays the five-character string
``"13.3"`` with its quote characters. Downstream consumers rely on the
literal text.
"""

from __future__ import annotations

import math
import re

from formatbridge.nodes import Scalar

_INT_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(r"-?([0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)([eE][-+]?[0-9]+)?")

_NULLS = {"null", "~"}
_BOOLS = {"true": True, "false": False}


def coerce_scalar(text: str) -> Scalar | dict:
    """Coerce a trimmed token into a scalar value.

    Returns a new empty dict for the empty string, so callers may
    mutate the placeholder without affecting other results.
    """
    if text == "":
        return {}
    if text in _NULLS:
        return None
    if text in _BOOLS:
        return _BOOLS[text]
    if _INT_RE.fullmatch(text):
        return int(text)
    if _FLOAT_RE.fullmatch(text):
        number = float(text)
        # Out-of-range exponents overflow to inf, which JSON cannot hold
        if math.isfinite(number):
            return number
    return text
