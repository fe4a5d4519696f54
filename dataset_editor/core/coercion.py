from __future__ import annotations

import json
import math
import re
from typing import Any, Optional, Union

Number = Union[int, float]

# Marker for a record key that is not present at all
MISSING: Any = object()

# Numeric text accepted by spreadsheet-style number parsing
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)$", re.ASCII)
_RADIX_RE = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def _normalise_number(value: float) -> Number:
    """Collapse integral floats to int so 3.0 and 3 display and compare the same."""
    if math.isfinite(value) and value == int(value):
        return int(value)
    return value


def to_number(value: Any) -> Optional[Number]:
    """
    Coerce a cell value to a number.

    Rules:
    - bool -> 1 / 0
    - int / float -> itself (NaN -> None)
    - None -> 0
    - str -> parsed after trimming; blank text is 0, unparseable text is None
    - anything else -> None

    Returns None wherever the value has no numeric reading.
    """
    if isinstance(value, bool):
        return 1 if value else 0

    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return None
        return _normalise_number(value) if isinstance(value, float) else value

    if value is None:
        return 0

    if isinstance(value, str):
        text = value.strip()
        if text == "":
            return 0
        if text in _INFINITY:
            return _INFINITY[text]
        if _RADIX_RE.match(text):
            return int(text, 0)
        if _DECIMAL_RE.match(text):
            return _normalise_number(float(text))
        return None

    return None


def to_number_or_zero(value: Any) -> Number:
    """Numeric reading of a value, with every non-numeric value counted as 0."""
    number = to_number(value)
    return number if number is not None else 0


def to_text(value: Any) -> str:
    """
    String form of a cell value.

    Booleans render as "true"/"false", integral floats without a trailing ".0",
    None as "null".
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return str(_normalise_number(value))
    if isinstance(value, str):
        return value
    return str(value)


def to_boolean(value: Any) -> bool:
    """True only for the string "true", the boolean True or the number 1."""
    if value is True:
        return True
    if isinstance(value, str):
        return value == "true"
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 1
    return False


def canonical_key(value: Any) -> str:
    """
    Stable string encoding of a cell value, used for composite duplicate keys.

    Absent values encode as "" so they stay distinct from explicit nulls ("null").
    Numbers are normalised first so 1 and 1.0 produce the same key.
    """
    if value is MISSING:
        return ""
    if isinstance(value, float) and math.isfinite(value):
        value = _normalise_number(value)
    elif isinstance(value, float):
        value = None
    return json.dumps(value, sort_keys=True, default=str)
