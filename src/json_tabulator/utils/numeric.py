"""Numeric-string recognition and number display formatting."""

import math
import re
from typing import Optional, Union

Number = Union[int, float]

# optional sign, digits with optional fraction (or a bare fraction), optional exponent
NUMERIC_PATTERN = re.compile(
    r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$"
)

# Integers beyond this lose precision as doubles; keep them exact.
_MAX_EXACT_FLOAT_INT = 2 ** 53


def is_numeric_string(text: str) -> bool:
    """
    Check whether text is a number under the cell grammar.

    Surrounding whitespace is ignored. The empty string, hexadecimal
    literals, ``Infinity``, ``NaN`` and values that overflow to infinity
    are not numbers.
    """
    return parse_number(text) is not None


def parse_number(text: str) -> Optional[Number]:
    """
    Parse text into an int or float.

    Args:
        text: Candidate numeric text

    Returns:
        The number, or None when text does not match the grammar
    """
    if not isinstance(text, str):
        return None

    candidate = text.strip()
    if not NUMERIC_PATTERN.match(candidate):
        return None

    mantissa = candidate.lstrip("+-")
    try:
        if "." not in mantissa and "e" not in mantissa.lower():
            return int(candidate)
        value = float(candidate)
    except ValueError:
        # integer text past the interpreter's digit limit stays text
        return None

    if math.isinf(value):
        return None
    return normalize_number(value)


def normalize_number(value: Number) -> Number:
    """Collapse integral floats to int so ``1.0`` and ``1`` read the same."""
    if isinstance(value, float) and value.is_integer() and abs(value) < _MAX_EXACT_FLOAT_INT:
        return int(value)
    return value


def format_number(value: Number) -> str:
    """Render a number in its natural display form."""
    value = normalize_number(value)
    if isinstance(value, float):
        return repr(value)
    return str(value)
