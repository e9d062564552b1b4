"""Best-effort coercion of raw values to primitive shapes.

The dispatcher favours availability over precision: a value that cannot be
converted becomes the zero value of the target shape (and a warning is
logged) instead of aborting the validation. Callers that need strictness must
check the raw shape themselves.
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from typing import Any

from .fingerprint import render

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_DECIMAL_INT_RE = re.compile(r"[+-]?[0-9]+")

_TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_STRINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_int(text: str) -> int:
    """Parse a strict base-10 int64 literal; raise ValueError otherwise."""
    if not _DECIMAL_INT_RE.fullmatch(text):
        raise ValueError(f"invalid decimal integer: {text!r}")
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"integer out of int64 range: {text!r}")
    return value


def parse_float(text: str) -> float:
    """Parse a float literal, without the leniency of `float()` for padding and `_`."""
    if not text or text != text.strip() or "_" in text:
        raise ValueError(f"invalid float: {text!r}")
    return float(text)


def truncate_float(value: float) -> int:
    if not math.isfinite(value):
        raise ValueError(f"cannot truncate {value!r} to an integer")
    result = int(value)
    if not INT64_MIN <= result <= INT64_MAX:
        raise ValueError(f"integer out of int64 range: {value!r}")
    return result


def cast_string(value: Any) -> str:
    return render(value)


def cast_int(value: Any) -> int:
    try:
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, numbers.Integral):
            result = int(value)
            if not INT64_MIN <= result <= INT64_MAX:
                raise ValueError(f"integer out of int64 range: {result}")
            return result
        if isinstance(value, numbers.Real):
            return truncate_float(float(value))
        if isinstance(value, str):
            return parse_int(value)
    except ValueError as e:
        logger.warning("failed to cast value to int64, using 0: %s", e)
        return 0

    logger.warning("failed to cast %s to int64, using 0", type(value).__name__)
    return 0


def cast_float(value: Any) -> float:
    try:
        if isinstance(value, numbers.Real):
            return float(value)
        if isinstance(value, str):
            return parse_float(value)
    except (ValueError, OverflowError) as e:
        logger.warning("failed to cast value to float64, using 0.0: %s", e)
        return 0.0

    logger.warning("failed to cast %s to float64, using 0.0", type(value).__name__)
    return 0.0


def cast_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, numbers.Real):
        return value != 0
    if isinstance(value, str):
        if value in _TRUE_STRINGS:
            return True
        if value in _FALSE_STRINGS:
            return False
        logger.warning("failed to cast %r to bool, using false", value)
        return False

    logger.warning("failed to cast %s to bool, using false", type(value).__name__)
    return False
