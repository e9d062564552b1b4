"""Fingerprints: SHA3-256 over the textual form of a canonical value.

The textual form is fixed so that equal canonical values always hash the
same, whatever their raw representation was:

- str: unchanged
- bool: "true" / "false"
- int: decimal
- float: shortest round-trip digits, no trailing ".0"; exponent form only
  below 1e-4 or from 1e21 ("1e-05", "1e+21")
"""

from __future__ import annotations

import hashlib
import math
import numbers
import re
from decimal import Decimal
from typing import Any

FINGERPRINT_LENGTH = 64

_FINGERPRINT_RE = re.compile(r"[0-9a-f]{64}")


def _render_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    text = repr(value)
    if "e" in text:
        exponent = int(text.split("e", 1)[1])
        if -4 <= exponent < 21:
            text = format(Decimal(text), "f")
        return text

    if text.endswith(".0"):
        text = text[:-2]
    return text


def render(value: Any) -> str:
    """Return the textual form used for fingerprints and string coercion."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        return _render_float(float(value))
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def fingerprint(value: Any) -> str:
    """SHA3-256 of `render(value)`, hex encoded (64 lower-case chars)."""
    return hashlib.sha3_256(render(value).encode("utf-8")).hexdigest()


def is_fingerprint(value: str) -> bool:
    return bool(_FINGERPRINT_RE.fullmatch(value))


def entity_id(entity_type: str, value_fingerprint: str) -> str:
    """Build the `<entityType>-<fingerprint>` identifier used for entity records."""
    if not entity_type:
        raise ValueError("entity type cannot be empty")
    if not is_fingerprint(value_fingerprint):
        raise ValueError(f"invalid fingerprint: {value_fingerprint!r}")
    return f"{entity_type}-{value_fingerprint}"
