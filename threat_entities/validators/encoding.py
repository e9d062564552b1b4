"""Encoded values: hexadecimal, base64 and UUIDs."""

from __future__ import annotations

import base64
import binascii
import re
import uuid

from ..errors import FormatError
from ..fingerprint import fingerprint

_UUID_DASHED = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"

# uuid.UUID drops braces, dashes and the urn prefix wherever they appear;
# only these four layouts are accepted.
_UUID_RE = re.compile(
    rf"{_UUID_DASHED}|\{{{_UUID_DASHED}\}}|urn:uuid:{_UUID_DASHED}|[0-9a-f]{{32}}"
)


def validate_hexadecimal(value: str) -> tuple[str, str]:
    v = value.lower()
    try:
        raw = binascii.unhexlify(v)
    except ValueError as e:
        # binascii.Error subclasses ValueError (odd length, bad digit, non-ASCII).
        raise FormatError(f"invalid hexadecimal value: {e}") from None

    h = raw.hex()
    return h, fingerprint(h)


def validate_base64(value: str) -> tuple[str, str]:
    """Standard alphabet, padding required. The input itself is the canonical form."""
    try:
        base64.b64decode(value, validate=True)
    except ValueError as e:
        raise FormatError(f"invalid base64 value: {e}") from None
    return value, fingerprint(value)


def validate_uuid(value: str) -> tuple[str, str]:
    v = value.lower()
    if not _UUID_RE.fullmatch(v):
        raise FormatError(f"invalid UUID: {value}")
    s = str(uuid.UUID(v))
    return s, fingerprint(s)
