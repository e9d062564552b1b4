"""Kinds defined in terms of other canonicalizers."""

from __future__ import annotations

from ..errors import FormatError, RangeRejection, ValidationError
from ..fingerprint import fingerprint
from .encoding import validate_uuid
from .hashes import validate_md5, validate_sha3_256
from .network import validate_email, validate_fqdn, validate_ip, validate_url
from .text import validate_phone

# Probe order matters: the first canonicalizer that accepts the value wins.
_IDENTIFIER_PROBES = (validate_md5, validate_sha3_256, validate_uuid)

_ADVERSARY_LOOKALIKES = (
    validate_url,
    validate_uuid,
    validate_email,
    validate_ip,
    validate_phone,
    validate_fqdn,
)


def _accepts(func, value: str) -> bool:
    try:
        func(value)
    except ValidationError:
        return False
    return True


def validate_identifier(value: str) -> tuple[str, str]:
    """Object identifier: an MD5 digest, a SHA3-256 digest or a UUID, tried in that order."""
    for probe in _IDENTIFIER_PROBES:
        try:
            return probe(value)
        except ValidationError:
            continue
    raise FormatError(f"invalid object: {value}")


def validate_adversary(value: str) -> tuple[str, str]:
    """Free-form adversary name.

    Accept-if-none-match: anything that reads as a URL, UUID, email, IP,
    phone number or FQDN is rejected. Otherwise the value is kept unchanged.
    """
    if any(_accepts(func, value) for func in _ADVERSARY_LOOKALIKES):
        raise RangeRejection(f"invalid adversary: {value}")
    return value, fingerprint(value)
