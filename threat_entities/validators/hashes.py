"""
Hash digests (MD5, SHA-1, SHA-2, SHA-3 families)
Canonical form is the lower-case hex digest; only the length is checked,
so e.g. SHA-256 and SHA3-256 accept the same strings.
"""

import re

from ..errors import FormatError
from ..fingerprint import fingerprint

_HEX_DIGEST_RES = {
    length: re.compile(f"[0-9a-f]{{{length}}}") for length in (16, 32, 40, 56, 64, 96, 128)
}


def _validate_digest(value: str, algorithm: str, *lengths: int) -> tuple[str, str]:
    v = value.lower()
    # Patterns are tried in order; the first full match wins.
    for length in lengths:
        if _HEX_DIGEST_RES[length].fullmatch(v):
            return v, fingerprint(v)
    raise FormatError(f"invalid {algorithm} hash: {value}")


def validate_md5(value: str) -> tuple[str, str]:
    # 16 chars: short form (CDHash style truncation).
    return _validate_digest(value, "MD5", 32, 16)


def validate_sha1(value: str) -> tuple[str, str]:
    return _validate_digest(value, "SHA1", 40)


def validate_sha224(value: str) -> tuple[str, str]:
    return _validate_digest(value, "SHA224", 56)


def validate_sha256(value: str) -> tuple[str, str]:
    return _validate_digest(value, "SHA256", 64)


def validate_sha384(value: str) -> tuple[str, str]:
    return _validate_digest(value, "SHA384", 96)


def validate_sha512(value: str) -> tuple[str, str]:
    return _validate_digest(value, "SHA512", 128)


def validate_sha512_224(value: str) -> tuple[str, str]:
    return _validate_digest(value, "SHA512/224", 56)


def validate_sha512_256(value: str) -> tuple[str, str]:
    return _validate_digest(value, "SHA512/256", 64)


def validate_sha3_224(value: str) -> tuple[str, str]:
    return _validate_digest(value, "SHA3-224", 56)


def validate_sha3_256(value: str) -> tuple[str, str]:
    return _validate_digest(value, "SHA3-256", 64)


def validate_sha3_384(value: str) -> tuple[str, str]:
    return _validate_digest(value, "SHA3-384", 96)


def validate_sha3_512(value: str) -> tuple[str, str]:
    return _validate_digest(value, "SHA3-512", 128)
