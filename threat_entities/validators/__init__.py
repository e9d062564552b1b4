"""Canonicalizers, one per DataKind.

Each one takes a value already coerced to its kind's shape and returns
``(canonical, fingerprint)``, raising FormatError / RangeRejection otherwise.
"""

from __future__ import annotations

from typing import Any, Callable

from ..models import DataKind
from .composite import validate_adversary, validate_identifier
from .encoding import validate_base64, validate_hexadecimal, validate_uuid
from .hashes import (
    validate_md5,
    validate_sha1,
    validate_sha224,
    validate_sha256,
    validate_sha384,
    validate_sha512,
    validate_sha512_224,
    validate_sha512_256,
    validate_sha3_224,
    validate_sha3_256,
    validate_sha3_384,
    validate_sha3_512,
)
from .network import (
    validate_cidr,
    validate_email,
    validate_fqdn,
    validate_ip,
    validate_mac,
    validate_port,
    validate_url,
)
from .scalars import validate_boolean, validate_float, validate_integer
from .temporal import validate_date, validate_datetime
from .text import (
    validate_city,
    validate_country,
    validate_istring,
    validate_mime,
    validate_path,
    validate_phone,
    validate_regex,
    validate_string,
)

Validator = Callable[[Any], tuple[Any, str]]

VALIDATORS: dict[DataKind, Validator] = {
    DataKind.STRING: validate_string,
    DataKind.STRING_CASE_INSENSITIVE: validate_istring,
    DataKind.IP: validate_ip,
    DataKind.CIDR: validate_cidr,
    DataKind.FQDN: validate_fqdn,
    DataKind.EMAIL: validate_email,
    DataKind.URL: validate_url,
    DataKind.UUID: validate_uuid,
    DataKind.MD5: validate_md5,
    DataKind.SHA1: validate_sha1,
    DataKind.SHA224: validate_sha224,
    DataKind.SHA256: validate_sha256,
    DataKind.SHA384: validate_sha384,
    DataKind.SHA512: validate_sha512,
    DataKind.SHA512_224: validate_sha512_224,
    DataKind.SHA512_256: validate_sha512_256,
    DataKind.SHA3_224: validate_sha3_224,
    DataKind.SHA3_256: validate_sha3_256,
    DataKind.SHA3_384: validate_sha3_384,
    DataKind.SHA3_512: validate_sha3_512,
    DataKind.INTEGER: validate_integer,
    DataKind.FLOAT: validate_float,
    DataKind.BOOLEAN: validate_boolean,
    DataKind.DATE: validate_date,
    DataKind.DATETIME: validate_datetime,
    DataKind.MAC: validate_mac,
    DataKind.MIME: validate_mime,
    DataKind.PHONE: validate_phone,
    DataKind.PORT: validate_port,
    DataKind.PATH: validate_path,
    DataKind.HEXADECIMAL: validate_hexadecimal,
    DataKind.BASE64: validate_base64,
    DataKind.CITY: validate_city,
    DataKind.COUNTRY: validate_country,
    DataKind.IDENTIFIER: validate_identifier,
    DataKind.ADVERSARY: validate_adversary,
    DataKind.REGEX: validate_regex,
}

__all__ = [
    "VALIDATORS",
    "Validator",
    "validate_adversary",
    "validate_base64",
    "validate_boolean",
    "validate_cidr",
    "validate_city",
    "validate_country",
    "validate_date",
    "validate_datetime",
    "validate_email",
    "validate_float",
    "validate_fqdn",
    "validate_hexadecimal",
    "validate_identifier",
    "validate_integer",
    "validate_ip",
    "validate_istring",
    "validate_mac",
    "validate_md5",
    "validate_mime",
    "validate_path",
    "validate_phone",
    "validate_port",
    "validate_regex",
    "validate_sha1",
    "validate_sha224",
    "validate_sha256",
    "validate_sha384",
    "validate_sha512",
    "validate_sha512_224",
    "validate_sha512_256",
    "validate_sha3_224",
    "validate_sha3_256",
    "validate_sha3_384",
    "validate_sha3_512",
    "validate_string",
    "validate_url",
    "validate_uuid",
]
