"""Models for threat-entities.

These dataclasses and enums define the *stable* contract shared by the
registry, the dispatcher and the attribute container:

- DataKind: which canonicalization rule applies to a value
- Shape: the primitive form a canonical value (or attribute slot) takes
- TypeBinding: external type name -> DataKind
- ValidationOutcome: result of a single validation
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

CanonicalValue = Union[str, int, float, bool]


class Shape(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"


class DataKind(str, Enum):
    """Closed set of canonicalization strategies."""

    STRING = "string"
    STRING_CASE_INSENSITIVE = "istring"
    IP = "ip"
    CIDR = "cidr"
    FQDN = "fqdn"
    EMAIL = "email"
    URL = "url"
    UUID = "uuid"
    MD5 = "md5"
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA512_224 = "sha512-224"
    SHA512_256 = "sha512-256"
    SHA3_224 = "sha3-224"
    SHA3_256 = "sha3-256"
    SHA3_384 = "sha3-384"
    SHA3_512 = "sha3-512"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    MAC = "mac"
    MIME = "mime"
    PHONE = "phone"
    PORT = "port"
    PATH = "path"
    HEXADECIMAL = "hexadecimal"
    BASE64 = "base64"
    CITY = "city"
    COUNTRY = "country"
    IDENTIFIER = "identifier"
    ADVERSARY = "adversary"
    REGEX = "regex"

    @property
    def shape(self) -> Shape:
        return _KIND_SHAPES.get(self, Shape.STRING)


_KIND_SHAPES = {
    DataKind.INTEGER: Shape.INTEGER,
    DataKind.FLOAT: Shape.FLOAT,
    DataKind.BOOLEAN: Shape.BOOLEAN,
}


@dataclass(frozen=True)
class TypeBinding:
    # External type name, matched exactly (case-sensitive).
    name: str
    kind: DataKind


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating one raw value against one type name.

    `fingerprint` is set iff `error` is None.
    """

    value: Optional[CanonicalValue]
    fingerprint: Optional[str]
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "value": self.value,
            "fingerprint": self.fingerprint,
            "error": str(self.error) if self.error is not None else None,
        }
