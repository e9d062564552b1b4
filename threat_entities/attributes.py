"""Schema-bound attribute container.

`ATTRIBUTE_SCHEMA` is the wire contract for entity records: every supported
attribute name with the primitive shape its value takes. Adding or renaming a
name is a breaking change, hence `SCHEMA_VERSION`.

`Attributes` keeps one optional slot per schema name. Slots are either unset
(absent from `export()`) or hold a value of the declared shape.

Two access styles are offered:

- lenient: `get()` / `set()` report problems through their return values;
- strict: `attrs[name]`, `attrs[name] = value`, `del attrs[name]` and
  `Attributes.from_dict()` raise UnknownAttribute / CoercionFailure.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Optional

from .casts import INT64_MAX, INT64_MIN, parse_float, parse_int
from .errors import CoercionFailure, UnknownAttribute
from .fingerprint import render
from .models import CanonicalValue, Shape

SCHEMA_VERSION = "1"

_INTEGER_ATTRIBUTES = frozenset({"aba-rtn", "asn", "bank-account-nr", "bin", "breach-count", "cc-number"})
_FLOAT_ATTRIBUTES = frozenset({"latitude", "longitude", "size-in-bytes"})

_ATTRIBUTE_NAMES = (
    "aba-rtn", "adversary", "airport-name", "asn", "aso", "authentihash",
    "bank-account-nr", "base64", "bic", "bin", "breach", "breach-count",
    "breach-date", "breach-description", "btc", "category", "cc-number",
    "cdhash", "certificate-fingerprint", "chrome-extension-id", "cidr", "city",
    "command", "cookie", "country", "cpe", "cve", "dash", "date",
    "date-of-issue", "datetime", "dkim", "dkim-signature", "domain", "email",
    "email-address", "email-body", "email-display-name", "email-header",
    "email-mime-boundary", "email-subject", "email-thread-index",
    "email-x-mailer", "eppn", "expiration-date", "facebook-profile", "ffn",
    "file", "file-data", "filename", "filename-pattern", "flight",
    "github-organization", "github-repository", "github-user", "group", "hex",
    "hostname", "iban", "id-number", "ip", "issuer", "issuing-country",
    "ja3-fingerprint", "jabber-id", "jarm-fingerprint", "last-analysis",
    "latitude", "link", "longitude", "mac-address", "malware",
    "malware-family", "malware-sample", "malware-type", "md5", "mime-type",
    "mobile-app-id", "os", "passport", "path", "pattern-in-file",
    "pattern-in-memory", "pattern-in-traffic", "payload", "pgp-private-key",
    "pgp-public-key", "phone", "pnr", "port", "postal-address", "process",
    "process-state", "profile-photo", "prtn", "redress-number", "regkey",
    "sha1", "sha224", "sha256", "sha384", "sha3-224", "sha3-256", "sha3-384",
    "sha3-512", "sha512", "sha512-224", "sha512-256", "size-in-bytes",
    "ssh-banner", "ssh-fingerprint", "ssr", "text", "threat", "tiktok-profile",
    "twitter-profile", "url", "username", "value", "visa", "whois-registrant",
    "whois-registrar", "windows-scheduled-task", "windows-service-displayname",
    "windows-service-name", "xmr", "zip-code",
)  # fmt: skip


def _shape_of(name: str) -> Shape:
    if name in _INTEGER_ATTRIBUTES:
        return Shape.INTEGER
    if name in _FLOAT_ATTRIBUTES:
        return Shape.FLOAT
    return Shape.STRING


ATTRIBUTE_SCHEMA: Mapping[str, Shape] = MappingProxyType({n: _shape_of(n) for n in _ATTRIBUTE_NAMES})


def _to_string(value: Any) -> str:
    return value if isinstance(value, str) else render(value)


def _to_int(value: Any) -> int:
    # bool is an int subclass; True is not a count.
    if isinstance(value, bool):
        raise ValueError("boolean is not an integer")
    if isinstance(value, numbers.Integral):
        result = int(value)
    elif isinstance(value, numbers.Real):
        f = float(value)
        if not math.isfinite(f):
            raise ValueError(f"cannot truncate {f!r}")
        result = int(f)
    elif isinstance(value, str):
        return parse_int(value)
    else:
        raise ValueError(f"unsupported type {type(value).__name__}")

    if not INT64_MIN <= result <= INT64_MAX:
        raise ValueError(f"integer out of int64 range: {result}")
    return result


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError("boolean is not a float")
    if isinstance(value, numbers.Real):
        try:
            return float(value)
        except OverflowError as e:
            raise ValueError(str(e)) from None
    if isinstance(value, str):
        return parse_float(value)
    raise ValueError(f"unsupported type {type(value).__name__}")


_COERCERS = {
    Shape.STRING: _to_string,
    Shape.INTEGER: _to_int,
    Shape.FLOAT: _to_float,
}


class Attributes:
    """Sparse container of schema attributes. Not thread-safe; one writer at a time."""

    __slots__ = ("_values",)

    def __init__(self, **values: Any):
        self._values: dict[str, CanonicalValue] = {}
        # Keyword names use "_" where the schema uses "-" (`email_address=...`).
        for key, value in values.items():
            self[key.replace("_", "-")] = value

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Attributes:
        attrs = cls()
        for name, value in data.items():
            attrs[name] = value
        return attrs

    @staticmethod
    def _coerce(name: str, value: Any) -> CanonicalValue:
        shape = ATTRIBUTE_SCHEMA.get(name)
        if shape is None:
            raise UnknownAttribute(name)
        try:
            return _COERCERS[shape](value)
        except ValueError as e:
            raise CoercionFailure(f"cannot store {value!r} in {shape.value} attribute {name!r}: {e}") from None

    def get(self, name: str) -> tuple[Optional[CanonicalValue], bool]:
        """Return ``(value, True)`` for a set slot; ``(None, False)`` when unset or unknown."""
        if name in self._values:
            return self._values[name], True
        return None, False

    def set(self, name: str, value: Any) -> bool:
        """Store `value` coerced to the slot's shape; None clears the slot.

        Returns False, leaving the slot untouched, for unknown names or values
        that cannot be coerced.
        """
        if name not in ATTRIBUTE_SCHEMA:
            return False
        if value is None:
            self._values.pop(name, None)
            return True
        try:
            self._values[name] = self._coerce(name, value)
        except CoercionFailure:
            return False
        return True

    def export(self) -> dict[str, CanonicalValue]:
        """Set slots only, in schema order."""
        return {name: self._values[name] for name in ATTRIBUTE_SCHEMA if name in self._values}

    def __getitem__(self, name: str) -> CanonicalValue:
        if name not in ATTRIBUTE_SCHEMA:
            raise UnknownAttribute(name)
        return self._values[name]

    def __setitem__(self, name: str, value: Any) -> None:
        if value is None:
            del self[name]
            return
        self._values[name] = self._coerce(name, value)

    def __delitem__(self, name: str) -> None:
        if name not in ATTRIBUTE_SCHEMA:
            raise UnknownAttribute(name)
        self._values.pop(name, None)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self.export())

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attributes):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Attributes({self.export()!r})"
