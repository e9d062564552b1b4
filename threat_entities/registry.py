"""Type registry: external type name -> DataKind."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from importlib import metadata
from typing import Any, Optional

from .errors import UnknownType
from .models import DataKind, TypeBinding

logger = logging.getLogger(__name__)

DEFAULT_PLUGIN_GROUP = "threat_entities.bindings"

# One binding per attribute name, in attribute schema order.
_ATTRIBUTE_KINDS: tuple[tuple[str, DataKind], ...] = (
    ("aba-rtn", DataKind.INTEGER),
    ("adversary", DataKind.ADVERSARY),
    ("airport-name", DataKind.STRING),
    ("asn", DataKind.INTEGER),
    ("aso", DataKind.STRING),
    ("authentihash", DataKind.SHA256),
    ("bank-account-nr", DataKind.INTEGER),
    ("base64", DataKind.BASE64),
    ("bic", DataKind.STRING),
    ("bin", DataKind.INTEGER),
    ("breach", DataKind.STRING),
    ("breach-count", DataKind.INTEGER),
    ("breach-date", DataKind.DATE),
    ("breach-description", DataKind.STRING),
    ("btc", DataKind.STRING),
    ("category", DataKind.STRING_CASE_INSENSITIVE),
    ("cc-number", DataKind.INTEGER),
    ("cdhash", DataKind.MD5),
    ("certificate-fingerprint", DataKind.STRING),
    ("chrome-extension-id", DataKind.STRING),
    ("cidr", DataKind.CIDR),
    ("city", DataKind.CITY),
    ("command", DataKind.STRING),
    ("cookie", DataKind.STRING),
    ("country", DataKind.COUNTRY),
    ("cpe", DataKind.STRING_CASE_INSENSITIVE),
    ("cve", DataKind.STRING),
    ("dash", DataKind.STRING),
    ("date", DataKind.DATE),
    ("date-of-issue", DataKind.DATE),
    ("datetime", DataKind.DATETIME),
    ("dkim", DataKind.STRING),
    ("dkim-signature", DataKind.STRING),
    ("domain", DataKind.FQDN),
    ("email", DataKind.EMAIL),
    ("email-address", DataKind.EMAIL),
    ("email-body", DataKind.STRING),
    ("email-display-name", DataKind.STRING),
    ("email-header", DataKind.STRING),
    ("email-mime-boundary", DataKind.STRING),
    ("email-subject", DataKind.STRING),
    ("email-thread-index", DataKind.BASE64),
    ("email-x-mailer", DataKind.STRING),
    ("eppn", DataKind.EMAIL),
    ("expiration-date", DataKind.DATE),
    ("facebook-profile", DataKind.URL),
    ("ffn", DataKind.STRING),
    ("file", DataKind.IDENTIFIER),
    ("file-data", DataKind.STRING),
    ("filename", DataKind.STRING),
    ("filename-pattern", DataKind.REGEX),
    ("flight", DataKind.STRING),
    ("github-organization", DataKind.STRING_CASE_INSENSITIVE),
    ("github-repository", DataKind.STRING_CASE_INSENSITIVE),
    ("github-user", DataKind.STRING_CASE_INSENSITIVE),
    ("group", DataKind.ADVERSARY),
    ("hex", DataKind.HEXADECIMAL),
    ("hostname", DataKind.FQDN),
    ("iban", DataKind.STRING),
    ("id-number", DataKind.STRING),
    ("ip", DataKind.IP),
    ("issuer", DataKind.STRING),
    ("issuing-country", DataKind.COUNTRY),
    ("ja3-fingerprint", DataKind.MD5),
    ("jabber-id", DataKind.EMAIL),
    ("jarm-fingerprint", DataKind.HEXADECIMAL),
    ("last-analysis", DataKind.DATETIME),
    ("latitude", DataKind.FLOAT),
    ("link", DataKind.URL),
    ("longitude", DataKind.FLOAT),
    ("mac-address", DataKind.MAC),
    ("malware", DataKind.STRING),
    ("malware-family", DataKind.STRING),
    ("malware-sample", DataKind.STRING),
    ("malware-type", DataKind.STRING_CASE_INSENSITIVE),
    ("md5", DataKind.MD5),
    ("mime-type", DataKind.MIME),
    ("mobile-app-id", DataKind.STRING),
    ("os", DataKind.STRING),
    ("passport", DataKind.STRING),
    ("path", DataKind.PATH),
    ("pattern-in-file", DataKind.REGEX),
    ("pattern-in-memory", DataKind.REGEX),
    ("pattern-in-traffic", DataKind.REGEX),
    ("payload", DataKind.STRING),
    ("pgp-private-key", DataKind.STRING),
    ("pgp-public-key", DataKind.STRING),
    ("phone", DataKind.PHONE),
    ("pnr", DataKind.STRING),
    ("port", DataKind.PORT),
    ("postal-address", DataKind.STRING),
    ("process", DataKind.STRING),
    ("process-state", DataKind.STRING_CASE_INSENSITIVE),
    ("profile-photo", DataKind.URL),
    ("prtn", DataKind.STRING),
    ("redress-number", DataKind.STRING),
    ("regkey", DataKind.STRING),
    ("sha1", DataKind.SHA1),
    ("sha224", DataKind.SHA224),
    ("sha256", DataKind.SHA256),
    ("sha384", DataKind.SHA384),
    ("sha3-224", DataKind.SHA3_224),
    ("sha3-256", DataKind.SHA3_256),
    ("sha3-384", DataKind.SHA3_384),
    ("sha3-512", DataKind.SHA3_512),
    ("sha512", DataKind.SHA512),
    ("sha512-224", DataKind.SHA512_224),
    ("sha512-256", DataKind.SHA512_256),
    ("size-in-bytes", DataKind.FLOAT),
    ("ssh-banner", DataKind.STRING),
    ("ssh-fingerprint", DataKind.STRING),
    ("ssr", DataKind.STRING),
    ("text", DataKind.STRING),
    ("threat", DataKind.STRING),
    ("tiktok-profile", DataKind.URL),
    ("twitter-profile", DataKind.URL),
    ("url", DataKind.URL),
    ("username", DataKind.STRING),
    ("value", DataKind.STRING),
    ("visa", DataKind.STRING),
    ("whois-registrant", DataKind.STRING),
    ("whois-registrar", DataKind.STRING),
    ("windows-scheduled-task", DataKind.STRING),
    ("windows-service-displayname", DataKind.STRING),
    ("windows-service-name", DataKind.STRING),
    ("xmr", DataKind.STRING),
    ("zip-code", DataKind.STRING),
)

# Names that are not attributes, used when validating loose values.
_GENERIC_KINDS: tuple[tuple[str, DataKind], ...] = (
    ("object", DataKind.IDENTIFIER),
    ("uuid", DataKind.UUID),
    ("string", DataKind.STRING),
    ("istring", DataKind.STRING_CASE_INSENSITIVE),
    ("integer", DataKind.INTEGER),
    ("float", DataKind.FLOAT),
    ("boolean", DataKind.BOOLEAN),
    ("regex", DataKind.REGEX),
    ("hexadecimal", DataKind.HEXADECIMAL),
    ("mime", DataKind.MIME),
    ("fqdn", DataKind.FQDN),
    ("mac", DataKind.MAC),
)

DEFAULT_BINDINGS: tuple[TypeBinding, ...] = tuple(
    TypeBinding(name, kind) for name, kind in _ATTRIBUTE_KINDS + _GENERIC_KINDS
)


def _coerce_bindings(obj: Any) -> list[TypeBinding]:
    """Accept a TypeBinding, an iterable of them, or a factory returning either."""
    if callable(obj) and not isinstance(obj, TypeBinding):
        obj = obj()
    if isinstance(obj, TypeBinding):
        return [obj]
    if isinstance(obj, Iterable) and not isinstance(obj, (str, bytes)):
        out = list(obj)
        if all(isinstance(b, TypeBinding) for b in out):
            return out
    raise TypeError(f"expected TypeBinding(s), got {type(obj).__name__}")


@dataclass(frozen=True)
class TypeRegistry:
    """Ordered bindings; the first binding with a matching name wins."""

    bindings: tuple[TypeBinding, ...] = DEFAULT_BINDINGS
    _index: dict[str, TypeBinding] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "bindings", tuple(self.bindings))
        index: dict[str, TypeBinding] = {}
        for b in self.bindings:
            index.setdefault(b.name, b)
        object.__setattr__(self, "_index", index)

    def get(self, name: str) -> Optional[TypeBinding]:
        return self._index.get(name)

    def resolve(self, name: str) -> DataKind:
        binding = self._index.get(name)
        if binding is None:
            raise UnknownType(name)
        return binding.kind

    def list_names(self) -> list[str]:
        return list(self._index)

    def extend(self, bindings: Iterable[TypeBinding]) -> TypeRegistry:
        return TypeRegistry(self.bindings + tuple(bindings))

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._index)

    @staticmethod
    def load_entrypoints(group: str = DEFAULT_PLUGIN_GROUP) -> list[TypeBinding]:
        """Load extra bindings via Python entry points.

        - never raises (best-effort); broken plugins are logged and skipped
        - supports a TypeBinding, an iterable of TypeBindings, or a factory
          returning either
        """
        loaded: list[TypeBinding] = []
        try:
            eps = metadata.entry_points(group=group)
        except Exception:
            logger.warning("cannot list entry points for group %s", group, exc_info=True)
            return loaded

        for ep in eps:
            try:
                loaded.extend(_coerce_bindings(ep.load()))
            except Exception as e:
                logger.warning("skipping binding plugin %s: %s", ep.name, e)
                continue
            logger.debug("loaded binding plugin %s", ep.name)

        return loaded


_DEFAULT_REGISTRY = TypeRegistry()


def get_default_registry() -> TypeRegistry:
    return _DEFAULT_REGISTRY


def build_registry(settings: Any = None) -> TypeRegistry:
    """Default registry, plus entry point bindings when `settings.load_plugins` is set."""
    if settings is None or not settings.load_plugins:
        return _DEFAULT_REGISTRY
    return _DEFAULT_REGISTRY.extend(TypeRegistry.load_entrypoints(settings.plugin_group))
