"""Entity records built on top of the attribute container."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from .attributes import ATTRIBUTE_SCHEMA, Attributes
from .errors import UnknownAttribute
from .fingerprint import entity_id
from .registry import TypeRegistry
from .validate import canonicalize, validate

logger = logging.getLogger(__name__)


def normalize_attributes(
    raw: Mapping[str, Any], registry: Optional[TypeRegistry] = None
) -> tuple[Attributes, dict[str, str]]:
    """Validate each raw attribute with the type named like the attribute.

    Returns the container of canonical values and a mapping of rejected
    attribute names to the reason. None values are skipped.
    """
    attrs = Attributes()
    errors: dict[str, str] = {}

    for name, value in raw.items():
        if value is None:
            continue
        if name not in ATTRIBUTE_SCHEMA:
            errors[name] = str(UnknownAttribute(name))
            continue

        outcome = validate(value, name, registry=registry)
        if not outcome.ok:
            errors[name] = str(outcome.error)
            continue
        if not attrs.set(name, outcome.value):
            errors[name] = f"cannot store {outcome.value!r} in {ATTRIBUTE_SCHEMA[name].value} attribute"

    if errors:
        logger.debug("normalized %d attribute(s), rejected %d", len(attrs), len(errors))
    return attrs, errors


@dataclass
class Entity:
    type: str
    attributes: Attributes = field(default_factory=Attributes)
    associations: list[EntityAssociation] = field(default_factory=list)
    reputation: int = 0
    correlate: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    visible_by: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.attributes, Attributes):
            self.attributes = Attributes.from_dict(self.attributes)

    def identifier(self, registry: Optional[TypeRegistry] = None) -> str:
        """`<type>-<fingerprint>` of the attribute named after the entity type."""
        value, found = self.attributes.get(self.type)
        if not found:
            raise UnknownAttribute(self.type)
        _, fp = canonicalize(value, self.type, registry=registry)
        return entity_id(self.type, fp)

    def correlation_keys(self, registry: Optional[TypeRegistry] = None) -> dict[str, str]:
        """Fingerprints of the `correlate` attributes that are set."""
        keys: dict[str, str] = {}
        for name in self.correlate:
            value, found = self.attributes.get(name)
            if found:
                _, keys[name] = canonicalize(value, name, registry=registry)
        return keys

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "attributes": self.attributes.export(),
            "associations": [a.to_dict() for a in self.associations],
            "reputation": self.reputation,
            "correlate": list(self.correlate),
            "tags": list(self.tags),
            "visibleBy": list(self.visible_by),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Entity:
        return cls(
            type=data["type"],
            attributes=Attributes.from_dict(data.get("attributes") or {}),
            associations=[EntityAssociation.from_dict(a) for a in data.get("associations") or []],
            reputation=int(data.get("reputation", 0)),
            correlate=list(data.get("correlate") or []),
            tags=list(data.get("tags") or []),
            visible_by=list(data.get("visibleBy") or []),
        )


@dataclass
class EntityAssociation:
    # e.g. "aggregation", "association"
    mode: str
    entity: Entity

    def to_dict(self) -> dict[str, Any]:
        return {"mode": self.mode, **self.entity.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EntityAssociation:
        rest = {k: v for k, v in data.items() if k != "mode"}
        return cls(mode=data["mode"], entity=Entity.from_dict(rest))
