"""threat-entities - typed validation and canonicalization of threat-intelligence values."""

from .attributes import ATTRIBUTE_SCHEMA, SCHEMA_VERSION, Attributes
from .config import Settings, load_settings
from .entity import Entity, EntityAssociation, normalize_attributes
from .errors import (
    CoercionFailure,
    ConfigError,
    EntityError,
    FormatError,
    RangeRejection,
    UnknownAttribute,
    UnknownType,
    UnknownValidator,
    ValidationError,
)
from .fingerprint import entity_id, fingerprint
from .models import DataKind, Shape, TypeBinding, ValidationOutcome
from .registry import TypeRegistry, build_registry, get_default_registry
from .validate import canonicalize, validate

__version__ = "1.0.0"
__all__ = [
    "validate",
    "canonicalize",
    "fingerprint",
    "entity_id",
    "Attributes",
    "ATTRIBUTE_SCHEMA",
    "SCHEMA_VERSION",
    "Entity",
    "EntityAssociation",
    "normalize_attributes",
    "TypeRegistry",
    "TypeBinding",
    "build_registry",
    "get_default_registry",
    "DataKind",
    "Shape",
    "ValidationOutcome",
    "Settings",
    "load_settings",
    "EntityError",
    "UnknownType",
    "UnknownValidator",
    "ValidationError",
    "FormatError",
    "RangeRejection",
    "CoercionFailure",
    "UnknownAttribute",
    "ConfigError",
]
