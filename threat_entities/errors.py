"""Error taxonomy.

Every failure raised by the engine derives from `EntityError`, so callers that
do not care about the exact reason can catch one class. The concrete classes
also subclass the closest builtin (`LookupError`, `ValueError`, `KeyError`) so
generic handlers keep working.
"""

from __future__ import annotations


class EntityError(Exception):
    """Base class for all threat-entities errors."""


class UnknownType(EntityError, LookupError):
    """The requested type name has no registry binding."""

    def __init__(self, type_name: str):
        super().__init__(f"unknown type: {type_name}")
        self.type_name = type_name


class UnknownValidator(EntityError, LookupError):
    """A data kind has no canonicalizer registered."""

    def __init__(self, kind: object):
        super().__init__(f"unknown validator for kind: {kind}")
        self.kind = kind


class ValidationError(EntityError, ValueError):
    """A value was rejected by a canonicalizer."""


class FormatError(ValidationError):
    """The value does not match the pattern or parse rule of its kind."""


class RangeRejection(ValidationError):
    """The value is well-formed but semantically disallowed."""


class CoercionFailure(EntityError, ValueError):
    """A value cannot be converted to an attribute slot's declared shape."""


class UnknownAttribute(EntityError, KeyError):
    """The attribute name is not part of the schema."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown attribute: {self.name}"


class ConfigError(EntityError, ValueError):
    """Invalid configuration value."""
