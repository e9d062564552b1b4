"""Validation dispatcher: raw value + type name -> canonical value + fingerprint."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from .casts import cast_bool, cast_float, cast_int, cast_string
from .errors import EntityError, UnknownValidator
from .models import CanonicalValue, DataKind, Shape, ValidationOutcome
from .registry import TypeRegistry, get_default_registry
from .validators import VALIDATORS, Validator

logger = logging.getLogger(__name__)

_CASTERS: dict[Shape, Callable[[Any], CanonicalValue]] = {
    Shape.STRING: cast_string,
    Shape.INTEGER: cast_int,
    Shape.FLOAT: cast_float,
    Shape.BOOLEAN: cast_bool,
}


def coerce(value: Any, kind: DataKind) -> CanonicalValue:
    """Best-effort conversion of `value` to the primitive shape of `kind`."""
    return _CASTERS[kind.shape](value)


def canonicalize(
    value: Any,
    type_name: str,
    registry: Optional[TypeRegistry] = None,
    validators: Optional[Mapping[DataKind, Validator]] = None,
) -> tuple[CanonicalValue, str]:
    """Return ``(canonical, fingerprint)`` for `value` interpreted as `type_name`.

    Raises UnknownType, UnknownValidator, FormatError or RangeRejection.
    """
    reg = get_default_registry() if registry is None else registry
    table = VALIDATORS if validators is None else validators

    kind = reg.resolve(type_name)
    func = table.get(kind)
    if func is None:
        raise UnknownValidator(kind)

    return func(coerce(value, kind))


def validate(
    value: Any,
    type_name: str,
    registry: Optional[TypeRegistry] = None,
    validators: Optional[Mapping[DataKind, Validator]] = None,
) -> ValidationOutcome:
    """Like `canonicalize`, but engine errors are returned in the outcome instead of raised."""
    try:
        canonical, fp = canonicalize(value, type_name, registry=registry, validators=validators)
    except EntityError as e:
        logger.debug("rejected %r as %s: %s", value, type_name, e)
        return ValidationOutcome(value=None, fingerprint=None, error=e)
    return ValidationOutcome(value=canonical, fingerprint=fp)
