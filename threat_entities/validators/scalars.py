"""Primitive kinds. The dispatcher has already coerced the value, so these never fail."""

from __future__ import annotations

from ..fingerprint import fingerprint


def validate_integer(value: int) -> tuple[int, str]:
    return value, fingerprint(value)


def validate_float(value: float) -> tuple[float, str]:
    return value, fingerprint(value)


def validate_boolean(value: bool) -> tuple[bool, str]:
    return value, fingerprint(value)
