"""Free text and text-like indicators: strings, geo names, paths, phones, MIME types, regexes."""

from __future__ import annotations

import re
import unicodedata

from ..errors import FormatError
from ..fingerprint import fingerprint

# Letters, numbers, punctuation, symbols. Whitespace is checked separately.
_KEPT_CATEGORIES = frozenset("LNPS")

# Control characters that are Unicode White_Space. str.isspace() also
# accepts the U+001C..U+001F separators, which are not.
_WHITESPACE_CONTROLS = frozenset("\t\n\v\f\r\x85")

_WORD_RE = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")

_PHONE_RE = re.compile(
    r"(\+[1-9][0-9]{0,2})([ \t\n\f\r]?\([1-9][0-9]{0,3}\))?([ \t\n\f\r]?-?[0-9]{1,4}){1,3}"
)

# type "/" segments of [a-z0-9] joined by a single "+", "." or "-".
# Without a separator the subtype needs 3+ chars; inner segments need 2+.
_MIME_RE = re.compile(
    r"[a-z]+/(?:[a-z0-9]+(?:[+.\-][a-z0-9]{2,})*[+.\-][a-z0-9]+|[a-z0-9]{3,})"
)


def _is_white_space(ch: str) -> bool:
    if ch in _WHITESPACE_CONTROLS:
        return True
    return ch.isspace() and unicodedata.category(ch) != "Cc"


def _scrub(value: str) -> str:
    return "".join(
        ch if _is_white_space(ch) or unicodedata.category(ch)[0] in _KEPT_CATEGORIES else " "
        for ch in value
    )


def validate_string(value: str, insensitive: bool = False) -> tuple[str, str]:
    """Replace control/format/unassigned characters with spaces and reject blank text."""
    v = _scrub(value)

    try:
        v.encode("utf-8")
    except UnicodeEncodeError:
        raise FormatError("value is not an UTF-8 valid string") from None

    if not v.strip():
        raise FormatError("value cannot be empty")

    if insensitive:
        v = v.lower()
    return v, fingerprint(v)


def validate_istring(value: str) -> tuple[str, str]:
    return validate_string(value, insensitive=True)


def _title(value: str) -> str:
    return _WORD_RE.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:], value.lower())


def validate_city(value: str) -> tuple[str, str]:
    v = _title(value)
    return v, fingerprint(v)


def validate_country(value: str) -> tuple[str, str]:
    v = _title(value)
    return v, fingerprint(v)


def validate_path(value: str) -> tuple[str, str]:
    v = value.lower()
    # Heuristic: anything with a scheme separator is a URL, not a path.
    if "://" in v:
        raise FormatError(f"value is not valid path: {value}")
    return v, fingerprint(v)


def validate_phone(value: str) -> tuple[str, str]:
    if not _PHONE_RE.fullmatch(value):
        raise FormatError(f"invalid phone number: {value}")
    return value, fingerprint(value)


def validate_mime(value: str) -> tuple[str, str]:
    v = value.lower()
    if not _MIME_RE.fullmatch(v):
        raise FormatError(f"invalid MIME type: {value}")
    return v, fingerprint(v)


def validate_regex(value: str) -> tuple[str, str]:
    try:
        re.compile(value)
    except (re.error, RecursionError, OverflowError) as e:
        raise FormatError(f"invalid regular expression: {e}") from None
    return value, fingerprint(value)
