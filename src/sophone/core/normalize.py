"""Reduce free-form input to a National Significant Number (NSN)."""

from __future__ import annotations

import re
from typing import Any

COUNTRY_CODE = "252"
INTERNATIONAL_PREFIX = "00"
TRUNK_PREFIX = "0"

# ASCII only: ``\d`` would also keep Arabic-Indic and other Unicode digits
_NON_DIAL_CHARS = re.compile(r"[^0-9+]")


def canonical_digits(value: Any) -> str:
    """Strip everything but ASCII digits and a leading ``+``.

    Non-string input yields ``""``. A ``+`` anywhere but the first position
    is dropped.

    Example:
        >>> canonical_digits("+252 (61) 123-4567")
        '+252611234567'
        >>> canonical_digits("61+123")
        '61123'
    """
    if not isinstance(value, str):
        return ""
    cleaned = _NON_DIAL_CHARS.sub("", value)
    if cleaned.startswith("+"):
        return "+" + cleaned[1:].replace("+", "")
    return cleaned.replace("+", "")


def to_nsn(value: Any) -> str:
    """Reduce input to its NSN candidate.

    Drops, in order: a leading ``+``, then ``00252`` or ``252``, then a
    single trunk ``0``. The remainder is returned as-is, so it may be empty
    or have the wrong length; the validator judges it.

    Example:
        >>> to_nsn("+252 61 123 4567")
        '611234567'
        >>> to_nsn("0611234567")
        '611234567'
        >>> to_nsn(None)
        ''
    """
    digits = canonical_digits(value)
    if digits.startswith("+"):
        digits = digits[1:]

    full_prefix = INTERNATIONAL_PREFIX + COUNTRY_CODE
    if digits.startswith(full_prefix):
        digits = digits[len(full_prefix) :]
    elif digits.startswith(COUNTRY_CODE):
        digits = digits[len(COUNTRY_CODE) :]

    if digits.startswith(TRUNK_PREFIX):
        digits = digits[len(TRUNK_PREFIX) :]
    return digits
