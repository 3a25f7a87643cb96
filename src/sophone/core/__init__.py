"""Normalization, validation and formatting primitives."""

from sophone.core.format import to_e164, to_international, to_local
from sophone.core.normalize import canonical_digits, to_nsn
from sophone.core.validator import classify

__all__ = [
    "canonical_digits",
    "classify",
    "to_e164",
    "to_international",
    "to_local",
    "to_nsn",
]
