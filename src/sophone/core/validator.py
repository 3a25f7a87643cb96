"""Classify an input as a valid Somali mobile number or say why not."""

from __future__ import annotations

import logging
from typing import Any

from sophone.core.normalize import to_nsn
from sophone.models.enums import ErrorCode
from sophone.models.result import ValidationIssue
from sophone.registry import MOBILE_PREFIXES, NSN_LENGTH, PREFIX_LENGTH, SORTED_PREFIXES

logger = logging.getLogger("sophone.validator")


def classify(value: Any) -> ValidationIssue | None:
    """Validate ``value`` and return the first rule it breaks.

    Rules, checked in order:

    1. not a string, or empty: ``INVALID_INPUT``
    2. no digits left after reduction: ``INVALID_INPUT``
    3. fewer than 9 digits: ``INVALID_LENGTH``
    4. more than 9 digits: ``INVALID_LENGTH``
    5. unknown two-digit prefix: ``INVALID_PREFIX``

    Returns:
        ``None`` when the number is valid, otherwise the issue.
    """
    issue = _first_issue(value)
    if issue is not None:
        logger.debug("Rejected %r: %s", value, issue.code)
    return issue


def _first_issue(value: Any) -> ValidationIssue | None:
    if not isinstance(value, str) or not value:
        return ValidationIssue(
            code=ErrorCode.INVALID_INPUT,
            message="Phone number is required and must be a string",
            details={"input": value, "type": type(value).__name__},
        )

    nsn = to_nsn(value)
    if not nsn:
        return ValidationIssue(
            code=ErrorCode.INVALID_INPUT,
            message=f'"{value}" contains no valid digits',
            details={"input": value, "nsn": nsn},
        )

    length = len(nsn)
    if length != NSN_LENGTH:
        if length < NSN_LENGTH:
            message = (
                f'"{value}" is too short ({length} digits). '
                f"Somali mobile numbers need {NSN_LENGTH} digits"
            )
        else:
            message = (
                f'"{value}" is too long ({length} digits). '
                f"Somali mobile numbers need exactly {NSN_LENGTH} digits"
            )
        return ValidationIssue(
            code=ErrorCode.INVALID_LENGTH,
            message=message,
            details={
                "input": value,
                "nsn": nsn,
                "actual_length": length,
                "expected_length": NSN_LENGTH,
            },
        )

    prefix = nsn[:PREFIX_LENGTH]
    if prefix not in MOBILE_PREFIXES:
        valid_prefixes = list(SORTED_PREFIXES)
        return ValidationIssue(
            code=ErrorCode.INVALID_PREFIX,
            message=(
                f'"{value}" has invalid prefix "{prefix}". '
                f"Valid prefixes are: {', '.join(valid_prefixes)}"
            ),
            details={
                "input": value,
                "nsn": nsn,
                "prefix": prefix,
                "valid_prefixes": valid_prefixes,
            },
        )

    return None
