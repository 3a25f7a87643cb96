"""String enums for sophone."""

from __future__ import annotations

from enum import StrEnum, unique


@unique
class ErrorCode(StrEnum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_PREFIX = "INVALID_PREFIX"
    # Reserved, no current rule produces it
    UNKNOWN = "UNKNOWN"
