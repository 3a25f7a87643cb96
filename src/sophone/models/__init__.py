"""Data models for sophone."""

from sophone.models.carrier import OperatorInfo, WalletInfo
from sophone.models.enums import ErrorCode
from sophone.models.result import (
    BatchNormalizationResult,
    BatchValidationResult,
    PhoneDetails,
    ValidationFailure,
    ValidationIssue,
    ValidationResult,
    ValidationSuccess,
)

__all__ = [
    "BatchNormalizationResult",
    "BatchValidationResult",
    "ErrorCode",
    "OperatorInfo",
    "PhoneDetails",
    "ValidationFailure",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSuccess",
    "WalletInfo",
]
