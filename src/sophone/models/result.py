"""Validation and batch result models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from sophone.models.carrier import OperatorInfo, WalletInfo
from sophone.models.enums import ErrorCode


class ValidationIssue(BaseModel):
    """Why an input was rejected."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class PhoneDetails(BaseModel):
    """Every derived field of a valid number."""

    input: str
    nsn: str
    e164: str
    local: str
    international: str
    operator: str | None = None
    operator_info: OperatorInfo | None = None
    wallet: str | None = None
    wallet_info: WalletInfo | None = None


class ValidationSuccess(BaseModel):
    ok: Literal[True] = True
    value: PhoneDetails


class ValidationFailure(BaseModel):
    ok: Literal[False] = False
    error: ValidationIssue


ValidationResult = ValidationSuccess | ValidationFailure


class BatchValidationResult(BaseModel):
    """One entry of :func:`sophone.validate_batch`, tagged with its input."""

    input: Any = None
    ok: bool
    value: PhoneDetails | None = None
    error: ValidationIssue | None = None

    @classmethod
    def from_result(cls, raw: Any, result: ValidationResult) -> BatchValidationResult:
        if isinstance(result, ValidationSuccess):
            return cls(input=raw, ok=True, value=result.value)
        return cls(input=raw, ok=False, error=result.error)


class BatchNormalizationResult(BaseModel):
    """One entry of :func:`sophone.normalize_batch`."""

    input: Any = None
    result: str | None = None
