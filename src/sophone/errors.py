"""Exceptions raised by the throwing API."""

from __future__ import annotations

from typing import Any

from sophone.models.enums import ErrorCode
from sophone.models.result import ValidationIssue


class SomaliPhoneError(Exception):
    """A number failed validation.

    Attributes:
        message: Human-readable reason.
        code: One of :class:`ErrorCode`.
        details: Structured payload produced by the validator, unchanged.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode | str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details

    @classmethod
    def from_issue(cls, issue: ValidationIssue) -> SomaliPhoneError:
        return cls(issue.message, issue.code, issue.details)

    def to_issue(self) -> ValidationIssue:
        try:
            code = ErrorCode(self.code)
        except ValueError:
            code = ErrorCode.UNKNOWN
        return ValidationIssue(
            code=code,
            message=self.message,
            details=self.details or {},
        )

    def __repr__(self) -> str:
        return f"SomaliPhoneError(code={self.code!r}, message={self.message!r})"
