"""Tests for the error taxonomy and SomaliPhoneError."""

from __future__ import annotations

import pytest

from sophone import ERROR_CODES, ErrorCode, SomaliPhoneError, ValidationIssue


class TestErrorCode:
    def test_values(self) -> None:
        assert ERROR_CODES.INVALID_LENGTH == "INVALID_LENGTH"
        assert ERROR_CODES.INVALID_PREFIX == "INVALID_PREFIX"
        assert ERROR_CODES.UNKNOWN == "UNKNOWN"
        assert ERROR_CODES.INVALID_INPUT == "INVALID_INPUT"

    def test_count(self) -> None:
        assert len(ErrorCode) == 4

    def test_invalid_raises(self) -> None:
        with pytest.raises(ValueError):
            ErrorCode("NOPE")


class TestSomaliPhoneError:
    def test_attributes(self) -> None:
        error = SomaliPhoneError("Test message", "TEST_CODE", {"test": True})
        assert str(error) == "Test message"
        assert error.message == "Test message"
        assert error.code == "TEST_CODE"
        assert error.details == {"test": True}
        assert isinstance(error, Exception)

    def test_details_default_none(self) -> None:
        assert SomaliPhoneError("m", ErrorCode.INVALID_INPUT).details is None

    def test_round_trip_through_issue(self) -> None:
        issue = ValidationIssue(
            code=ErrorCode.INVALID_PREFIX, message="bad", details={"prefix": "11"}
        )
        error = SomaliPhoneError.from_issue(issue)
        assert error.code == ErrorCode.INVALID_PREFIX
        assert error.details == {"prefix": "11"}
        assert error.to_issue() == issue

    def test_unknown_code_maps_to_unknown(self) -> None:
        issue = SomaliPhoneError("m", "SOMETHING_ELSE").to_issue()
        assert issue.code == ErrorCode.UNKNOWN
        assert issue.details == {}

    def test_repr(self) -> None:
        error = SomaliPhoneError("m", ErrorCode.INVALID_LENGTH)
        assert "INVALID_LENGTH" in repr(error)
