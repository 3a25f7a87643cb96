"""Tests for public API surface."""

from __future__ import annotations

import sophone


class TestPublicAPI:
    def test_version_string(self) -> None:
        assert isinstance(sophone.__version__, str)
        assert sophone.__version__ == "1.2.0"

    def test_all_names_importable(self) -> None:
        for name in sophone.__all__:
            obj = getattr(sophone, name)
            assert obj is not None, f"{name} is None"

    def test_safe_twins_exported(self) -> None:
        throwing = [
            "normalize_e164",
            "format_local",
            "format_international",
            "get_operator",
            "get_operator_info",
            "get_wallet",
            "get_wallet_info",
        ]
        for name in throwing:
            assert name in sophone.__all__
            assert f"{name}_safe" in sophone.__all__

    def test_subpackage_imports(self) -> None:
        from sophone.core import normalize, validator
        from sophone.models import enums

        assert normalize is not None
        assert validator is not None
        assert enums is not None

    def test_exception_classes(self) -> None:
        assert issubclass(sophone.SomaliPhoneError, Exception)

    def test_constants(self) -> None:
        assert sophone.COUNTRY_CODE == "252"
        assert sophone.NSN_LENGTH == 9
        assert sophone.ERROR_CODES is sophone.ErrorCode
