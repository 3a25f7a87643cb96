"""Tests for the static operator and wallet tables."""

from __future__ import annotations

from types import MappingProxyType

import pytest
from pydantic import ValidationError

from sophone import (
    MOBILE_PREFIXES,
    OPERATOR_INFO,
    WALLET_INFO,
    get_all_operators,
    get_all_wallets,
    get_operator_by_prefix,
    get_supported_wallets,
    get_wallet_by_name,
    get_wallet_by_operator,
)
from sophone.registry import OPERATOR_BY_PREFIX, WALLET_BY_OPERATOR


class TestTables:
    def test_prefix_set(self) -> None:
        assert MOBILE_PREFIXES == {
            "61", "62", "63", "64", "65", "66", "68", "69", "71", "77", "90",
        }  # fmt: skip

    def test_each_prefix_has_one_operator(self) -> None:
        allocated = [p for op in OPERATOR_INFO.values() for p in op.prefixes]
        assert len(allocated) == len(set(allocated))
        assert set(allocated) == MOBILE_PREFIXES

    def test_prefix_table_matches_records(self) -> None:
        for prefix, key in OPERATOR_BY_PREFIX.items():
            assert prefix in OPERATOR_INFO[key].prefixes

    def test_operator_wallets_exist(self) -> None:
        for wallet in WALLET_BY_OPERATOR.values():
            assert wallet in WALLET_INFO

    def test_tables_read_only(self) -> None:
        assert isinstance(OPERATOR_INFO, MappingProxyType)
        with pytest.raises(TypeError):
            OPERATOR_INFO["New"] = OPERATOR_INFO["Hormuud"]  # type: ignore[index]

    def test_records_frozen(self) -> None:
        with pytest.raises(ValidationError):
            OPERATOR_INFO["Hormuud"].name = "Other"  # type: ignore[misc]

    def test_hormuud_record(self) -> None:
        hormuud = OPERATOR_INFO["Hormuud"]
        assert hormuud.name == "Hormuud Telecom Somalia"
        assert "61" in hormuud.prefixes
        assert hormuud.website == "https://hormuud.com"

    def test_golis_has_no_wallet(self) -> None:
        assert OPERATOR_INFO["Golis"].wallet is None


class TestOperatorLookups:
    def test_all_operators(self) -> None:
        operators = get_all_operators()
        assert len(operators) == 8
        assert [op.key for op in operators][:3] == ["Hormuud", "Somtel", "Telesom"]
        for op in operators:
            assert op.name
            assert op.prefixes
            assert op.type == "GSM"

    def test_by_prefix(self) -> None:
        assert get_operator_by_prefix("61") == "Hormuud"
        assert get_operator_by_prefix("62") == "Somtel"
        assert get_operator_by_prefix("90") == "Golis"

    def test_by_numeric_prefix(self) -> None:
        assert get_operator_by_prefix(61) == "Hormuud"
        assert get_operator_by_prefix(90) == "Golis"

    @pytest.mark.parametrize("prefix", ["11", "", "611", None, 11, True, 6.1])
    def test_by_prefix_unknown(self, prefix: object) -> None:
        assert get_operator_by_prefix(prefix) is None


class TestWalletLookups:
    def test_supported_wallets(self) -> None:
        assert get_supported_wallets() == ["EVC", "Sahal", "ZAAD", "eDahab", "Jeeb"]

    def test_all_wallets(self) -> None:
        wallets = get_all_wallets()
        assert [w.name for w in wallets] == get_supported_wallets()

    def test_by_name(self) -> None:
        evc = get_wallet_by_name("EVC")
        assert evc is not None
        assert evc.full_name == "EVC Plus"
        assert evc.operating_operator == "Hormuud"
        assert evc.features[0] == "Send money"

    def test_multi_operator_wallets_enumerable(self) -> None:
        for name in ("eDahab", "Jeeb"):
            wallet = get_wallet_by_name(name)
            assert wallet is not None
            assert wallet.operating_operator == "Multiple"

    def test_multi_operator_wallets_unreachable_from_operators(self) -> None:
        reachable = set(WALLET_BY_OPERATOR.values())
        assert "eDahab" not in reachable
        assert "Jeeb" not in reachable
        assert get_wallet_by_operator("Multiple") is None

    def test_by_operator(self) -> None:
        zaad = get_wallet_by_operator("Telesom")
        assert zaad is not None and zaad.name == "ZAAD"
        assert get_wallet_by_operator("SomLink") is None
        assert get_wallet_by_operator("Nobody") is None

    @pytest.mark.parametrize("name", ["evc", "", None, 1])
    def test_by_name_unknown(self, name: object) -> None:
        assert get_wallet_by_name(name) is None
