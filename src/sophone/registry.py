"""Static operator and wallet tables.

A snapshot of public allocation data. The tables are read-only mappings
built once at import and shared by every caller.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from sophone.models.carrier import OperatorInfo, WalletInfo

logger = logging.getLogger("sophone.registry")

NSN_LENGTH = 9
PREFIX_LENGTH = 2

_OPERATORS = (
    OperatorInfo(
        key="Hormuud",
        name="Hormuud Telecom Somalia",
        prefixes=("61", "77"),
        website="https://hormuud.com",
        wallet="EVC",
    ),
    OperatorInfo(
        key="Somtel",
        name="Somtel Network",
        prefixes=("62", "65", "66"),
        website="https://somtel.com",
        wallet="Sahal",
    ),
    OperatorInfo(
        key="Telesom",
        name="Telesom",
        prefixes=("63",),
        website="https://telesom.net",
        wallet="ZAAD",
    ),
    OperatorInfo(key="SomLink", name="SomLink", prefixes=("64",)),
    OperatorInfo(key="SomNet", name="SomNet", prefixes=("68",)),
    OperatorInfo(key="NationLink", name="NationLink Telecom", prefixes=("69",)),
    OperatorInfo(key="Amtel", name="Amtel", prefixes=("71",)),
    # No primary wallet on record for Golis
    OperatorInfo(
        key="Golis",
        name="Golis Telecom",
        prefixes=("90",),
        website="https://golistelecom.com",
    ),
)

_WALLETS = (
    WalletInfo(
        name="EVC",
        full_name="EVC Plus",
        operating_operator="Hormuud",
        description="Hormuud's mobile money service for transfers and payments",
        features=("Send money", "Receive money", "Pay bills", "Buy airtime", "Merchant payments"),
        website="https://hormuud.com",
        ussd_code="*770#",
    ),
    WalletInfo(
        name="Sahal",
        full_name="Sahal",
        operating_operator="Somtel",
        description="Mobile money service on the Somtel network",
        features=("Send money", "Receive money", "Pay bills", "Buy airtime"),
    ),
    WalletInfo(
        name="ZAAD",
        full_name="ZAAD Service",
        operating_operator="Telesom",
        description="Telesom's mobile money service",
        features=("Send money", "Receive money", "Pay bills", "Buy airtime", "Merchant payments"),
        website="https://telesom.net",
        ussd_code="*880#",
    ),
    WalletInfo(
        name="eDahab",
        full_name="eDahab",
        operating_operator="Multiple",
        description="Mobile money service available across several networks",
        features=("Send money", "Receive money", "Pay bills"),
    ),
    WalletInfo(
        name="Jeeb",
        full_name="Jeeb",
        operating_operator="Multiple",
        description="Digital wallet usable across several networks",
        features=("Send money", "Receive money", "Online payments"),
    ),
)

OPERATOR_INFO: Mapping[str, OperatorInfo] = MappingProxyType({op.key: op for op in _OPERATORS})
WALLET_INFO: Mapping[str, WalletInfo] = MappingProxyType({w.name: w for w in _WALLETS})
OPERATOR_BY_PREFIX: Mapping[str, str] = MappingProxyType(
    {prefix: op.key for op in _OPERATORS for prefix in op.prefixes}
)
WALLET_BY_OPERATOR: Mapping[str, str] = MappingProxyType(
    {op.key: op.wallet for op in _OPERATORS if op.wallet is not None}
)
MOBILE_PREFIXES: frozenset[str] = frozenset(OPERATOR_BY_PREFIX)
SORTED_PREFIXES: tuple[str, ...] = tuple(sorted(MOBILE_PREFIXES))


def _check_tables() -> None:
    """Fail at import if the tables contradict each other."""
    allocated = [p for op in _OPERATORS for p in op.prefixes]
    if len(allocated) != len(set(allocated)):
        raise RuntimeError("A mobile prefix is allocated to more than one operator")
    for prefix in allocated:
        if len(prefix) != PREFIX_LENGTH or not prefix.isdigit():
            raise RuntimeError(f"Malformed mobile prefix {prefix!r}")
    for operator, wallet in WALLET_BY_OPERATOR.items():
        if wallet not in WALLET_INFO:
            raise RuntimeError(f"Operator {operator!r} references unknown wallet {wallet!r}")


_check_tables()
logger.debug(
    "Loaded %d operators, %d wallets, %d prefixes",
    len(OPERATOR_INFO),
    len(WALLET_INFO),
    len(MOBILE_PREFIXES),
)


def operator_for_prefix(prefix: str) -> str | None:
    return OPERATOR_BY_PREFIX.get(prefix)


def operator_info(operator: str | None) -> OperatorInfo | None:
    if operator is None:
        return None
    return OPERATOR_INFO.get(operator)


def wallet_for_operator(operator: str | None) -> str | None:
    """Primary wallet of an operator.

    One direction only: wallets run by ``"Multiple"`` operators are never
    returned here.
    """
    if operator is None:
        return None
    return WALLET_BY_OPERATOR.get(operator)


def wallet_info(wallet: str | None) -> WalletInfo | None:
    if wallet is None:
        return None
    return WALLET_INFO.get(wallet)
