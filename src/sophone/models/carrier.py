"""Operator and mobile-money wallet records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class OperatorInfo(BaseModel):
    """A mobile network operator.

    Attributes:
        key: Short name used by lookups (e.g., "Hormuud").
        name: Display name (e.g., "Hormuud Telecom Somalia").
        prefixes: Two-digit mobile prefixes allocated to the operator.
        website: Public website, if known.
        type: Network technology.
        wallet: Name of the operator's primary mobile-money wallet, if any.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    prefixes: tuple[str, ...]
    website: str | None = None
    type: str = "GSM"
    wallet: str | None = None


class WalletInfo(BaseModel):
    """A mobile-money wallet.

    ``operating_operator`` may name something outside the operator table,
    e.g. ``"Multiple"`` for wallets shared across networks.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    full_name: str
    operating_operator: str
    description: str
    features: tuple[str, ...] = ()
    website: str | None = None
    ussd_code: str | None = None
