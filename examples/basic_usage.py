"""Validating and formatting Somali mobile numbers.

Demonstrates the sophone API on a handful of inputs. Shows:
- is_valid_somali_mobile: boolean check that never raises
- validate: result object with every derived field or the rejection reason
- *_safe functions: return None instead of raising
- Throwing functions: raise SomaliPhoneError with code and details
- Wallet lookups and batch processing

Run with:
    uv run python examples/basic_usage.py
"""

from __future__ import annotations

from sophone import (
    SomaliPhoneError,
    ValidationSuccess,
    format_local_safe,
    get_all_wallets,
    get_operator_safe,
    get_wallet_safe,
    is_valid_somali_mobile,
    normalize_batch,
    normalize_e164,
    normalize_e164_safe,
    validate,
)

TEST_NUMBERS = [
    "0611234567",  # Hormuud
    "0621234567",  # Somtel
    "0641234567",  # SomLink, no wallet
    "invalid",  # no digits
    "123",  # too short
    "12345678901234",  # too long
    "0111234567",  # unknown prefix
    "",
]


def main() -> None:
    print("=== sophone API examples ===")

    for number in TEST_NUMBERS:
        print(f'\nTesting: "{number}"')
        print(f"  Valid: {is_valid_somali_mobile(number)}")

        result = validate(number)
        if isinstance(result, ValidationSuccess):
            value = result.value
            print(f"  E164: {value.e164}")
            print(f"  Local: {value.local}")
            print(f"  International: {value.international}")
            print(f"  Operator: {value.operator or 'unknown'}")
            print(f"  Wallet: {value.wallet or 'none'}")
        else:
            print(f"  [{result.error.code}] {result.error.message}")

        print(f"  Safe E164: {normalize_e164_safe(number)}")
        print(f"  Safe Local: {format_local_safe(number)}")
        print(f"  Safe Operator: {get_operator_safe(number)}")
        print(f"  Safe Wallet: {get_wallet_safe(number)}")

        try:
            print(f"  Throwing E164: {normalize_e164(number)}")
        except SomaliPhoneError as exc:
            print(f"  Throwing E164 error: [{exc.code}] {exc.message}")

    print("\n=== Wallets ===")
    for wallet in get_all_wallets():
        ussd = f" dial {wallet.ussd_code}" if wallet.ussd_code else ""
        print(f"  {wallet.full_name} ({wallet.operating_operator}){ussd}")

    print("\n=== Batch ===")
    for entry in normalize_batch(TEST_NUMBERS[:4]):
        print(f"  {entry.input!r} -> {entry.result}")


if __name__ == "__main__":
    main()
