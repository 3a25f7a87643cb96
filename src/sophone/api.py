"""Public entry points.

Every operation exists in two calling conventions built from the same
code path:

* throwing: ``normalize_e164(x)`` raises :class:`SomaliPhoneError`
* safe: ``normalize_e164_safe(x)`` returns ``None`` instead

``validate`` returns a tagged result object and never raises.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from sophone import registry
from sophone.core.format import to_e164, to_international, to_local
from sophone.core.normalize import to_nsn
from sophone.core.validator import classify
from sophone.errors import SomaliPhoneError
from sophone.models.carrier import OperatorInfo, WalletInfo
from sophone.models.result import (
    BatchNormalizationResult,
    BatchValidationResult,
    PhoneDetails,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
)

logger = logging.getLogger("sophone.api")

_T = TypeVar("_T")


def _require_nsn(value: Any) -> str:
    """Return the NSN of a valid number, or raise the validator's verdict."""
    issue = classify(value)
    if issue is not None:
        raise SomaliPhoneError.from_issue(issue)
    return to_nsn(value)


def _safe(func: Callable[[Any], _T]) -> Callable[[Any], _T | None]:
    """Build the non-throwing twin of a throwing entry point."""

    @functools.wraps(func)
    def wrapper(value: Any) -> _T | None:
        try:
            return func(value)
        except SomaliPhoneError:
            return None
        except Exception:
            logger.exception("Unexpected error in %s(%r)", func.__name__, value)
            return None

    wrapper.__name__ = f"{func.__name__}_safe"
    wrapper.__qualname__ = wrapper.__name__
    wrapper.__doc__ = f"Like :func:`{func.__name__}` but returns ``None`` on failure."
    return wrapper


def _operator_of(nsn: str) -> str | None:
    return registry.operator_for_prefix(nsn[: registry.PREFIX_LENGTH])


def _details(value: str, nsn: str) -> PhoneDetails:
    operator = _operator_of(nsn)
    wallet = registry.wallet_for_operator(operator)
    return PhoneDetails(
        input=value,
        nsn=nsn,
        e164=to_e164(nsn),
        local=to_local(nsn),
        international=to_international(nsn),
        operator=operator,
        operator_info=registry.operator_info(operator),
        wallet=wallet,
        wallet_info=registry.wallet_info(wallet),
    )


# -- validation ---------------------------------------------------------------


def is_valid_somali_mobile(value: Any) -> bool:
    """Check a number without raising. Agrees with ``validate(value).ok``."""
    return classify(value) is None


is_valid_mobile = is_valid_somali_mobile


def validate(value: Any) -> ValidationResult:
    """Validate a number and compute every derived field at once.

    Returns:
        ``ValidationSuccess`` carrying :class:`PhoneDetails`, or
        ``ValidationFailure`` carrying the :class:`ValidationIssue`.

    Example:
        >>> validate("0611234567").value.operator
        'Hormuud'
        >>> validate("123").error.code
        <ErrorCode.INVALID_LENGTH: 'INVALID_LENGTH'>
    """
    issue = classify(value)
    if issue is not None:
        return ValidationFailure(error=issue)
    return ValidationSuccess(value=_details(value, to_nsn(value)))


# -- throwing convention ------------------------------------------------------


def normalize_e164(value: Any) -> str:
    """Format as E.164, e.g. ``+252611234567``.

    Raises:
        SomaliPhoneError: If the number is invalid.
    """
    return to_e164(_require_nsn(value))


def format_local(value: Any) -> str:
    """Format for domestic dialing, e.g. ``0611 234 567``.

    Raises:
        SomaliPhoneError: If the number is invalid.
    """
    return to_local(_require_nsn(value))


def format_international(value: Any) -> str:
    """Format for display abroad, e.g. ``+252 61 123 4567``.

    Raises:
        SomaliPhoneError: If the number is invalid.
    """
    return to_international(_require_nsn(value))


def get_operator(value: Any) -> str | None:
    """Operator short name for a valid number, ``None`` if unallocated.

    Raises:
        SomaliPhoneError: If the number is invalid.
    """
    return _operator_of(_require_nsn(value))


def get_operator_info(value: Any) -> OperatorInfo | None:
    """Full operator record for a valid number.

    Raises:
        SomaliPhoneError: If the number is invalid.
    """
    return registry.operator_info(get_operator(value))


def get_wallet(value: Any) -> str | None:
    """Primary mobile-money wallet of the number's operator, if any.

    Raises:
        SomaliPhoneError: If the number is invalid.
    """
    return registry.wallet_for_operator(get_operator(value))


def get_wallet_info(value: Any) -> WalletInfo | None:
    """Full wallet record for a valid number.

    Raises:
        SomaliPhoneError: If the number is invalid.
    """
    return registry.wallet_info(get_wallet(value))


# -- safe convention ----------------------------------------------------------

normalize_e164_safe = _safe(normalize_e164)
format_local_safe = _safe(format_local)
format_international_safe = _safe(format_international)
get_operator_safe = _safe(get_operator)
get_operator_info_safe = _safe(get_operator_info)
get_wallet_safe = _safe(get_wallet)
get_wallet_info_safe = _safe(get_wallet_info)


# -- registry lookups ---------------------------------------------------------


def get_all_operators() -> list[OperatorInfo]:
    return list(registry.OPERATOR_INFO.values())


def get_all_wallets() -> list[WalletInfo]:
    """All known wallets, including ones no operator lookup reaches."""
    return list(registry.WALLET_INFO.values())


def get_operator_by_prefix(prefix: Any) -> str | None:
    """Operator for a two-digit prefix; ``61`` and ``"61"`` are equivalent."""
    if isinstance(prefix, int) and not isinstance(prefix, bool):
        prefix = str(prefix)
    if not isinstance(prefix, str):
        return None
    return registry.operator_for_prefix(prefix)


def get_wallet_by_name(name: Any) -> WalletInfo | None:
    if not isinstance(name, str):
        return None
    return registry.wallet_info(name)


def get_wallet_by_operator(operator: Any) -> WalletInfo | None:
    if not isinstance(operator, str):
        return None
    return registry.wallet_info(registry.wallet_for_operator(operator))


def get_supported_wallets() -> list[str]:
    return list(registry.WALLET_INFO)


# -- batch --------------------------------------------------------------------


def validate_batch(numbers: Iterable[Any]) -> list[BatchValidationResult]:
    """Run :func:`validate` over each number, keeping input order."""
    return [BatchValidationResult.from_result(number, validate(number)) for number in numbers]


def normalize_batch(numbers: Iterable[Any]) -> list[BatchNormalizationResult]:
    """Run :func:`normalize_e164_safe` over each number, keeping input order."""
    return [
        BatchNormalizationResult(input=number, result=normalize_e164_safe(number))
        for number in numbers
    ]
