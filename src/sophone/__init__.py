"""sophone - Somali mobile number validation, formatting and operator lookup."""

from sophone._version import __version__
from sophone.api import (
    format_international,
    format_international_safe,
    format_local,
    format_local_safe,
    get_all_operators,
    get_all_wallets,
    get_operator,
    get_operator_by_prefix,
    get_operator_info,
    get_operator_info_safe,
    get_operator_safe,
    get_supported_wallets,
    get_wallet,
    get_wallet_by_name,
    get_wallet_by_operator,
    get_wallet_info,
    get_wallet_info_safe,
    get_wallet_safe,
    is_valid_mobile,
    is_valid_somali_mobile,
    normalize_batch,
    normalize_e164,
    normalize_e164_safe,
    validate,
    validate_batch,
)
from sophone.core.normalize import COUNTRY_CODE, to_nsn
from sophone.errors import SomaliPhoneError
from sophone.models import (
    BatchNormalizationResult,
    BatchValidationResult,
    ErrorCode,
    OperatorInfo,
    PhoneDetails,
    ValidationFailure,
    ValidationIssue,
    ValidationResult,
    ValidationSuccess,
    WalletInfo,
)
from sophone.registry import MOBILE_PREFIXES, NSN_LENGTH, OPERATOR_INFO, WALLET_INFO

ERROR_CODES = ErrorCode

__all__ = [
    "BatchNormalizationResult",
    "BatchValidationResult",
    "COUNTRY_CODE",
    "ERROR_CODES",
    "ErrorCode",
    "MOBILE_PREFIXES",
    "NSN_LENGTH",
    "OPERATOR_INFO",
    "OperatorInfo",
    "PhoneDetails",
    "SomaliPhoneError",
    "ValidationFailure",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSuccess",
    "WALLET_INFO",
    "WalletInfo",
    "__version__",
    "format_international",
    "format_international_safe",
    "format_local",
    "format_local_safe",
    "get_all_operators",
    "get_all_wallets",
    "get_operator",
    "get_operator_by_prefix",
    "get_operator_info",
    "get_operator_info_safe",
    "get_operator_safe",
    "get_supported_wallets",
    "get_wallet",
    "get_wallet_by_name",
    "get_wallet_by_operator",
    "get_wallet_info",
    "get_wallet_info_safe",
    "get_wallet_safe",
    "is_valid_mobile",
    "is_valid_somali_mobile",
    "normalize_batch",
    "normalize_e164",
    "normalize_e164_safe",
    "to_nsn",
    "validate",
    "validate_batch",
]
