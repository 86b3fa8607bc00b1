from .error_codes import ErrorCode
from .result import ValidationResult
from .iban import (
    check_iban,
    validate_iban,
    compute_check_digits,
    rib_to_iban,
)
from .rib import (
    check_rib,
    validate_rib,
    compute_rib_key,
)

__all__ = [
    "ErrorCode",
    "ValidationResult",
    "check_iban",
    "validate_iban",
    "compute_check_digits",
    "rib_to_iban",
    "check_rib",
    "validate_rib",
    "compute_rib_key",
]
