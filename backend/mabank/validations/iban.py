from __future__ import annotations

import logging
from typing import Any, Optional

from mabank.constants.formats import COUNTRY_CODE, DIGITS_RX, IBAN_BANK_CODE_SLICE, IBAN_STRUCTURE_RX
from mabank.parsers.identifiers import normalize_iban, normalize_rib
from mabank.registry import BankRegistry, current_registry

from .error_codes import ErrorCode
from .result import ValidationResult, failure, report_rejection, success

logger = logging.getLogger(__name__)


def _numeric_form(s: str) -> str:
    # A -> 10 ... Z -> 35, digits unchanged
    return "".join(c if c.isdigit() else str(ord(c) - 55) for c in s)


def mod97(digits: str) -> int:
    """Remainder of a decimal digit string by 97, folded digit by digit."""
    remainder = 0
    for ch in digits:
        remainder = (remainder * 10 + int(ch)) % 97
    return remainder


def iban_remainder(iban: str) -> int:
    """ISO 7064 MOD 97-10 remainder of a normalized IBAN (valid when 1)."""
    rearranged = iban[4:] + iban[:4]
    return mod97(_numeric_form(rearranged))


def compute_check_digits(bban: str, country: str = COUNTRY_CODE) -> str:
    return f"{98 - iban_remainder(country + '00' + bban):02d}"


def rib_to_iban(rib: str) -> Optional[str]:
    """Moroccan IBAN carrying `rib` as its BBAN, or None if `rib` is not numeric.

    The RIB itself is not validated here; use check_rib for that.
    """
    if not isinstance(rib, str):
        return None
    bban = normalize_rib(rib)
    if not DIGITS_RX.match(bban):
        return None
    return COUNTRY_CODE + compute_check_digits(bban) + bban


def check_iban(value: Any, *, registry: Optional[BankRegistry] = None) -> ValidationResult:
    if not isinstance(value, str):
        return failure(
            ErrorCode.INVALID_INPUT_TYPE,
            "IBAN must be a string",
            provided_type=type(value).__name__,
        )
    iban = normalize_iban(value)
    if not IBAN_STRUCTURE_RX.match(iban):
        return failure(ErrorCode.INVALID_IBAN_FORMAT, "Invalid IBAN format", iban=iban)

    bank_code = iban[IBAN_BANK_CODE_SLICE]
    reg = current_registry(registry)
    if reg is None:
        return failure(ErrorCode.INVALID_BANK_CODE, "Bank registry unavailable", bank_code=bank_code)
    bank = reg.get(bank_code)
    if bank is None:
        return failure(ErrorCode.INVALID_BANK_CODE, "Invalid or inactive bank code", bank_code=bank_code)
    if not bank.matches_iban(iban):
        return failure(
            ErrorCode.INVALID_IBAN_FORMAT,
            "IBAN does not match bank-specific format",
            bank_code=bank_code,
            iban=iban,
        )

    remainder = iban_remainder(iban)
    if remainder != 1:
        return failure(
            ErrorCode.INVALID_IBAN_CHECKSUM,
            "Invalid IBAN checksum",
            iban=iban,
            remainder=remainder,
        )
    return success(iban=iban, bank_code=bank_code)


def validate_iban(value: Any, *, registry: Optional[BankRegistry] = None) -> bool:
    """True when `value` is a well-formed, checksum-valid IBAN of an active Moroccan bank."""
    result = check_iban(value, registry=registry)
    if not result.ok:
        report_rejection(result, logger)
    return result.ok
