from __future__ import annotations

import logging
from typing import Any, List, Optional

from mabank.constants.formats import DIGITS_RX, RIB_BANK_CODE_SLICE, RIB_CHUNK_SIZE, RIB_KEY_LENGTH
from mabank.parsers.identifiers import normalize_rib
from mabank.registry import BankRegistry, current_registry

from .error_codes import ErrorCode
from .result import ValidationResult, failure, report_rejection, success

logger = logging.getLogger(__name__)


def _chunks(payload: str) -> List[int]:
    return [int(payload[i:i + RIB_CHUNK_SIZE]) for i in range(0, len(payload), RIB_CHUNK_SIZE)]


def compute_rib_key(payload: str) -> int:
    """Expected 2-digit key for a RIB payload (the RIB minus its key).

    Chunks of up to 7 digits are folded modulo 97, each shifted by the number
    of digits of the parsed chunk. A chunk such as "0000120" parses to 120 and
    therefore shifts by 10**3, not 10**7.
    """
    remainder = 0
    for chunk in _chunks(payload):
        remainder = (remainder * 10 ** len(str(chunk)) + chunk) % 97
    return (97 - remainder) % 97


def check_rib(value: Any, *, registry: Optional[BankRegistry] = None) -> ValidationResult:
    if not isinstance(value, str):
        return failure(
            ErrorCode.INVALID_INPUT_TYPE,
            "RIB must be a string",
            provided_type=type(value).__name__,
        )
    rib = normalize_rib(value)

    bank_code = rib[RIB_BANK_CODE_SLICE]
    reg = current_registry(registry)
    bank = reg.get(bank_code) if reg is not None else None
    if bank is None:
        return failure(ErrorCode.BANK_NOT_FOUND, "Invalid or inactive bank code", bank_code=bank_code)

    if len(rib) != bank.rib_length:
        return failure(
            ErrorCode.INVALID_RIB_LENGTH,
            "Invalid RIB length",
            bank_code=bank_code,
            expected=bank.rib_length,
            received=len(rib),
        )
    # Key arithmetic needs plain ASCII digits whatever the bank pattern allows
    if not bank.matches_rib(rib) or not DIGITS_RX.match(rib) or len(rib) <= RIB_KEY_LENGTH:
        return failure(
            ErrorCode.INVALID_RIB_FORMAT,
            "RIB does not match bank-specific format",
            bank_code=bank_code,
            rib=rib,
        )

    payload, key = rib[:-RIB_KEY_LENGTH], rib[-RIB_KEY_LENGTH:]
    expected = compute_rib_key(payload)
    actual = int(key, 10)
    if expected != actual:
        return failure(
            ErrorCode.INVALID_RIB_CHECKSUM,
            "Invalid RIB checksum",
            expected=expected,
            actual=actual,
            rib=rib,
        )
    return success(rib=rib, bank_code=bank_code)


def validate_rib(value: Any, *, registry: Optional[BankRegistry] = None) -> bool:
    """True when `value` is a RIB of an active bank with the right length, format and key."""
    result = check_rib(value, registry=registry)
    if not result.ok:
        report_rejection(result, logger)
    return result.ok
