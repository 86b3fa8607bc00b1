from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    OK = "OK"

    # Input
    INVALID_INPUT_TYPE = "INVALID_INPUT_TYPE"

    # IBAN
    INVALID_IBAN_FORMAT = "INVALID_IBAN_FORMAT"
    INVALID_BANK_CODE = "INVALID_BANK_CODE"
    INVALID_IBAN_CHECKSUM = "INVALID_IBAN_CHECKSUM"

    # RIB
    INVALID_RIB_FORMAT = "INVALID_RIB_FORMAT"
    INVALID_RIB_LENGTH = "INVALID_RIB_LENGTH"
    INVALID_RIB_CHECKSUM = "INVALID_RIB_CHECKSUM"

    # Lookups
    BANK_NOT_FOUND = "BANK_NOT_FOUND"
    BRANCH_NOT_FOUND = "BRANCH_NOT_FOUND"

    # Amount
    INVALID_AMOUNT = "INVALID_AMOUNT"

    @property
    def reference(self) -> str:
        """Stable numbered reference (BANK_001 ...) shared with other bank tooling."""
        return _REFERENCES.get(self, "")


_REFERENCES = {
    ErrorCode.INVALID_INPUT_TYPE: "BANK_001",
    ErrorCode.INVALID_IBAN_FORMAT: "BANK_002",
    ErrorCode.INVALID_BANK_CODE: "BANK_003",
    ErrorCode.INVALID_IBAN_CHECKSUM: "BANK_004",
    ErrorCode.INVALID_RIB_FORMAT: "BANK_005",
    ErrorCode.INVALID_RIB_LENGTH: "BANK_006",
    ErrorCode.INVALID_RIB_CHECKSUM: "BANK_007",
    ErrorCode.BANK_NOT_FOUND: "BANK_008",
    ErrorCode.INVALID_AMOUNT: "BANK_009",
    ErrorCode.BRANCH_NOT_FOUND: "BANK_010",
}
