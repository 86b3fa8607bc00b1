from __future__ import annotations

import logging
from typing import Any, Optional

from mabank.parsers.identifiers import extract_bank_code, normalize_code
from mabank.registry import BankRecord, BankRegistry, current_registry
from mabank.validations.error_codes import ErrorCode
from mabank.validations.result import failure, report_rejection

logger = logging.getLogger(__name__)


def resolve_bank(code: Any, *, registry: Optional[BankRegistry] = None) -> Optional[BankRecord]:
    """Active bank for a bare bank code, a RIB or a full Moroccan IBAN.

    Returns None when the bank is unknown or inactive.
    """
    if not isinstance(code, str):
        report_rejection(
            failure(ErrorCode.INVALID_INPUT_TYPE, "Bank code must be a string", provided_type=type(code).__name__),
            logger,
        )
        return None
    bank_code = extract_bank_code(normalize_code(code))
    reg = current_registry(registry)
    bank = reg.get(bank_code) if reg is not None else None
    if bank is None:
        report_rejection(failure(ErrorCode.BANK_NOT_FOUND, "Bank not found or inactive", bank_code=bank_code), logger)
    return bank


def resolve_swift(
    code: Any,
    branch: Optional[str] = None,
    *,
    registry: Optional[BankRegistry] = None,
) -> Optional[str]:
    """SWIFT/BIC for a bank, or for one of its branches when `branch` is given.

    A branch code that the bank does not list yields None. Banks without a
    branch list always answer with their default code.
    """
    bank = resolve_bank(code, registry=registry)
    if bank is None:
        return None
    if branch and bank.branches:
        found = bank.branch(branch)
        if found is None:
            report_rejection(
                failure(
                    ErrorCode.BRANCH_NOT_FOUND,
                    "Branch not found",
                    bank_code=bank.code,
                    branch_code=branch,
                ),
                logger,
            )
            return None
        return found.swift
    return bank.swift
