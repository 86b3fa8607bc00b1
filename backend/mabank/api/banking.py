from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from mabank.parsers.identifiers import (
    extract_bank_code,
    format_iban,
    format_rib,
    normalize_code,
    normalize_iban,
    normalize_rib,
)
from mabank.registry import BankRecord, current_registry
from mabank.schemas.banking import (
    AmountWordsOut,
    BankOut,
    BranchOut,
    IdentifierCheck,
    IdentifierPayload,
    SwiftOut,
)
from mabank.services.amount_words import CONVERSION_ERROR, amount_to_words
from mabank.services.resolver import resolve_bank, resolve_swift
from mabank.validations import rib_to_iban, validate_iban, validate_rib

router = APIRouter(prefix="/banking", tags=["banking"])


def _bank_out(bank: BankRecord) -> BankOut:
    return BankOut(
        code=bank.code,
        name=bank.name,
        swift=bank.swift,
        rib_length=bank.rib_length,
        branches=[BranchOut(code=b.code, swift=b.swift) for b in bank.branches],
    )


@router.post("/iban/validate", response_model=IdentifierCheck)
async def check_iban_endpoint(payload: IdentifierPayload) -> IdentifierCheck:
    """Validate an IBAN. Rejections only say `valid: false`; the reason goes to the logs."""
    ok = validate_iban(payload.value)
    clean = normalize_iban(payload.value)
    return IdentifierCheck(
        valid=ok,
        normalized=clean,
        formatted=format_iban(clean),
        bank_code=extract_bank_code(clean) if ok else None,
    )


@router.post("/rib/validate", response_model=IdentifierCheck)
async def check_rib_endpoint(payload: IdentifierPayload) -> IdentifierCheck:
    ok = validate_rib(payload.value)
    clean = normalize_rib(payload.value)
    return IdentifierCheck(
        valid=ok,
        normalized=clean,
        formatted=format_rib(clean),
        bank_code=extract_bank_code(clean) if ok else None,
        iban=rib_to_iban(clean) if ok else None,
    )


@router.get("/banks", response_model=List[BankOut])
async def list_banks() -> List[BankOut]:
    reg = current_registry()
    if reg is None:
        raise HTTPException(status_code=503, detail="Bank registry unavailable")
    return [_bank_out(b) for b in reg.active()]


@router.get("/banks/{code}", response_model=BankOut)
async def get_bank(code: str) -> BankOut:
    bank = resolve_bank(code)
    if bank is None:
        raise HTTPException(status_code=404, detail="Bank not found")
    return _bank_out(bank)


@router.get("/swift/{code}", response_model=SwiftOut)
async def get_swift(
    code: str,
    branch: Optional[str] = Query(None, description="Branch code; omitted means the bank default"),
) -> SwiftOut:
    swift = resolve_swift(code, branch)
    if swift is None:
        raise HTTPException(status_code=404, detail="Bank or branch not found")
    return SwiftOut(code=extract_bank_code(normalize_code(code)), branch=branch, swift=swift)


@router.get("/amount-in-words", response_model=AmountWordsOut)
async def amount_in_words(
    amount: float = Query(..., description="Amount in dirhams", allow_inf_nan=False),
) -> AmountWordsOut:
    words = amount_to_words(amount)
    if words == CONVERSION_ERROR:
        raise HTTPException(status_code=422, detail="Amount cannot be converted")
    return AmountWordsOut(amount=amount, words=words)
