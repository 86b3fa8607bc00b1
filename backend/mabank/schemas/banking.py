from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field


class IdentifierPayload(BaseModel):
    value: str = Field(..., description="IBAN or RIB as typed by the user (spaces/hyphens allowed)")


class IdentifierCheck(BaseModel):
    valid: bool
    normalized: str
    formatted: str
    bank_code: Optional[str] = None
    iban: Optional[str] = Field(None, description="IBAN derived from a valid RIB")


class BranchOut(BaseModel):
    code: str
    swift: str


class BankOut(BaseModel):
    code: str
    name: str
    swift: str
    rib_length: int
    branches: List[BranchOut] = []


class SwiftOut(BaseModel):
    code: str
    branch: Optional[str] = None
    swift: str


class AmountWordsOut(BaseModel):
    amount: float
    words: str
