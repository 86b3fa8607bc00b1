from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from mabank.constants.formats import (
    COUNTRY_CODE,
    IBAN_BANK_CODE_SLICE,
    RIB_BANK_CODE_SLICE,
    RIB_KEY_LENGTH,
)


@dataclass
class ParseResult:
    value: Any
    ok: bool
    error: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None


_WS_RX = re.compile(r"\s+")
_WS_HYPHEN_RX = re.compile(r"[\s-]+")


def normalize_iban(text: str) -> str:
    """Remove every whitespace character and uppercase."""
    if not text:
        return ""
    return _WS_RX.sub("", text).upper()


def normalize_rib(text: str) -> str:
    """Remove whitespace and hyphens. RIBs are numeric so case is kept."""
    if not text:
        return ""
    return _WS_HYPHEN_RX.sub("", text)


def normalize_code(text: str) -> str:
    # Lookup keys may be a bare bank code, a RIB or a full IBAN
    return normalize_rib(text).upper()


def extract_bank_code(clean: str) -> str:
    """Bank code embedded in an already normalized IBAN, RIB or bare code."""
    if clean.startswith(COUNTRY_CODE):
        return clean[IBAN_BANK_CODE_SLICE]
    return clean[RIB_BANK_CODE_SLICE]


def format_iban(text: str) -> str:
    """Print form of an IBAN: groups of four characters separated by spaces."""
    s = normalize_iban(text)
    return " ".join(s[i:i + 4] for i in range(0, len(s), 4))


def split_rib(text: str) -> ParseResult:
    if not text:
        return ParseResult(value=None, ok=False, error="EMPTY")
    s = normalize_rib(text)
    # bank (3) + locality (3) + account (>= 1) + key (2)
    if len(s) < 9 or not s.isascii() or not s.isdigit():
        return ParseResult(value=None, ok=False, error="BAD_LAYOUT", meta={"text": text, "len": len(s)})
    return ParseResult(
        value={
            "bank_code": s[0:3],
            "locality_code": s[3:6],
            "account_number": s[6:-RIB_KEY_LENGTH],
            "key": s[-RIB_KEY_LENGTH:],
        },
        ok=True,
    )


def format_rib(text: str) -> str:
    """Print form of a RIB: bank, locality, account and key separated by spaces.

    Values that do not have the RIB layout are returned normalized but ungrouped.
    """
    r = split_rib(text)
    if not r.ok:
        return normalize_rib(text)
    v = r.value
    return " ".join([v["bank_code"], v["locality_code"], v["account_number"], v["key"]])
