from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, List, Optional

from mabank.validations.error_codes import ErrorCode

logger = logging.getLogger(__name__)

CONVERSION_ERROR = "erreur de conversion"
ZERO_PHRASE = "zéro dirhams"

# Largest convertible magnitude is just under one thousand milliards
_MAX_AMOUNT = Decimal(10) ** 12
_CENT = Decimal("0.01")

_UNITS = ["", "un", "deux", "trois", "quatre", "cinq", "six", "sept", "huit", "neuf"]
_TEENS = [
    "dix",
    "onze",
    "douze",
    "treize",
    "quatorze",
    "quinze",
    "seize",
    "dix-sept",
    "dix-huit",
    "dix-neuf",
]
_TENS = ["", "dix", "vingt", "trente", "quarante", "cinquante", "soixante"]


def _below_twenty(n: int) -> str:
    return _TEENS[n - 10] if n >= 10 else _UNITS[n]


def _below_hundred(n: int) -> str:
    if n >= 80:
        # 80-99 hang off "quatre-vingt": quatre-vingt-un ... quatre-vingt-dix-neuf
        rest = n - 80
        return "quatre-vingt" + ("-" + _below_twenty(rest) if rest else "")
    if n >= 70:
        return "soixante-" + _TEENS[n - 70]
    if n >= 20:
        tens, unit = divmod(n, 10)
        return _TENS[tens] + ("-" + _UNITS[unit] if unit else "")
    return _below_twenty(n)


def _below_thousand(n: int) -> str:
    hundreds, rest = divmod(n, 100)
    words: List[str] = []
    if hundreds == 1:
        words.append("cent")
    elif hundreds > 1:
        words.append(_UNITS[hundreds] + " cents")
    if rest:
        words.append(_below_hundred(rest))
    return " ".join(words)


def _scaled(count: int, unit: str) -> str:
    return f"{_below_thousand(count)} {unit}{'s' if count > 1 else ''}"


def whole_to_words(n: int) -> str:
    """French words for 0 < n < 10**12, without currency unit."""
    milliards, rem = divmod(n, 10 ** 9)
    millions, rem = divmod(rem, 10 ** 6)
    thousands, rest = divmod(rem, 1000)
    words: List[str] = []
    if milliards:
        words.append(_scaled(milliards, "milliard"))
    if millions:
        words.append(_scaled(millions, "million"))
    if thousands:
        # "mille" never takes "un" nor a plural mark
        words.append("mille" if thousands == 1 else _below_thousand(thousands) + " mille")
    if rest:
        words.append(_below_thousand(rest))
    return " ".join(words)


def _as_decimal(amount: Any) -> Optional[Decimal]:
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        return None
    try:
        value = Decimal(repr(amount)) if isinstance(amount, float) else Decimal(amount)
    except (InvalidOperation, ValueError):
        return None
    if not value.is_finite() or abs(value) >= _MAX_AMOUNT:
        return None
    return value


def amount_to_words(amount: Any) -> str:
    """Spell a dirham amount in French.

    >>> amount_to_words(1234)
    'mille deux cents trente-quatre dirhams'
    >>> amount_to_words(-45.67)
    'moins quarante-cinq dirhams et soixante-sept centimes'

    Invalid input (non-numeric, NaN, infinite, too large) gives
    CONVERSION_ERROR instead of raising.
    """
    value = _as_decimal(amount)
    if value is None:
        logger.info(
            "amount_conversion_failed",
            extra={
                "error_code": ErrorCode.INVALID_AMOUNT.value,
                "reference": ErrorCode.INVALID_AMOUNT.reference,
                "provided_type": type(amount).__name__,
            },
        )
        return CONVERSION_ERROR

    rounded = abs(value).quantize(_CENT, rounding=ROUND_HALF_UP)
    whole = int(rounded)
    cents = int((rounded - whole) * 100)
    if whole == 0 and cents == 0:
        return ZERO_PHRASE

    parts: List[str] = []
    if whole:
        parts.append(whole_to_words(whole) + " dirham" + ("s" if whole != 1 else ""))
    if cents:
        parts.append(_below_hundred(cents) + " centime" + ("s" if cents != 1 else ""))
    sign = "moins " if value < 0 else ""
    return (sign + " et ".join(parts)).strip()
