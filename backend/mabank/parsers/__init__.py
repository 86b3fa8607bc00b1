from .identifiers import (
    ParseResult,
    normalize_iban,
    normalize_rib,
    normalize_code,
    extract_bank_code,
    format_iban,
    format_rib,
    split_rib,
)

__all__ = [
    "ParseResult",
    "normalize_iban",
    "normalize_rib",
    "normalize_code",
    "extract_bank_code",
    "format_iban",
    "format_rib",
    "split_rib",
]
