from __future__ import annotations

import re

# Structural layout shared by every Moroccan bank. Bank-specific patterns
# live in the registry (constants/banks.py or the JSON asset).
COUNTRY_CODE = "MA"
IBAN_LENGTH = 28
IBAN_STRUCTURE_RX = re.compile(r"^MA[0-9]{26}$")

# Location of the 3-digit bank code inside each identifier
IBAN_BANK_CODE_SLICE = slice(4, 7)
RIB_BANK_CODE_SLICE = slice(0, 3)

RIB_KEY_LENGTH = 2
RIB_CHUNK_SIZE = 7
DIGITS_RX = re.compile(r"^[0-9]+$")
