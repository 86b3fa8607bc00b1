import logging

import pytest

from mabank.validations import (
    ErrorCode,
    check_iban,
    compute_check_digits,
    rib_to_iban,
    validate_iban,
)

# ISO 13616 registry example for Morocco (Bank of Africa / BMCE, code 011)
REGISTRY_EXAMPLE = "MA64011519000001205000534921"


def _iban_for(bban: str) -> str:
    # Check digits computed with plain integer arithmetic: "MA00" -> 22 10 0 0
    return f"MA{98 - int(bban + '221000') % 97:02d}{bban}"


def test_validate_iban_registry_example():
    assert validate_iban(REGISTRY_EXAMPLE) is True
    r = check_iban(REGISTRY_EXAMPLE)
    assert r.ok and r.code == ErrorCode.OK
    assert r.meta["bank_code"] == "011"


def test_validate_iban_accepts_spacing_and_lowercase():
    assert validate_iban("ma64 0115 1900 0001 2050 0053 4921")
    assert validate_iban("  MA64\t011519000001205000534921\n")


@pytest.mark.parametrize("bban", [
    "007780000123456789012345",
    "145810009876543210000017",
    "230450000000000000000099",
])
def test_validate_iban_other_active_banks(bban):
    assert validate_iban(_iban_for(bban))


def test_validate_iban_single_digit_mutation_fails():
    for pos in range(2, len(REGISTRY_EXAMPLE)):
        d = REGISTRY_EXAMPLE[pos]
        mutated = REGISTRY_EXAMPLE[:pos] + str((int(d) + 1) % 10) + REGISTRY_EXAMPLE[pos + 1:]
        r = check_iban(mutated)
        assert not r.ok, mutated
        # Mutating the bank code can also land on an unknown bank
        assert r.code in (ErrorCode.INVALID_IBAN_CHECKSUM, ErrorCode.INVALID_BANK_CODE)


@pytest.mark.parametrize("value", [None, 123, 64.0, b"MA64011519000001205000534921", ["MA"]])
def test_validate_iban_non_string_input(value):
    assert validate_iban(value) is False
    assert check_iban(value).code == ErrorCode.INVALID_INPUT_TYPE


@pytest.mark.parametrize("value", [
    "",
    "MA6401151900000120500053492",    # 27 chars
    "MA640115190000012050005349211",  # 29 chars
    "FR7630006000011234567890189",
    "MA64O11519000001205000534921",   # letter O in the BBAN
    "MA６4011519000001205000534921",   # full-width digit
])
def test_validate_iban_bad_structure(value):
    assert validate_iban(value) is False
    assert check_iban(value).code == ErrorCode.INVALID_IBAN_FORMAT


def test_validate_iban_unknown_and_inactive_bank():
    unknown = _iban_for("555780000123456789012345")
    r = check_iban(unknown)
    assert r.code == ErrorCode.INVALID_BANK_CODE and r.meta["bank_code"] == "555"
    # 040 exists in the table but is inactive
    inactive = _iban_for("040780000123456789012345")
    assert check_iban(inactive).code == ErrorCode.INVALID_BANK_CODE


def test_validate_iban_bank_specific_pattern(synthetic_registry):
    from mabank.registry import registry_from_records

    strict = registry_from_records([
        {
            "code": "011",
            "iban_regex": r"^MA[0-9]{2}011780[0-9]{18}$",  # only locality 780
            "rib_length": 24,
            "rib_regex": r"^011[0-9]{21}$",
            "swift": "BMCEMAMC",
        }
    ])
    r = check_iban(REGISTRY_EXAMPLE, registry=strict)
    assert r.code == ErrorCode.INVALID_IBAN_FORMAT
    assert r.meta["bank_code"] == "011"
    # Same IBAN is unknown to the synthetic registry
    assert check_iban(REGISTRY_EXAMPLE, registry=synthetic_registry).code == ErrorCode.INVALID_BANK_CODE


def test_validate_iban_with_test_registry(synthetic_registry):
    iban = _iban_for("999123456789012345678901")
    assert validate_iban(iban, registry=synthetic_registry)
    assert not validate_iban(iban)  # unknown to the built-in table


def test_validate_iban_logs_rejection(caplog):
    caplog.set_level(logging.INFO, logger="mabank.validations.iban")
    bad = REGISTRY_EXAMPLE[:-1] + "2"
    assert validate_iban(bad) is False
    recs = [r for r in caplog.records if r.getMessage() == "identifier_rejected"]
    assert recs
    assert recs[-1].error_code == "INVALID_IBAN_CHECKSUM"
    assert recs[-1].reference == "BANK_004"


def test_compute_check_digits_and_rib_to_iban():
    assert compute_check_digits("011519000001205000534921") == "64"
    assert rib_to_iban("011 519 0000012050005349 21") == REGISTRY_EXAMPLE
    assert rib_to_iban("011519000001205000534910") == "MA70011519000001205000534910"
    assert rib_to_iban("01151900000120500053492X") is None
    assert rib_to_iban(None) is None


def test_unreadable_registry_rejects_instead_of_raising(tmp_path, monkeypatch):
    from mabank.registry import reset_default_registry
    from mabank.validations import validate_rib

    monkeypatch.setenv("BANK_REGISTRY_PATH", str(tmp_path / "nope.json"))
    reset_default_registry()
    assert validate_iban(REGISTRY_EXAMPLE) is False
    res = check_iban(REGISTRY_EXAMPLE)
    assert res.code is ErrorCode.INVALID_BANK_CODE
    assert res.meta == {"bank_code": "011"}
    assert validate_rib("011519000001205000534910") is False
