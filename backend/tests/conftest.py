import os
import sys

import pytest

# Ensure 'mabank' package (under backend/mabank) is importable as top-level
PROJECT_BACKEND = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_BACKEND not in sys.path:
    sys.path.insert(0, PROJECT_BACKEND)

from mabank.registry import registry_from_records, reset_default_registry  # noqa: E402


@pytest.fixture(autouse=True)
def _builtin_registry(monkeypatch):
    # Every test starts from the built-in bank table
    monkeypatch.delenv("BANK_REGISTRY_PATH", raising=False)
    reset_default_registry()
    yield
    reset_default_registry()


@pytest.fixture
def synthetic_registry():
    """Test-only registry: one short-RIB bank with branches, one without, one inactive."""
    return registry_from_records(
        [
            {
                "code": "999",
                "name": "Banque Test",
                "active": True,
                "iban_regex": r"^MA[0-9]{2}999[0-9]{21}$",
                "rib_length": 10,
                "rib_regex": r"^999[0-9]{7}$",
                "swift": "TESTMAMC",
                "branches": [{"code": "001", "swift": "TESTMAMC001"}],
            },
            {
                "code": "998",
                "name": "Banque Sans Agence",
                "iban_regex": r"^MA[0-9]{2}998[0-9]{21}$",
                "rib_length": 24,
                "rib_regex": r"^998[0-9]{21}$",
                "swift": "SANSMAMC",
            },
            {
                "code": "997",
                "name": "Banque Fermee",
                "active": False,
                "iban_regex": r"^MA[0-9]{2}997[0-9]{21}$",
                "rib_length": 24,
                "rib_regex": r"^997[0-9]{21}$",
                "swift": "FERMMAMC",
            },
        ]
    )
