from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

# Built-in Moroccan bank table used when BANK_REGISTRY_PATH is not set.
# Domestic RIBs are 24 digits: bank (3) + locality (3) + account (16) + key (2);
# the IBAN is MA + 2 check digits + the RIB.
RIB_LENGTH = 24


def _bank(
    code: str,
    name: str,
    swift: str,
    *,
    active: bool = True,
    branches: Sequence[Tuple[str, str]] = (),
) -> Dict[str, Any]:
    return {
        "code": code,
        "name": name,
        "active": active,
        "iban_regex": rf"^MA[0-9]{{2}}{code}[0-9]{{21}}$",
        "rib_length": RIB_LENGTH,
        "rib_regex": rf"^{code}[0-9]{{21}}$",
        "swift": swift,
        "branches": [{"code": b, "swift": s} for b, s in branches],
    }


MOROCCAN_BANKS: List[Dict[str, Any]] = [
    _bank("001", "Bank Al-Maghrib", "BKAMMAMR"),
    _bank(
        "007",
        "Attijariwafa bank",
        "BCMAMAMC",
        branches=[("780", "BCMAMAMC780"), ("810", "BCMAMAMC810"), ("450", "BCMAMAMC450")],
    ),
    _bank(
        "011",
        "Bank of Africa (BMCE Group)",
        "BMCEMAMC",
        branches=[("780", "BMCEMAMC780"), ("810", "BMCEMAMC810")],
    ),
    _bank("013", "BMCI (Groupe BNP Paribas)", "BMCIMAMC"),
    _bank("021", "Crédit du Maroc", "CDMAMAMC"),
    _bank("022", "Société Générale Maroc", "SGMBMAMC"),
    _bank("023", "Citibank Maghreb", "CITIMAMC"),
    _bank("040", "Banque Marocaine pour l'Afrique et l'Orient", "BMAOMAMC", active=False),
    _bank("050", "CFG Bank", "CAFGMAMC"),
    _bank("145", "Banque Populaire", "BCPOMAMC"),
    _bank("190", "Banque Centrale Populaire", "BCPOMAMC"),
    _bank("225", "Crédit Agricole du Maroc", "CNCAMAMR"),
    _bank("230", "CIH Bank", "CIHMMAMC"),
]
