from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Pattern, Tuple


@dataclass(frozen=True)
class BranchRecord:
    code: str
    swift: str


@dataclass(frozen=True)
class BankRecord:
    code: str  # 3 digits, unique within a registry
    name: str
    active: bool
    iban_pattern: Pattern[str]
    rib_length: int
    rib_pattern: Pattern[str]
    swift: str
    branches: Tuple[BranchRecord, ...] = ()

    def matches_iban(self, iban: str) -> bool:
        return self.iban_pattern.search(iban) is not None

    def matches_rib(self, rib: str) -> bool:
        return self.rib_pattern.search(rib) is not None

    def branch(self, code: str) -> Optional[BranchRecord]:
        """Exact branch lookup; no partial matching."""
        for b in self.branches:
            if b.code == code:
                return b
        return None
