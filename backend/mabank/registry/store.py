from __future__ import annotations

import json
import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Pattern, Tuple, Union

from mabank.config import registry_settings
from mabank.constants.banks import MOROCCAN_BANKS

from .models import BankRecord, BranchRecord

_CODE_RX = re.compile(r"^[0-9]{3}$")


class RegistryError(ValueError):
    """Raised when a bank table cannot be turned into a registry."""


class BankRegistry:
    """Read-only, ordered collection of bank records indexed by bank code."""

    def __init__(self, banks: Iterable[BankRecord]):
        records: Tuple[BankRecord, ...] = tuple(banks)
        index: Dict[str, BankRecord] = {}
        for bank in records:
            if not _CODE_RX.match(bank.code):
                raise RegistryError(f"bank code must be 3 digits: {bank.code!r}")
            if bank.code in index:
                raise RegistryError(f"duplicate bank code: {bank.code}")
            if bank.rib_length <= 0:
                raise RegistryError(f"rib_length must be positive for bank {bank.code}")
            seen = set()
            for br in bank.branches:
                if br.code in seen:
                    raise RegistryError(f"duplicate branch {br.code} for bank {bank.code}")
                seen.add(br.code)
            index[bank.code] = bank
        self._records = records
        self._index = index

    def get(self, code: str) -> Optional[BankRecord]:
        """Active record for `code`; inactive banks behave as missing."""
        bank = self._index.get(code)
        if bank is None or not bank.active:
            return None
        return bank

    def find(self, code: str) -> Optional[BankRecord]:
        # Raw lookup, ignores the active flag
        return self._index.get(code)

    def active(self) -> List[BankRecord]:
        return [b for b in self._records if b.active]

    def __iter__(self) -> Iterator[BankRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.get(code) is not None


def _compile(raw: Any, *, what: str, code: str) -> Pattern[str]:
    if not isinstance(raw, str) or not raw:
        raise RegistryError(f"{what} missing for bank {code}")
    try:
        return re.compile(raw)
    except re.error as e:
        raise RegistryError(f"invalid {what} for bank {code}: {e}") from e


def record_from_mapping(data: Mapping[str, Any]) -> BankRecord:
    if not isinstance(data, Mapping):
        raise RegistryError(f"bank entry must be an object, got {type(data).__name__}")
    code = str(data.get("code") or "").strip()
    try:
        rib_length = int(data["rib_length"])
    except (KeyError, TypeError, ValueError) as e:
        raise RegistryError(f"rib_length missing or not an integer for bank {code}") from e
    try:
        branches = tuple(
            BranchRecord(code=str(b["code"]), swift=str(b["swift"]))
            for b in (data.get("branches") or [])
        )
    except (KeyError, TypeError) as e:
        raise RegistryError(f"malformed branch entry for bank {code}") from e
    active = data.get("active", True)
    if not isinstance(active, bool):
        raise RegistryError(f"active must be true or false for bank {code}")
    return BankRecord(
        code=code,
        name=str(data.get("name") or code),
        active=active,
        iban_pattern=_compile(data.get("iban_regex"), what="iban_regex", code=code),
        rib_length=rib_length,
        rib_pattern=_compile(data.get("rib_regex"), what="rib_regex", code=code),
        swift=str(data.get("swift") or ""),
        branches=branches,
    )


def registry_from_records(records: Iterable[Mapping[str, Any]]) -> BankRegistry:
    return BankRegistry(record_from_mapping(r) for r in records)


def load_registry(path: Union[str, Path]) -> BankRegistry:
    """Load a registry from a JSON asset.

    Accepts either a list of bank objects or ``{"banks": [...]}``.
    """
    p = Path(path)
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise RegistryError(f"{p}: cannot read bank table: {e}") from e
    if isinstance(data, Mapping):
        data = data.get("banks")
    if not isinstance(data, list):
        raise RegistryError(f"{p}: expected a list of banks")
    registry = registry_from_records(data)
    logging.getLogger(__name__).info(
        "registry_loaded", extra={"source": str(p), "banks": len(registry)}
    )
    return registry


@lru_cache(maxsize=1)
def get_default_registry() -> BankRegistry:
    settings = registry_settings()
    if settings.path:
        return load_registry(settings.path)
    registry = registry_from_records(MOROCCAN_BANKS)
    logging.getLogger(__name__).info(
        "registry_loaded", extra={"source": "builtin", "banks": len(registry)}
    )
    return registry


def reset_default_registry() -> None:
    get_default_registry.cache_clear()


def current_registry(registry: Optional[BankRegistry] = None) -> Optional[BankRegistry]:
    """`registry` if given, else the default one; None when it cannot be loaded.

    Load failures are logged, never raised.
    """
    if registry is not None:
        return registry
    try:
        return get_default_registry()
    except RegistryError as e:
        logging.getLogger(__name__).error("registry_unavailable", extra={"reason": str(e)})
        return None
