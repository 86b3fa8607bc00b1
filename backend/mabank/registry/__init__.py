from .models import BankRecord, BranchRecord
from .store import (
    BankRegistry,
    RegistryError,
    current_registry,
    get_default_registry,
    load_registry,
    record_from_mapping,
    registry_from_records,
    reset_default_registry,
)

__all__ = [
    "BankRecord",
    "BranchRecord",
    "BankRegistry",
    "RegistryError",
    "current_registry",
    "get_default_registry",
    "load_registry",
    "record_from_mapping",
    "registry_from_records",
    "reset_default_registry",
]
