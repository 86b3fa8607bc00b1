from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import List, Optional


def _split_origins(raw: Optional[str]) -> List[str]:
    if not raw:
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]


@dataclass
class RegistrySettings:
    # JSON asset with the bank table; unset means the built-in table
    path: Optional[str] = field(default_factory=lambda: os.getenv("BANK_REGISTRY_PATH") or None)


@dataclass
class ApiSettings:
    allowed_origins: List[str] = field(default_factory=lambda: _split_origins(os.getenv("ALLOWED_ORIGINS")))
    title: str = "Moroccan Bank Identifiers"
    version: str = "0.1.0"


def registry_settings() -> RegistrySettings:
    """Read registry settings from the current environment."""
    return RegistrySettings()
