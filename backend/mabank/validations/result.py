from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .error_codes import ErrorCode


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    code: ErrorCode
    message: str = ""
    meta: Dict[str, Any] = field(default_factory=dict)


def success(**meta: Any) -> ValidationResult:
    return ValidationResult(True, ErrorCode.OK, "", dict(meta))


def failure(code: ErrorCode, message: str, **meta: Any) -> ValidationResult:
    return ValidationResult(False, code, message, dict(meta))


def report_rejection(result: ValidationResult, logger: Optional[logging.Logger] = None) -> None:
    """Send a failed result to the diagnostic log side-channel.

    Never raises and never alters the outcome seen by the caller.
    """
    if result.ok:
        return
    log = logger or logging.getLogger(__name__)
    log.info(
        "identifier_rejected",
        extra={
            "error_code": result.code.value,
            "reference": result.code.reference,
            "reason": result.message,
            "meta": result.meta,
        },
    )
