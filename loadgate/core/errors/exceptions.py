# loadgate/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import codes


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Unknown codes are downgraded instead of leaking into reports.
    """
    c = str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass(eq=False)
class LoadGateError(Exception):
    """
    Base exception for everything loadgate raises on its own behalf.

    Exceptions raised by validation rules are never wrapped in this type.
    """
    message: Optional[str]
    error_code: str = codes.UNKNOWN
    error_type: str = "LOADGATE_ERROR"
    details: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.error_code = _normalize_error_code(self.error_code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message or self.error_type}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.error_type,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


@dataclass(eq=False)
class InvalidArgumentError(LoadGateError, ValueError):
    """Caller contract violation (missing action, non-callable rule)."""
    message: Optional[str] = "Invalid argument."
    error_code: str = codes.INVALID_ARGUMENT
    error_type: str = "INVALID_ARGUMENT"


@dataclass(eq=False)
class NotLoadedError(LoadGateError):
    """
    Readiness evaluation failed inside a scoped call.

    ``message`` is the diagnostic of the first failing rule, or None when
    that rule did not supply one.
    """
    message: Optional[str] = None
    error_code: str = codes.NOT_LOADED
    error_type: str = "NOT_LOADED"

    @property
    def failed_rule(self) -> Optional[str]:
        return self.details.get("failed_rule")


__all__ = [
    "LoadGateError",
    "InvalidArgumentError",
    "NotLoadedError",
]
