# loadgate/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
INVALID_ARGUMENT: Final[str] = "INVALID_ARGUMENT"

# readiness
NOT_LOADED: Final[str] = "NOT_LOADED"


KNOWN_CODES: Final[set[str]] = {
    UNKNOWN,
    INVALID_ARGUMENT,
    NOT_LOADED,
}
