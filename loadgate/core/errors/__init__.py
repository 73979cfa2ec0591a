# loadgate/core/errors/__init__.py
"""
Error types for loadgate.

- codes: stable error code constants
- exceptions: the exception hierarchy raised by the readiness evaluator

No side effects on import.
"""

from . import codes
from .exceptions import LoadGateError, InvalidArgumentError, NotLoadedError

__all__ = [
    "codes",
    "LoadGateError",
    "InvalidArgumentError",
    "NotLoadedError",
]
