# loadgate/core/rules/__init__.py
"""
Load validation rules: outcome contract and per-type registry.
"""

from .outcome import RuleOutcome, normalize_outcome
from .registry import (
    Rule,
    LoadValidationRegistry,
    displayed_validation,
    rule_name,
    participates,
    is_root,
    get_global_registry,
    set_global_registry,
    reset_global_registry,
)

__all__ = [
    "Rule",
    "RuleOutcome",
    "normalize_outcome",
    "LoadValidationRegistry",
    "displayed_validation",
    "rule_name",
    "participates",
    "is_root",
    "get_global_registry",
    "set_global_registry",
    "reset_global_registry",
]
