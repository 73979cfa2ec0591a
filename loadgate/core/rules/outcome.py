# loadgate/core/rules/outcome.py
"""
RuleOutcome: result contract of a single validation rule.

A rule may return:
- a RuleOutcome (explicit, preferred)
- a pair ``(passed, message)`` as a tuple or list
- any other value, judged by its truthiness (no message)

normalize_outcome() folds all three shapes into a RuleOutcome so the
evaluator only ever deals with one type.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class RuleOutcome(BaseModel):
    """
    Tagged outcome of a validation rule: passed, or failed with an
    optional diagnostic message.

    The message of a passing outcome is never surfaced.
    """
    model_config = ConfigDict(frozen=True)

    passed: bool = Field(description="Whether the rule accepted the host")
    message: Optional[str] = Field(
        default=None,
        description="Diagnostic reported when the rule fails",
    )

    @classmethod
    def ok(cls) -> RuleOutcome:
        return cls(passed=True)

    @classmethod
    def failed(cls, message: Optional[str] = None) -> RuleOutcome:
        return cls(passed=False, message=message)

    @property
    def is_failure(self) -> bool:
        return not self.passed


def _as_message(value: Any) -> Optional[str]:
    if value is None or value is False:
        return None
    return value if isinstance(value, str) else str(value)


def normalize_outcome(result: Any) -> RuleOutcome:
    """
    Normalize whatever a rule returned into a RuleOutcome.

    Pairs are unpacked positionally: the first element is the pass flag,
    the second (if any) the message. Extra elements are ignored and an
    empty sequence counts as a failure without a message.
    """
    if isinstance(result, RuleOutcome):
        return result

    if isinstance(result, (tuple, list)):
        passed = bool(result[0]) if len(result) > 0 else False
        message = _as_message(result[1]) if len(result) > 1 else None
        return RuleOutcome(passed=passed, message=message)

    return RuleOutcome(passed=bool(result))


__all__ = [
    "RuleOutcome",
    "normalize_outcome",
]
