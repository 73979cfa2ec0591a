# loadgate/core/loadable/report.py
"""
ReadinessReport: structured result of one readiness evaluation.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ReadinessReport(BaseModel):
    """
    Outcome of evaluating a host's effective rules.

    ``cached`` is set when the memoized loaded flag answered and no rule ran.
    ``message`` and ``failed_rule`` describe the first failing rule only.
    """
    model_config = ConfigDict(frozen=True)

    passed: bool
    message: Optional[str] = None
    failed_rule: Optional[str] = None
    rules_run: int = Field(default=0, ge=0)
    rules_total: int = Field(default=0, ge=0)
    cached: bool = False

    @property
    def skipped(self) -> int:
        """Rules not run because an earlier one failed"""
        return self.rules_total - self.rules_run

    def to_details(self) -> Dict[str, Any]:
        return {
            "failed_rule": self.failed_rule,
            "rules_run": self.rules_run,
            "rules_total": self.rules_total,
        }

    def __bool__(self) -> bool:
        return self.passed
