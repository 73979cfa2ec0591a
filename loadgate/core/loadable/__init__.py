# loadgate/core/loadable/__init__.py
"""
Readiness evaluation and the Loadable mixin.
"""

from .report import ReadinessReport
from .evaluator import evaluate, is_ready, readiness_scope, run_while_ready
from .mixin import Loadable, load_validation

__all__ = [
    "ReadinessReport",
    "evaluate",
    "is_ready",
    "readiness_scope",
    "run_while_ready",
    "Loadable",
    "load_validation",
]
