# loadgate/core/loadable/evaluator.py
"""
Readiness Evaluator: runs a host's effective rules and scopes the result.

Per-host state lives in two attributes the evaluator owns:
- loaded: memoized outcome, only set for the duration of a scope
- load_error: diagnostic of the first failing rule of the last evaluation

Rules run strictly in registry order and evaluation stops at the first
failure. Exceptions raised by rules propagate unchanged.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, TypeVar
import logging

from loadgate.core.errors import InvalidArgumentError, NotLoadedError
from loadgate.core.rules import (
    LoadValidationRegistry,
    get_global_registry,
    normalize_outcome,
    rule_name,
)
from .report import ReadinessReport

logger = logging.getLogger(__name__)

T = TypeVar("T")


def evaluate(host: Any, registry: Optional[LoadValidationRegistry] = None) -> ReadinessReport:
    """
    Evaluate a host's readiness.

    Clears ``load_error`` first, even when the memoized flag short-cuts the
    evaluation. Never writes ``loaded``.

    Args:
        host: Object whose type's rules are run
        registry: Registry to resolve rules from (global registry if None)

    Returns:
        ReadinessReport for this evaluation
    """
    host.load_error = None

    if host.loaded:
        return ReadinessReport(passed=True, cached=True)

    registry = registry or get_global_registry()
    rules = registry.effective_rules(type(host))
    logger.debug("Evaluating %d load validation(s) for %s", len(rules), type(host).__name__)

    for index, rule in enumerate(rules, start=1):
        outcome = normalize_outcome(rule(host))
        if outcome.passed:
            continue

        if outcome.message is not None:
            host.load_error = outcome.message
        name = rule_name(rule)
        logger.debug(
            "%s not loaded: %s failed (%s)",
            type(host).__name__, name, outcome.message or "no message",
        )
        return ReadinessReport(
            passed=False,
            message=outcome.message,
            failed_rule=name,
            rules_run=index,
            rules_total=len(rules),
        )

    return ReadinessReport(passed=True, rules_run=len(rules), rules_total=len(rules))


def is_ready(host: Any, registry: Optional[LoadValidationRegistry] = None) -> bool:
    """Check if the host is ready. See evaluate()."""
    return evaluate(host, registry).passed


@contextmanager
def readiness_scope(host: T, registry: Optional[LoadValidationRegistry] = None) -> Iterator[T]:
    """
    Hold the host's loaded flag for the duration of a block.

    The flag is snapshotted on entry, set to the evaluation result, and
    restored on every exit path. Nested scopes therefore see the outer
    scope's cached result, and never leak their own to it.

    Raises:
        NotLoadedError: If the host is not ready; raised before the block runs
    """
    previously_loaded = host.loaded
    try:
        report = evaluate(host, registry)
        host.loaded = report.passed
        if not host.loaded:
            raise NotLoadedError(host.load_error, details=report.to_details())
        logger.debug("Entered loaded scope for %s (cached=%s)", type(host).__name__, report.cached)
        yield host
    finally:
        host.loaded = previously_loaded


def run_while_ready(
    host: T,
    action: Optional[Callable[[T], Any]],
    registry: Optional[LoadValidationRegistry] = None,
) -> Any:
    """
    Run ``action(host)`` only if the host is ready.

    Returns:
        Whatever the action returns

    Raises:
        InvalidArgumentError: If no callable action was given (no state is touched)
        NotLoadedError: If the host is not ready
    """
    if action is None or not callable(action):
        raise InvalidArgumentError("A callable was expected, but none received.")

    with readiness_scope(host, registry):
        return action(host)


__all__ = [
    "evaluate",
    "is_ready",
    "readiness_scope",
    "run_while_ready",
]
