# loadgate/core/loadable/mixin.py
"""
Loadable: mixin giving a host type load validations and readiness checks.

Usage:
```python
class SearchPage(Page):
    @load_validation
    def results_present(self):
        return self.result_count > 0, "No search results rendered"

SearchPage.load_validation(lambda page: page.spinner_gone)

page = SearchPage()
if page.is_loaded():
    ...
page.when_loaded(lambda p: p.open_first_result())
```
"""

from __future__ import annotations

from typing import Any, Callable, ContextManager, List, Optional, TypeVar
import logging

from loadgate.core.rules import LoadValidationRegistry, Rule, get_global_registry
from .evaluator import evaluate, is_ready, readiness_scope, run_while_ready
from .report import ReadinessReport

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])
L = TypeVar("L", bound="Loadable")


def load_validation(func: F) -> F:
    """
    Mark a method in a Loadable class body as a load validation.

    Marked methods are registered when the class is created, in the order
    they appear in the body. The method stays callable as a normal method.
    """
    func._loadgate_validation = True
    return func


class Loadable:
    """
    Mixin for objects that must be ready before they are acted on.

    ``loaded`` and ``load_error`` default to None at class level and are
    only ever written on instances, by the evaluator.
    """

    loaded: Optional[bool] = None
    load_error: Optional[str] = None

    # Root types set this to receive the display check as their first rule
    default_load_validation: bool = False

    # None means the global registry
    load_validation_registry: Optional[LoadValidationRegistry] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._declared_load_validations = tuple(
            value for value in cls.__dict__.values()
            if callable(value) and getattr(value, "_loadgate_validation", False)
        )
        cls._loadgate_participant = True
        if cls._declared_load_validations:
            logger.debug(
                "Collected %d load validation(s) from %s",
                len(cls._declared_load_validations), cls.__name__,
            )

    @classmethod
    def load_registry(cls) -> LoadValidationRegistry:
        return cls.load_validation_registry or get_global_registry()

    @classmethod
    def load_validation(cls, rule: Rule) -> Rule:
        """
        Append a load validation to this class.

        The rule is called with the instance and returns a bool, a
        ``(passed, message)`` pair or a RuleOutcome. Returns the rule, so
        this also works as a decorator after the class exists.
        """
        return cls.load_registry().register(cls, rule)

    @classmethod
    def load_validations(cls) -> List[Rule]:
        """All load validations for this class, ancestors first"""
        return cls.load_registry().effective_rules(cls)

    def is_loaded(self) -> bool:
        """
        Check if the object is loaded.

        On failure the failing rule's message, if any, is in ``load_error``.
        """
        return is_ready(self, self.load_registry())

    def load_report(self) -> ReadinessReport:
        return evaluate(self, self.load_registry())

    def when_loaded(self: L, action: Optional[Callable[[L], Any]] = None) -> Any:
        """
        Run ``action(self)`` once the object is loaded.

        Raises:
            InvalidArgumentError: If no action was given
            NotLoadedError: If a load validation failed
        """
        return run_while_ready(self, action, self.load_registry())

    def while_loaded(self: L) -> ContextManager[L]:
        """Context manager form of when_loaded()"""
        return readiness_scope(self, self.load_registry())


__all__ = [
    "Loadable",
    "load_validation",
]
