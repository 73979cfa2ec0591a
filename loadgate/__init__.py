# loadgate/__init__.py
"""
loadgate - load-readiness checks for page objects

Page objects declare an ordered chain of readiness checks. Checks are
inherited from base classes (ancestors first), run lazily, stop at the
first failure and report its message.

Basic usage:

    >>> from loadgate import Page, load_validation
    >>> class Home(Page):
    ...     def is_displayed(self):
    ...         return True
    ...     @load_validation
    ...     def header_rendered(self):
    ...         return self.header is not None, "Header missing"
    >>> home = Home()
    >>> home.is_loaded()
    >>> home.when_loaded(lambda page: page.click_login())

Context manager:
    >>> with home.while_loaded():
    ...     home.click_login()
"""

__version__ = "0.1.0"

from .config import LoadGateConfig, get_config, set_config, reset_config, load_config, configure_logging
from .core.errors import LoadGateError, InvalidArgumentError, NotLoadedError
from .core.rules import (
    RuleOutcome,
    LoadValidationRegistry,
    get_global_registry,
    set_global_registry,
    reset_global_registry,
)
from .core.loadable import (
    Loadable,
    load_validation,
    ReadinessReport,
    evaluate,
    is_ready,
    readiness_scope,
    run_while_ready,
)
from .page import Page

__all__ = [
    # Version
    "__version__",

    # Host types
    "Loadable",
    "Page",
    "load_validation",

    # Evaluation
    "evaluate",
    "is_ready",
    "readiness_scope",
    "run_while_ready",
    "ReadinessReport",

    # Rules
    "RuleOutcome",
    "LoadValidationRegistry",
    "get_global_registry",
    "set_global_registry",
    "reset_global_registry",

    # Errors
    "LoadGateError",
    "InvalidArgumentError",
    "NotLoadedError",

    # Configuration
    "LoadGateConfig",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",
    "configure_logging",
]
