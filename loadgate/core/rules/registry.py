# loadgate/core/rules/registry.py
"""
Load Validation Registry: per-type ordered readiness rules.

The registry provides:
- Rule registration per type (register)
- Inheritance-aware resolution (effective_rules), ancestors first
- One-time seeding of the display check into opted-in root types

Types participate by carrying a truthy ``_loadgate_participant`` class
attribute; the Loadable mixin sets it on every subclass, along with the
``_declared_load_validations`` tuple collected from the class body.
Registration is expected to finish at type-definition time, before any
evaluation.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional
import logging
import threading

from loadgate.config import LoadGateConfig, get_config
from loadgate.core.errors import InvalidArgumentError
from .outcome import RuleOutcome

logger = logging.getLogger(__name__)

Rule = Callable[[Any], Any]


def displayed_validation(host: Any) -> RuleOutcome:
    """
    Default rule: the host's display check passes.

    The host supplies ``is_displayed()``, ``current_url`` and ``url_matcher``.
    """
    if host.is_displayed():
        return RuleOutcome.ok()
    return RuleOutcome.failed(
        f"Expected {host.current_url} to match {host.url_matcher} but it did not."
    )


def rule_name(rule: Rule) -> str:
    """Human-readable rule name for reports and logs"""
    return getattr(rule, "__qualname__", None) or getattr(rule, "__name__", None) or repr(rule)


def participates(owner: type) -> bool:
    """Check if a type takes part in load validation"""
    return bool(getattr(owner, "_loadgate_participant", False))


def is_root(owner: type) -> bool:
    """A root has no participating ancestor"""
    return not any(participates(base) for base in owner.__mro__[1:])


class LoadValidationRegistry:
    """
    Rule table keyed by type identity.

    Usage:
    ```python
    registry = LoadValidationRegistry()
    registry.register(HomePage, lambda page: page.header_visible)

    # Ancestor rules first, then HomePage's own
    rules = registry.effective_rules(HomePage)
    ```
    """

    def __init__(self, config_provider: Optional[Callable[[], LoadGateConfig]] = None):
        self._rules: Dict[type, List[Rule]] = {}
        self._config_provider = config_provider or get_config
        self._lock = threading.Lock()

    def register(self, owner: type, rule: Rule) -> Rule:
        """
        Append a rule to the type's own rule list.

        No deduplication. The rule's return shape is checked at evaluation
        time, only callability is checked here.

        Returns:
            The rule itself, so register() can back a decorator

        Raises:
            InvalidArgumentError: If owner does not participate or rule is not callable
        """
        if not participates(owner):
            raise InvalidArgumentError(
                f"{owner.__name__} does not take part in load validation; "
                f"register rules on a Loadable subclass"
            )
        if not callable(rule):
            raise InvalidArgumentError(
                f"Load validation for {owner.__name__} must be callable, got {rule!r}"
            )
        own = self.own_rules(owner)
        with self._lock:
            own.append(rule)
        logger.debug("Registered load validation %s on %s", rule_name(rule), owner.__name__)
        return rule

    def own_rules(self, owner: type) -> List[Rule]:
        """
        Get the rules declared directly on a type.

        The list is built on first access: the display check (for an
        opted-in root) followed by the rules collected from the class body.
        """
        with self._lock:
            if owner not in self._rules:
                self._rules[owner] = self._default_rules(owner) + list(
                    owner.__dict__.get("_declared_load_validations", ())
                )
            return self._rules[owner]

    def effective_rules(self, owner: type) -> List[Rule]:
        """
        Resolve the ordered rule list for a type.

        Walks the MRO from the most ancestral participating type down to
        ``owner``, so every ancestor's rules precede its descendants' and a
        type reached through two bases contributes once.

        Each ancestor is read from the registry it registers into: its own
        ``load_validation_registry`` if it sets one. An ancestor without one
        is read from this registry, or from the global registry when
        ``owner`` itself uses a private one.

        Returns:
            New list; mutating it does not touch the registry
        """
        rules: List[Rule] = []
        for cls in reversed(owner.__mro__):
            if cls is owner or participates(cls):
                rules.extend(self._registry_for(cls, owner).own_rules(cls))
        return rules

    def _registry_for(self, cls: type, owner: type) -> "LoadValidationRegistry":
        if cls is owner:
            return self
        configured = getattr(cls, "load_validation_registry", None)
        if configured is not None:
            return configured
        if getattr(owner, "load_validation_registry", None) is not None:
            return get_global_registry()
        return self

    def seed_default_if_root(self, owner: type) -> bool:
        """
        Build the type's initial rule list if it has none yet.

        Returns:
            True if the display check was installed
        """
        own = self.own_rules(owner)
        return bool(own) and own[0] is displayed_validation

    def has(self, owner: type) -> bool:
        """Check if a type's rule list has been built"""
        return owner in self._rules

    def count(self, owner: Optional[type] = None) -> int:
        """Count own rules of one type, or of every known type"""
        if owner is not None:
            return len(self._rules.get(owner, ()))
        return sum(len(rules) for rules in self._rules.values())

    def clear(self) -> None:
        """Clear all rule lists (useful for testing)"""
        with self._lock:
            self._rules.clear()

    def _default_rules(self, owner: type) -> List[Rule]:
        if not is_root(owner):
            return []
        if not getattr(owner, "default_load_validation", False):
            return []
        if not self._config_provider().default_load_validations:
            logger.debug("Default load validation disabled, not seeding %s", owner.__name__)
            return []
        logger.debug("Seeding default load validation on %s", owner.__name__)
        return [displayed_validation]

    def __repr__(self) -> str:
        return f"LoadValidationRegistry(types={len(self._rules)}, rules={self.count()})"


# Global registry instance
_global_registry: Optional[LoadValidationRegistry] = None
_global_registry_lock = threading.Lock()


def get_global_registry() -> LoadValidationRegistry:
    """
    Get the global load validation registry.

    The global registry is lazily initialized on first access.
    """
    global _global_registry

    if _global_registry is None:
        with _global_registry_lock:
            if _global_registry is None:
                _global_registry = LoadValidationRegistry()

    return _global_registry


def set_global_registry(registry: LoadValidationRegistry) -> None:
    """
    Set the global load validation registry.

    This is useful for testing or custom initialization.
    """
    global _global_registry
    with _global_registry_lock:
        _global_registry = registry


def reset_global_registry() -> None:
    """Reset the global registry. Creates a new empty registry on next access."""
    global _global_registry
    with _global_registry_lock:
        _global_registry = None


__all__ = [
    "Rule",
    "LoadValidationRegistry",
    "displayed_validation",
    "rule_name",
    "participates",
    "is_root",
    "get_global_registry",
    "set_global_registry",
    "reset_global_registry",
]
