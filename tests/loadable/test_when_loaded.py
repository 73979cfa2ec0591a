"""
Tests for scoped execution (when_loaded / while_loaded / run_while_ready)

Tests cover:
- Memoization lasting only for the scope
- Re-entrancy with failing inner scopes
- Argument contract
- NotLoadedError payload
"""

import pytest

from loadgate.core.errors import InvalidArgumentError, NotLoadedError
from loadgate.core.loadable import Loadable, readiness_scope, run_while_ready


class Checkout(Loadable):
    def __init__(self, ready=True):
        self.ready = ready
        self.checks = 0


def checkout_ready(page):
    page.checks += 1
    return page.ready, "Checkout form not rendered"


@pytest.fixture
def checkout_cls():
    Checkout.load_validation(checkout_ready)
    return Checkout


class TestScope:

    def test_action_receives_host_and_result_propagates(self, checkout_cls):
        page = checkout_cls()
        assert page.when_loaded(lambda p: (p is page, "clicked")) == (True, "clicked")

    def test_loaded_restored_after_success(self, checkout_cls):
        page = checkout_cls()
        seen = []

        page.when_loaded(lambda p: seen.append(p.loaded))

        assert seen == [True]
        assert page.loaded is None

    def test_checks_cached_inside_scope(self, checkout_cls):
        page = checkout_cls()

        def action(p):
            assert p.is_loaded()
            assert p.is_loaded()
            return p.checks

        assert page.when_loaded(action) == 1
        # Outside the scope nothing is cached
        assert page.is_loaded()
        assert page.checks == 2

    def test_not_loaded_raises_before_action(self, checkout_cls):
        page = checkout_cls(ready=False)
        ran = []

        with pytest.raises(NotLoadedError) as exc_info:
            page.when_loaded(lambda p: ran.append(True))

        assert ran == []
        assert exc_info.value.message == "Checkout form not rendered"
        assert exc_info.value.failed_rule == "checkout_ready"
        assert page.loaded is None

    def test_not_loaded_without_message(self):
        class Host(Loadable):
            pass

        Host.load_validation(lambda h: False)

        with pytest.raises(NotLoadedError) as exc_info:
            Host().when_loaded(lambda h: None)

        assert exc_info.value.message is None
        assert str(exc_info.value) == "[NOT_LOADED] NOT_LOADED"

    def test_action_exception_propagates_and_restores(self, checkout_cls):
        page = checkout_cls()

        def action(p):
            raise KeyError("missing button")

        with pytest.raises(KeyError):
            page.when_loaded(action)

        assert page.loaded is None

    def test_preexisting_loaded_value_restored(self, checkout_cls):
        page = checkout_cls(ready=False)
        page.loaded = False

        with pytest.raises(NotLoadedError):
            page.when_loaded(lambda p: None)

        assert page.loaded is False

    def test_context_manager(self, checkout_cls):
        page = checkout_cls()

        with page.while_loaded() as scoped:
            assert scoped is page
            assert page.loaded is True

        assert page.loaded is None

    def test_context_manager_not_loaded(self, checkout_cls):
        page = checkout_cls(ready=False)
        entered = []

        with pytest.raises(NotLoadedError):
            with readiness_scope(page):
                entered.append(True)

        assert entered == []
        assert page.loaded is None

    def test_sequential_calls_reevaluate(self, checkout_cls):
        page = checkout_cls()
        page.when_loaded(lambda p: None)

        page.ready = False
        with pytest.raises(NotLoadedError):
            page.when_loaded(lambda p: None)

        assert page.checks == 2


class TestReentrancy:

    def test_nested_success_uses_outer_cache(self, checkout_cls):
        page = checkout_cls()

        def inner(p):
            assert p.loaded is True
            return "inner"

        def outer(p):
            result = p.when_loaded(inner)
            assert p.loaded is True
            return result

        assert page.when_loaded(outer) == "inner"
        assert page.checks == 1
        assert page.loaded is None

    def test_failing_inner_does_not_corrupt_outer(self):
        class Parent(Loadable):
            pass

        class Child(Loadable):
            def __init__(self):
                self.ready = False

        Child.load_validation(lambda c: (c.ready, "Child hidden"))

        parent = Parent()
        child = Child()
        observed = {}

        def outer(p):
            with pytest.raises(NotLoadedError):
                child.when_loaded(lambda c: None)
            observed["outer_loaded"] = p.loaded
            observed["child_loaded"] = child.loaded

        parent.when_loaded(outer)

        assert observed == {"outer_loaded": True, "child_loaded": None}
        assert parent.loaded is None
        assert child.loaded is None

    def test_inner_failure_on_same_host_restores_outer_value(self, checkout_cls):
        page = checkout_cls()

        def outer(p):
            # Invalidate the cache and break the page for the inner call
            p.loaded = None
            p.ready = False
            with pytest.raises(NotLoadedError):
                p.when_loaded(lambda q: None)
            return p.loaded

        assert page.when_loaded(outer) is None
        assert page.loaded is None

    def test_exception_through_nested_scopes(self, checkout_cls):
        page = checkout_cls()

        def inner(p):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            page.when_loaded(lambda p: p.when_loaded(inner))

        assert page.loaded is None


class TestArgumentContract:

    def test_missing_action(self, checkout_cls):
        page = checkout_cls()
        page.load_error = "previous"

        with pytest.raises(InvalidArgumentError) as exc_info:
            page.when_loaded()

        assert exc_info.value.error_code == "INVALID_ARGUMENT"
        assert page.loaded is None
        assert page.load_error == "previous"
        assert page.checks == 0

    def test_non_callable_action(self, checkout_cls):
        page = checkout_cls()

        with pytest.raises(InvalidArgumentError):
            run_while_ready(page, "click")

        assert page.checks == 0

    def test_invalid_argument_is_value_error(self, checkout_cls):
        with pytest.raises(ValueError):
            checkout_cls().when_loaded(None)
