# tests/conftest.py
import pytest

from loadgate.config import reset_config
from loadgate.core.rules import reset_global_registry


@pytest.fixture(autouse=True)
def reset_state():
    """Reset global registry and configuration around each test"""
    reset_global_registry()
    reset_config()
    yield
    reset_global_registry()
    reset_config()
