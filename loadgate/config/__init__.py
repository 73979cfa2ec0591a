# loadgate/config/__init__.py
"""
loadgate Configuration

Design principles:
1. Code has defaults, YAML is optional input (YAML can be deleted)
2. Configuration objects are frozen; replace the global one to change it
"""

from .loader import (
    LoadGateConfig,
    get_config,
    set_config,
    reset_config,
    load_config,
    configure_logging,
)

__all__ = [
    "LoadGateConfig",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",
    "configure_logging",
]
