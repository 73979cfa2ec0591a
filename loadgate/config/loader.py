# loadgate/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, fields
import dataclasses
from pathlib import Path
from typing import Any, Dict, Optional
import logging
import threading

import yaml


logger = logging.getLogger(__name__)

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LoadGateConfig:
    """
    Unified loadgate configuration.

    default_load_validations: seed the display check into root page types.
        Read when a root type's rule list is first built, so it can be
        changed after the classes are defined but before they are used.
    log_level: level applied to the ``loadgate`` logger by configure_logging()
    """

    default_load_validations: bool = True
    log_level: str = "WARNING"

    def __post_init__(self):
        level = str(self.log_level).upper()
        if level not in _LEVELS:
            raise ValueError(
                f"Unknown log_level '{self.log_level}'. "
                f"Expected one of: {', '.join(_LEVELS)}"
            )
        object.__setattr__(self, "log_level", level)

    @classmethod
    def default(cls) -> "LoadGateConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "LoadGateConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries ~/.loadgate/config.yml

        Returns:
            LoadGateConfig instance (always has code defaults as fallback)
        """
        config = cls.default()

        yaml_data = _load_yaml(config_path)
        if not yaml_data:
            return config

        section = yaml_data.get("loadable", yaml_data)
        if not isinstance(section, dict):
            logger.warning("Ignoring malformed 'loadable' section in config")
            return config

        return _merge_config(config, section)

    def replace(self, **changes: Any) -> "LoadGateConfig":
        """Return a copy with the given fields changed"""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {"loadable": asdict(self)}


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    if config_path:
        paths = [Path(config_path)]
    else:
        paths = [Path.home() / ".loadgate" / "config.yml"]

    for path in paths:
        if path.exists():
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
            logger.debug("Loaded configuration from %s", path)
            return data if isinstance(data, dict) else None

    return None


def _merge_config(default_instance: LoadGateConfig, yaml_data: Dict[str, Any]) -> LoadGateConfig:
    """Merge YAML data into default config instance, dropping unknown keys"""
    known = {f.name for f in fields(LoadGateConfig)}
    unknown = sorted(k for k in yaml_data if k not in known)
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
    merged = {**asdict(default_instance), **{k: v for k, v in yaml_data.items() if k in known}}
    return LoadGateConfig(**merged)


# Global configuration instance
_global_config: Optional[LoadGateConfig] = None
_global_config_lock = threading.Lock()


def get_config() -> LoadGateConfig:
    """
    Get the global configuration.

    Lazily initialized to code defaults on first access.
    """
    global _global_config

    if _global_config is None:
        with _global_config_lock:
            if _global_config is None:
                _global_config = LoadGateConfig.default()

    return _global_config


def set_config(config: LoadGateConfig) -> None:
    """Replace the global configuration"""
    global _global_config
    with _global_config_lock:
        _global_config = config


def reset_config() -> None:
    """Reset the global configuration to code defaults (useful for testing)"""
    global _global_config
    with _global_config_lock:
        _global_config = None


def load_config(config_path: Optional[Path] = None) -> LoadGateConfig:
    """
    Load configuration from YAML and install it as the global configuration.

    Note:
        - If YAML is not found, code defaults are installed
        - Malformed YAML raises yaml.YAMLError
    """
    config = LoadGateConfig.from_yaml(config_path)
    set_config(config)
    return config


def configure_logging(config: Optional[LoadGateConfig] = None) -> logging.Logger:
    """Apply the configured log level to the ``loadgate`` logger"""
    config = config or get_config()
    root = logging.getLogger("loadgate")
    root.setLevel(config.log_level)
    return root


__all__ = [
    "LoadGateConfig",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",
    "configure_logging",
]
