"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging
from .registry import (
    DEFAULT_CORRECTIONS,
    RegistryPaths,
    get_registry_corrections,
    get_registry_paths,
    get_registry_rules,
    load_corrections,
)

__all__ = [
    "DEFAULT_CORRECTIONS",
    "ConfigurationError",
    "MissingConfigurationError",
    "RegistryPaths",
    "configure_logging",
    "get_registry_corrections",
    "get_registry_paths",
    "get_registry_rules",
    "load_corrections",
    "optional_env_var",
    "require_env_vars",
]
