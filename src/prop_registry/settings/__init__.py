"""
Settings package for prop_registry.

Type-safe configuration backed by Qt's QSettings for cross-platform
storage.

Usage:
    from prop_registry.settings import AppSettings

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .paths import RegistryPathSettings
from .logging import LoggingSettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "RegistryPathSettings",
    "LoggingSettings",
]
