"""
prop_registry: layered JSON registry of static prop definitions.

Merges prop metadata into a default registry file and loads every
registry layer, default first, into actor definitions.
"""

__version__ = "0.1.0"

from .registry import (
    PropRegistryService,
    RegistryWriter,
    RegistryLoader,
    PropRecord,
    PropSize,
    MeshHandle,
    ActorDefinition,
    RegistryError,
    RegistryWriteError,
)
from .settings import AppSettings, ConfigError
from .utils.logging_config import setup_logging

__all__ = [
    # Services
    "PropRegistryService",
    "RegistryWriter",
    "RegistryLoader",
    # Settings and logging
    "AppSettings",
    "ConfigError",
    "setup_logging",
    # Data models
    "PropRecord",
    "PropSize",
    "MeshHandle",
    "ActorDefinition",
    # Errors
    "RegistryError",
    "RegistryWriteError",
]
