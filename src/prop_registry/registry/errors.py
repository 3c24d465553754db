"""
Exceptions raised by the prop registry.
"""

from pathlib import Path


class RegistryError(Exception):
    """Base class for registry failures."""
    pass


class RegistryWriteError(RegistryError):
    """Raised when a registry document cannot be persisted."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Could not write registry file {path}: {reason}")
        self.path = path
