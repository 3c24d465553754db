"""
Configuration types and exceptions for prop_registry settings.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ConfigVersion(Enum):
    """Settings layout version, used by the migrator."""
    V1_0 = "1.0"  # single content directory, registry under Carla/Config
    V1_1 = "1.1"  # explicit registry root
    CURRENT = V1_1


class ConfigError(Exception):
    """Raised when settings are missing or invalid for the requested operation."""
    pass


@dataclass
class ValidationResult:
    """Outcome of settings validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def raise_if_invalid(self) -> None:
        """Raise ConfigError listing all errors if validation failed."""
        if not self.is_valid:
            raise ConfigError("; ".join(self.errors))
