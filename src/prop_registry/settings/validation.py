"""
Settings validation for prop_registry.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates registry settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        registry_root = self.settings.registry_root
        if registry_root:
            if not registry_root.exists():
                errors.append(f"Registry root does not exist: {registry_root}")
            elif not registry_root.is_dir():
                errors.append(f"Registry root is not a directory: {registry_root}")
        else:
            warnings.append("Registry root not set")

        content_root = self.settings.content_root
        if content_root and not content_root.is_dir():
            warnings.append(
                f"Content root does not exist, meshes will not resolve: {content_root}"
            )

        suffix = self.settings.paths.registry_suffix
        if not suffix.startswith("."):
            errors.append(f"Registry suffix must start with '.': {suffix!r}")

        default_name = self.settings.paths.default_file_name
        if not default_name.endswith(suffix):
            warnings.append(
                f"Default registry '{default_name}' does not end with '{suffix}' and will not be loaded"
            )
        elif self.settings.paths.default_marker not in default_name:
            warnings.append(
                f"Default registry '{default_name}' lacks marker "
                f"'{self.settings.paths.default_marker}' and will not load first"
            )

        for warning in warnings:
            logger.debug(f"Settings warning: {warning}")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
