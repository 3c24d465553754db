"""
Core settings management for prop_registry.
"""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QSettings

from .types import ConfigVersion, ValidationResult
from .migration import SettingsMigrator
from .validation import SettingsValidator
from .paths import RegistryPathSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)

ORGANIZATION = "carla"
APPLICATION = "prop_registry"


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to registry and logging settings with
    cross-platform storage and validation.
    """

    def __init__(self, profile: str = "default", settings: Optional[QSettings] = None):
        """Initialize settings for a profile.

        Args:
            profile: Settings profile name (default: "default")
            settings: Backing store; defaults to the per-user native store
        """
        self.settings = settings if settings is not None else QSettings(ORGANIZATION, APPLICATION)
        self.profile = profile

        # Use profile as a group: carla/prop_registry/default/...
        self.settings.beginGroup(profile)

        self._migrator = SettingsMigrator(self.settings)
        self._validator = SettingsValidator(self)
        self._paths = RegistryPathSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        self._migrator.ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def paths(self) -> RegistryPathSettings:
        """Access registry path settings subsystem."""
        return self._paths

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def version(self) -> str:
        """Get configuration version."""
        value = self.settings.value("app/version", ConfigVersion.CURRENT.value)
        return str(value) if value is not None else ConfigVersion.CURRENT.value

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def registry_root(self) -> Optional[Path]:
        """Directory searched for registry files."""
        return self._paths.registry_root

    @registry_root.setter
    def registry_root(self, value: Optional[Path]) -> None:
        self._paths.registry_root = value

    @property
    def content_root(self) -> Optional[Path]:
        """Directory mesh paths resolve against."""
        return self._paths.content_root

    @content_root.setter
    def content_root(self, value: Optional[Path]) -> None:
        self._paths.content_root = value

    @property
    def default_registry_path(self) -> Optional[Path]:
        """Base registry file targeted by writes."""
        return self._paths.default_registry_path

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        return self._logging.log_file_path

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    def get_settings_file_path(self) -> str:
        """Location of the backing settings store."""
        return self.settings.fileName()
