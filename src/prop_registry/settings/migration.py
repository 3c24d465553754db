"""
Settings migration for prop_registry.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .types import ConfigVersion

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

# Registry location relative to the content directory in 1.0 settings
LEGACY_REGISTRY_SUBPATH = ("Carla", "Config")


class SettingsMigrator:
    """Handles settings migration between versions."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def ensure_version(self) -> None:
        """Stamp the settings version on first run, migrate older layouts."""
        current_version = str(self.settings.value("app/version", "") or "")

        if not current_version:
            if self.settings.contains("paths/config"):
                # Pre-versioned settings always used the 1.0 layout
                self._migrate_config(ConfigVersion.V1_0.value, ConfigVersion.CURRENT.value)
                return
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")
        elif current_version != ConfigVersion.CURRENT.value:
            self._migrate_config(current_version, ConfigVersion.CURRENT.value)

    def _migrate_config(self, from_version: str, to_version: str) -> None:
        logger.info(f"Migrating configuration from {from_version} to {to_version}")

        if from_version == ConfigVersion.V1_0.value and to_version == ConfigVersion.V1_1.value:
            self._migrate_1_0_to_1_1()
        else:
            logger.warning(f"No migration path from {from_version}, keeping values as is")

        self.settings.setValue("app/version", to_version)
        self.settings.setValue("app/migrated_from", from_version)
        self.settings.sync()
        logger.info(f"Migration from {from_version} to {to_version} completed")

    def _migrate_1_0_to_1_1(self) -> None:
        """Split the single content directory into registry and content roots."""
        old_content = str(self.settings.value("paths/config", "") or "")
        if not old_content:
            return

        content_root = Path(old_content)
        registry_root = content_root.joinpath(*LEGACY_REGISTRY_SUBPATH)

        if not self.settings.value("paths/registry_root", ""):
            self.settings.setValue("paths/registry_root", str(registry_root))
            logger.info(f"Migrated registry root: {registry_root}")
        if not self.settings.value("paths/content_root", ""):
            self.settings.setValue("paths/content_root", str(content_root))
            logger.info(f"Migrated content root: {content_root}")

        self.settings.remove("paths/config")
        self.settings.sync()
