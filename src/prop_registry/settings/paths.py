"""
Registry location settings for prop_registry.
"""

import logging
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from ..registry.models import DEFAULT_FILE_NAME, DEFAULT_MARKER, REGISTRY_SUFFIX

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


class RegistryPathSettings:
    """Manages where registry files and mesh assets live."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_path(self, key: str) -> Optional[Path]:
        path_str = self._get_str(key, "")
        return Path(path_str) if path_str else None

    def _set_path(self, key: str, value: Optional[Path]) -> None:
        self.settings.setValue(key, str(value) if value else "")
        self.settings.sync()

    # === DIRECTORIES ===

    @property
    def registry_root(self) -> Optional[Path]:
        """Directory searched recursively for registry files."""
        return self._get_path("paths/registry_root")

    @registry_root.setter
    def registry_root(self, value: Optional[Path]) -> None:
        self._set_path("paths/registry_root", value)

    @property
    def content_root(self) -> Optional[Path]:
        """Directory that `/Game/...` mesh paths resolve against."""
        return self._get_path("paths/content_root")

    @content_root.setter
    def content_root(self, value: Optional[Path]) -> None:
        self._set_path("paths/content_root", value)

    # === FILE NAMING ===

    @property
    def default_file_name(self) -> str:
        """File name of the base registry, written by the writer."""
        return self._get_str("registry/default_file_name", DEFAULT_FILE_NAME)

    @default_file_name.setter
    def default_file_name(self, value: str) -> None:
        if not value or Path(value).name != value:
            logger.warning(
                f"Invalid default registry file name: {value!r}, keeping current: {self.default_file_name}"
            )
            return
        self.settings.setValue("registry/default_file_name", value)
        self.settings.sync()

    @property
    def registry_suffix(self) -> str:
        """File name suffix identifying registry files."""
        return self._get_str("registry/suffix", REGISTRY_SUFFIX)

    @registry_suffix.setter
    def registry_suffix(self, value: str) -> None:
        self.settings.setValue("registry/suffix", value)
        self.settings.sync()

    @property
    def default_marker(self) -> str:
        """Token whose presence in a file name marks the base registry."""
        return self._get_str("registry/default_marker", DEFAULT_MARKER)

    @default_marker.setter
    def default_marker(self, value: str) -> None:
        self.settings.setValue("registry/default_marker", value)
        self.settings.sync()

    @property
    def default_registry_path(self) -> Optional[Path]:
        """Full path of the base registry (derived from registry_root)."""
        if self.registry_root:
            return self.registry_root / self.default_file_name
        return None
