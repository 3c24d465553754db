"""
Main service for the prop registry.

Provides the high-level API used by the rest of the system: persisting
props into the base registry and loading the merged catalog as actor
definitions.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional, TYPE_CHECKING

from .assets import AssetResolver, ContentAssetResolver, NullAssetResolver
from .definitions import ActorDefinition, make_prop_definitions
from .loader import RegistryLoader
from .models import (
    DEFAULT_FILE_NAME,
    DEFAULT_MARKER,
    REGISTRY_SUFFIX,
    PropRecord,
    PropRecordCollection,
)
from .writer import RegistryWriter
from ..settings.types import ConfigError

if TYPE_CHECKING:
    from ..settings import AppSettings


DefinitionBuilder = Callable[[PropRecordCollection], List[ActorDefinition]]


class PropRegistryService:
    """Service for reading and writing layered prop registries.

    The registry root comes from the explicit argument when given,
    otherwise from settings. Loading builds a fresh RegistryLoader (and
    asset resolver) per call so no state outlives one load.
    """

    def __init__(
        self,
        settings: Optional["AppSettings"] = None,
        *,
        registry_root: Optional[Path] = None,
        asset_resolver: Optional[AssetResolver] = None,
        builder: DefinitionBuilder = make_prop_definitions,
    ):
        """Initialize the service.

        Args:
            settings: App settings providing registry location and naming
            registry_root: Directory holding registry files; overrides settings
            asset_resolver: Mesh resolver; by default derived from settings
            builder: Turns merged records into actor definitions
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings
        self._registry_root = Path(registry_root) if registry_root else None
        self._asset_resolver = asset_resolver
        self.builder = builder
        self.writer = RegistryWriter()

        self.logger.debug(f"PropRegistryService initialized with root: {self.registry_root}")

    # Configuration lookups

    @property
    def registry_root(self) -> Optional[Path]:
        """Directory holding registry files."""
        if self._registry_root:
            return self._registry_root
        if self.settings:
            return self.settings.registry_root
        return None

    @property
    def default_registry_path(self) -> Optional[Path]:
        """Base registry file targeted by writes."""
        root = self.registry_root
        return root / self._default_file_name() if root else None

    def _default_file_name(self) -> str:
        return self.settings.paths.default_file_name if self.settings else DEFAULT_FILE_NAME

    def _require_root(self) -> Path:
        root = self.registry_root
        if root is None:
            raise ConfigError("Registry root is not configured")
        return root

    def _make_asset_resolver(self) -> AssetResolver:
        if self._asset_resolver is not None:
            return self._asset_resolver
        content_root = self.settings.content_root if self.settings else None
        if content_root:
            return ContentAssetResolver(content_root)
        return NullAssetResolver()

    def _make_loader(self) -> RegistryLoader:
        if self.settings:
            suffix = self.settings.paths.registry_suffix
            marker = self.settings.paths.default_marker
        else:
            suffix, marker = REGISTRY_SUFFIX, DEFAULT_MARKER
        return RegistryLoader(self._make_asset_resolver(), suffix=suffix, marker=marker)

    # Public API

    def write_props(self, records: Iterable[PropRecord]) -> None:
        """Insert or update props in the base registry file.

        Raises:
            ConfigError: If no registry root is configured
            RegistryWriteError: If the file cannot be written
        """
        path = self._require_root() / self._default_file_name()

        records = list(records)
        self.logger.info(f"Writing {len(records)} props to {path}")
        self.writer.merge(path, records)

    def load_records(self) -> PropRecordCollection:
        """Return the merged, name-unique prop records from all registry files."""
        root = self._require_root()
        return self._make_loader().load_all(root)

    def load_props(self) -> List[ActorDefinition]:
        """Load all registry files and build actor definitions from them."""
        root = self._require_root()
        definitions = self._make_loader().load_definitions(root, self.builder)
        self.logger.info(f"Built {len(definitions)} prop definitions")
        return definitions
