"""
Layered prop registry.

Reads and writes `*.PropRegistry.json` files. The writer upserts props
into the default file; the loader folds every registry file, default
first, into one name-unique catalog.
"""

from .service import PropRegistryService
from .models import (
    PropRecord,
    PropRecordCollection,
    PropSize,
    MeshHandle,
    RegistryDocument,
    SIZE_NAMES,
    REGISTRY_SUFFIX,
    DEFAULT_MARKER,
    DEFAULT_FILE_NAME,
    DEFINITIONS_KEY,
)
from .collection import KeyedCollection
from .writer import RegistryWriter
from .loader import RegistryLoader
from .assets import AssetResolver, ContentAssetResolver, NullAssetResolver
from .definitions import ActorAttribute, ActorDefinition, make_prop_definitions
from .errors import RegistryError, RegistryWriteError

__all__ = [
    # Main service
    "PropRegistryService",
    # Models
    "PropRecord",
    "PropRecordCollection",
    "PropSize",
    "MeshHandle",
    "RegistryDocument",
    "ActorAttribute",
    "ActorDefinition",
    # Constants
    "SIZE_NAMES",
    "REGISTRY_SUFFIX",
    "DEFAULT_MARKER",
    "DEFAULT_FILE_NAME",
    "DEFINITIONS_KEY",
    # Component classes (for advanced usage)
    "KeyedCollection",
    "RegistryWriter",
    "RegistryLoader",
    "AssetResolver",
    "ContentAssetResolver",
    "NullAssetResolver",
    "make_prop_definitions",
    # Errors
    "RegistryError",
    "RegistryWriteError",
]
