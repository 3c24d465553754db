"""
Loader for layered prop registries.

Discovers every registry file under a root directory, orders them with
the base file first and folds their records into one collection, later
files overriding earlier ones by name.
"""

import logging
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence

from .assets import AssetResolver, NullAssetResolver
from .codec import read_document
from .collection import KeyedCollection
from .discovery import find_registry_files, order_registry_files
from .models import (
    DEFAULT_MARKER,
    DEFINITIONS_KEY,
    NAME_KEY,
    PATH_KEY,
    REGISTRY_SUFFIX,
    SIZE_KEY,
    PropRecord,
    PropRecordCollection,
    PropSize,
)


class RegistryLoader:
    """Builds the merged prop catalog from all registry files."""

    def __init__(
        self,
        asset_resolver: Optional[AssetResolver] = None,
        suffix: str = REGISTRY_SUFFIX,
        marker: str = DEFAULT_MARKER,
    ):
        """Initialize the loader.

        Args:
            asset_resolver: Resolver for mesh paths (defaults to NullAssetResolver)
            suffix: File name suffix of registry files
            marker: Token identifying the base file
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.asset_resolver: AssetResolver = asset_resolver or NullAssetResolver()
        self.suffix = suffix
        self.marker = marker

    def discover(self, root_directory: Path) -> List[Path]:
        """Return registry files under `root_directory` in processing order."""
        files = order_registry_files(
            find_registry_files(Path(root_directory), self.suffix), self.marker
        )
        self.logger.info(f"Found {len(files)} registry files under {root_directory}")
        return files

    def load_all(self, root_directory: Path) -> PropRecordCollection:
        """Fold all registry files under `root_directory` into one record list."""
        return self.load_files(self.discover(root_directory))

    def load_files(self, files: Sequence[Path]) -> PropRecordCollection:
        """Fold the given registry files in order.

        Unreadable files and malformed entries are logged and skipped.
        """
        records: KeyedCollection[PropRecord] = KeyedCollection(lambda r: r.name)

        for path in files:
            entries = self._read_definitions(path)
            if entries is None:
                continue

            overridden = 0
            for entry in entries:
                record = self._parse_record(entry, path)
                if record is not None and records.upsert(record):
                    overridden += 1

            self.logger.debug(
                f"Loaded {len(entries)} entries from {path} ({overridden} overrides)"
            )

        self.logger.info(f"Prop registry loaded: {len(records)} props")
        return records.to_list()

    def load_definitions(
        self, root_directory: Path, builder: Callable[[PropRecordCollection], Any]
    ) -> Any:
        """Load all records and hand them to `builder`, returning its result."""
        return builder(self.load_all(root_directory))

    def _read_definitions(self, path: Path) -> Optional[List[Any]]:
        """Return the `definitions` array of a file, or None to skip it."""
        document = read_document(path)
        if document is None:
            self.logger.warning(f"Skipping unreadable registry file: {path}")
            return None

        entries = document.get(DEFINITIONS_KEY)
        if not isinstance(entries, list):
            self.logger.warning(
                f"Skipping registry file without '{DEFINITIONS_KEY}' array: {path}"
            )
            return None
        return entries

    def _parse_record(self, entry: Any, source: Path) -> Optional[PropRecord]:
        """Build a PropRecord from a JSON entry, resolving its mesh."""
        if not isinstance(entry, dict):
            self.logger.warning(f"Ignoring non-object entry in {source}: {entry!r}")
            return None

        name = entry.get(NAME_KEY)
        if not isinstance(name, str):
            self.logger.warning(f"Ignoring entry without '{NAME_KEY}' in {source}")
            return None

        mesh_path = entry.get(PATH_KEY)
        if not isinstance(mesh_path, str):
            mesh_path = ""

        raw_size = entry.get(SIZE_KEY)
        size = PropSize.from_name(raw_size)
        if size is PropSize.INVALID and raw_size != PropSize.INVALID.canonical_name:
            self.logger.warning(f"Unknown size {raw_size!r} for prop '{name}' in {source}")

        mesh = self.asset_resolver.resolve(mesh_path)
        if mesh is None:
            self.logger.warning(f"Prop '{name}' has no loadable mesh: {mesh_path!r}")

        return PropRecord(name=name, mesh_path=mesh_path, size=size, mesh=mesh)
