"""
Data models for prop registry documents.

Contains the size enum with its explicit name table, the record type that
flows through merges, and the keys of the on-disk JSON schema. Documents
themselves stay plain dicts so unknown content survives a rewrite.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, TypeAlias


# Type aliases for clarity
RegistryDocument: TypeAlias = Dict[str, Any]
"""A whole registry file as parsed from JSON."""

RecordObject: TypeAlias = Dict[str, Any]
"""A single entry of the `definitions` array."""


# Registry file layout
REGISTRY_SUFFIX = ".PropRegistry.json"
DEFAULT_MARKER = "Default"
DEFAULT_FILE_NAME = DEFAULT_MARKER + REGISTRY_SUFFIX

# JSON keys
DEFINITIONS_KEY = "definitions"
NAME_KEY = "name"
PATH_KEY = "path"
SIZE_KEY = "size"


class PropSize(Enum):
    """Size class of a prop."""

    TINY = "tiny"
    SMALL = "small"
    MEDIUM = "medium"
    BIG = "big"
    HUGE = "huge"
    INVALID = "invalid"

    @classmethod
    def from_name(cls, value: Any) -> "PropSize":
        """Map a textual size to its enum value.

        Lookup is case-insensitive. Anything unrecognised, including
        non-string values, maps to INVALID.
        """
        if not isinstance(value, str):
            return cls.INVALID
        return _SIZES_BY_NAME.get(value.strip().lower(), cls.INVALID)

    @property
    def canonical_name(self) -> str:
        """Name written to registry files."""
        return SIZE_NAMES[self]


# Canonical spelling used in registry files, both directions
SIZE_NAMES: Dict[PropSize, str] = {
    PropSize.TINY: "Tiny",
    PropSize.SMALL: "Small",
    PropSize.MEDIUM: "Medium",
    PropSize.BIG: "Big",
    PropSize.HUGE: "Huge",
    PropSize.INVALID: "INVALID",
}

_SIZES_BY_NAME: Dict[str, PropSize] = {
    name.lower(): size for size, name in SIZE_NAMES.items()
}


@dataclass(frozen=True)
class MeshHandle:
    """Opaque handle for a resolved mesh asset.

    Attributes:
        path_name: Asset path as written in the registry
        file: File backing the asset, if one was located
    """

    path_name: str
    file: Optional[str] = None


@dataclass
class PropRecord:
    """One named entry of a registry document."""

    name: str
    mesh_path: str = ""
    size: PropSize = PropSize.INVALID
    mesh: Optional[MeshHandle] = None

    @property
    def path_name(self) -> str:
        """Asset path to persist, preferring the handle when present."""
        if self.mesh is not None:
            return self.mesh.path_name
        return self.mesh_path

    def to_json(self) -> RecordObject:
        """Build the JSON object stored in `definitions`."""
        return {
            NAME_KEY: self.name,
            PATH_KEY: self.path_name,
            SIZE_KEY: self.size.canonical_name,
        }

    def apply_to(self, obj: RecordObject) -> None:
        """Overwrite the registry fields of an existing JSON object in place."""
        obj.update(self.to_json())


PropRecordCollection: TypeAlias = List[PropRecord]
"""Ordered, name-unique list of records."""
