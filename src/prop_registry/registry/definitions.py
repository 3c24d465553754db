"""
Actor definitions built from merged prop records.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .collection import KeyedCollection
from .models import MeshHandle, PropRecord, PropRecordCollection, PropSize

logger = logging.getLogger(__name__)

PROP_CATEGORY = "static"
PROP_TYPE = "prop"
UNKNOWN_SIZE = "unknown"


@dataclass
class ActorAttribute:
    """A typed attribute of an actor definition."""

    id: str
    value: str
    type: str = "string"
    recommended_values: List[str] = field(default_factory=list)
    is_modifiable: bool = False


@dataclass
class ActorDefinition:
    """Spawnable actor description consumed by the rest of the system."""

    id: str
    tags: List[str]
    attributes: List[ActorAttribute] = field(default_factory=list)
    mesh: Optional[MeshHandle] = None

    def get_attribute(self, attribute_id: str) -> Optional[ActorAttribute]:
        """Return the attribute with `attribute_id`, if present."""
        for attribute in self.attributes:
            if attribute.id == attribute_id:
                return attribute
        return None


def size_attribute_value(size: PropSize) -> str:
    """Lower-case size name, or "unknown" for INVALID."""
    if size is PropSize.INVALID:
        return UNKNOWN_SIZE
    return size.value


def is_valid_definition_id(name: str) -> bool:
    """Check that a prop name can be used in a definition id."""
    return bool(name) and not any(c.isspace() for c in name)


def make_prop_definition(record: PropRecord) -> Optional[ActorDefinition]:
    """Build the actor definition for one prop, or None if it is invalid."""
    if not is_valid_definition_id(record.name):
        logger.error(f"Invalid prop name for actor definition: {record.name!r}")
        return None

    name = record.name.lower()
    return ActorDefinition(
        id=".".join((PROP_CATEGORY, PROP_TYPE, name)),
        tags=[PROP_CATEGORY, PROP_TYPE, name],
        attributes=[
            ActorAttribute(
                id="role_name",
                value=PROP_TYPE,
                recommended_values=[PROP_TYPE],
                is_modifiable=True,
            ),
            ActorAttribute(id="size", value=size_attribute_value(record.size)),
        ],
        mesh=record.mesh,
    )


def make_prop_definitions(records: PropRecordCollection) -> List[ActorDefinition]:
    """Build actor definitions for all records, dropping invalid ones.

    Ids are lower case, so names differing only in case share one id.
    The later record wins and keeps the position of the first.
    """
    definitions: KeyedCollection[ActorDefinition] = KeyedCollection(lambda d: d.id)
    dropped = 0
    for record in records:
        definition = make_prop_definition(record)
        if definition is None:
            dropped += 1
        elif definitions.upsert(definition):
            logger.warning(f"Duplicate actor definition id {definition.id}, using {record.name!r}")

    if dropped:
        logger.warning(f"Dropped {dropped} props with invalid definitions")
    return definitions.to_list()
