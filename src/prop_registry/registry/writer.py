"""
Writer for the base registry document.

Upserts records into the `definitions` array of the default file and
rewrites it atomically. Everything else in the document is carried over
untouched.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Iterable, List, Optional

from .codec import read_document, serialize_document
from .collection import KeyedCollection
from .errors import RegistryWriteError
from .models import DEFINITIONS_KEY, NAME_KEY, PropRecord, RecordObject, RegistryDocument


def _record_key(obj: Any) -> Optional[str]:
    """Key of a raw `definitions` entry; malformed entries are never matched."""
    if isinstance(obj, dict):
        name = obj.get(NAME_KEY)
        if isinstance(name, str):
            return name
    return None


class RegistryWriter:
    """Merges prop records into a registry file on disk."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def merge(self, base_document_path: Path, incoming_records: Iterable[PropRecord]) -> None:
        """Upsert records into the document at `base_document_path`.

        A missing or unparsable document is treated as empty. Existing
        entries are updated in place, so their position and any extra
        keys survive; new entries are appended in input order.

        Args:
            base_document_path: Registry file to rewrite
            incoming_records: Records to insert or update

        Raises:
            RegistryWriteError: If the document cannot be written
        """
        base_document_path = Path(base_document_path)

        document = read_document(base_document_path)
        if document is None:
            self.logger.info(f"Starting new registry document at {base_document_path}")
            document = {}

        merged = self.merge_document(document, incoming_records)
        self._write(base_document_path, serialize_document(merged))

    def merge_document(
        self, document: RegistryDocument, incoming_records: Iterable[PropRecord]
    ) -> RegistryDocument:
        """Upsert records into an in-memory document and return it.

        The document is modified in place.
        """
        existing = document.get(DEFINITIONS_KEY)
        if existing is None:
            existing = []
        elif not isinstance(existing, list):
            self.logger.warning(
                f"'{DEFINITIONS_KEY}' is {type(existing).__name__}, replacing with a list"
            )
            existing = []

        definitions: KeyedCollection[Any] = KeyedCollection(_record_key, existing)

        updated = 0
        added = 0
        for record in incoming_records:
            if definitions.update_or_append(record.name, record.apply_to, record.to_json):
                updated += 1
            else:
                added += 1

        result: List[RecordObject] = definitions.to_list()
        document[DEFINITIONS_KEY] = result

        self.logger.debug(
            f"Merged registry: {updated} updated, {added} added, {len(result)} total"
        )
        return document

    def _write(self, path: Path, data: bytes) -> None:
        """Replace `path` with `data` without leaving a partial file behind."""
        tmp_name: Optional[str] = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            self.logger.error(f"Failed to write registry file {path}: {e}")
            raise RegistryWriteError(path, str(e)) from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass

        self.logger.info(f"Registry file written: {path}")
