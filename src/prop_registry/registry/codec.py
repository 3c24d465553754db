"""
JSON codec for registry documents.

Thin layer over orjson. Reading is tolerant: anything that is not a JSON
object comes back as None and the caller decides how to degrade.
"""

import logging
from pathlib import Path
from typing import Optional

import orjson

from .models import RegistryDocument

logger = logging.getLogger(__name__)

UTF8_BOM = b"\xef\xbb\xbf"


def parse_document(data: bytes | str) -> Optional[RegistryDocument]:
    """Parse registry JSON text.

    Returns:
        The document dict, or None if the text is not valid JSON or its
        top level is not an object
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    # Editors on Windows commonly prefix a BOM, which orjson rejects
    if data.startswith(UTF8_BOM):
        data = data[len(UTF8_BOM):]

    try:
        parsed = orjson.loads(data)
    except orjson.JSONDecodeError as e:
        logger.debug(f"Invalid registry JSON: {e}")
        return None

    if not isinstance(parsed, dict):
        logger.debug(f"Registry JSON top level is {type(parsed).__name__}, expected object")
        return None
    return parsed


def serialize_document(document: RegistryDocument) -> bytes:
    """Serialize a document as indented JSON, keeping key order."""
    return orjson.dumps(document, option=orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE)


def read_document(path: Path) -> Optional[RegistryDocument]:
    """Read and parse a registry file.

    Returns:
        The document dict, or None if the file is missing, unreadable or
        not a JSON object
    """
    try:
        with path.open("rb") as f:  # orjson works with bytes
            data = f.read()
    except FileNotFoundError:
        logger.debug(f"Registry file not found: {path}")
        return None
    except OSError as e:
        logger.warning(f"Could not read registry file {path}: {e}")
        return None

    document = parse_document(data)
    if document is None:
        logger.warning(f"Registry file is not a JSON object: {path}")
    return document
