"""
Discovery and ordering of registry files.
"""

import logging
from pathlib import Path
from typing import Iterable, List

from .models import DEFAULT_MARKER, REGISTRY_SUFFIX

logger = logging.getLogger(__name__)


def find_registry_files(root: Path, suffix: str = REGISTRY_SUFFIX) -> List[Path]:
    """Recursively list files under `root` whose name ends with `suffix`.

    The result is unordered; use `order_registry_files` before folding.
    A missing root yields an empty list.
    """
    if not root.is_dir():
        logger.warning(f"Registry root is not a directory: {root}")
        return []

    return [p for p in root.rglob(f"*{suffix}") if p.is_file()]


def order_registry_files(paths: Iterable[Path], marker: str = DEFAULT_MARKER) -> List[Path]:
    """Sort paths case-insensitively and move the base file to the front.

    The base file is the first sorted path whose file name contains
    `marker`, ignoring case. If none does, the sorted order is returned
    as is.
    """
    ordered = sorted(paths, key=lambda p: str(p).casefold())
    folded_marker = marker.casefold()

    for index, path in enumerate(ordered):
        if folded_marker in path.name.casefold():
            if index:
                ordered.insert(0, ordered.pop(index))
            logger.debug(f"Base registry file: {path}")
            break
    else:
        logger.debug(f"No registry file contains '{marker}', using sorted order")

    return ordered
