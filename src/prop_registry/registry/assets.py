"""
Mesh asset resolution.

Registry files reference meshes by engine object path, e.g.
``/Game/Carla/Static/SM_Bench.SM_Bench``. Resolvers turn such a string
into a MeshHandle, or None when the asset cannot be found. Resolvers
never raise.
"""

import logging
from pathlib import Path, PurePosixPath
from typing import Dict, List, Optional, Protocol

from .models import MeshHandle

GAME_MOUNT = "/Game/"
PACKAGE_EXTENSION = ".uasset"


class AssetResolver(Protocol):
    """Anything that can resolve a mesh path string."""

    def resolve(self, path_name: str) -> Optional[MeshHandle]:
        ...


class NullAssetResolver:
    """Resolver used when no content directory is configured.

    Every non-empty path resolves to a handle without a backing file.
    """

    def resolve(self, path_name: str) -> Optional[MeshHandle]:
        if not path_name:
            return None
        return MeshHandle(path_name=path_name)


class ContentAssetResolver:
    """Resolves mesh paths against files under a content directory.

    Results are cached per instance, so one resolver should live no
    longer than one load.
    """

    def __init__(self, content_root: Path):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.content_root = Path(content_root)
        self._cache: Dict[str, Optional[MeshHandle]] = {}

    def resolve(self, path_name: str) -> Optional[MeshHandle]:
        """Return a handle for `path_name`, or None if no file backs it."""
        if not path_name:
            return None

        if path_name in self._cache:
            return self._cache[path_name]

        handle: Optional[MeshHandle] = None
        try:
            for candidate in self._candidates(path_name):
                if candidate.is_file():
                    handle = MeshHandle(path_name=path_name, file=str(candidate))
                    break
        except (OSError, ValueError) as e:
            self.logger.debug(f"Could not resolve mesh '{path_name}': {e}")

        if handle is None:
            self.logger.debug(f"No content file for mesh: {path_name}")

        self._cache[path_name] = handle
        return handle

    def _candidates(self, path_name: str) -> List[Path]:
        """Map an object path onto candidate files under the content root."""
        candidates: List[Path] = []

        if path_name.startswith(GAME_MOUNT):
            relative = PurePosixPath(path_name[len(GAME_MOUNT):])
        elif path_name.startswith("/"):
            # Other mount points are not backed by this content directory
            return candidates
        else:
            relative = PurePosixPath(path_name)
            # Plain relative file paths are accepted verbatim
            if ".." not in relative.parts:
                candidates.append(self.content_root.joinpath(*relative.parts))

        if not relative.parts or ".." in relative.parts:
            return candidates

        # "Dir/SM_Name.SM_Name" names object SM_Name inside package Dir/SM_Name
        package = relative
        stem, _, object_name = package.name.partition(".")
        if object_name and object_name != PACKAGE_EXTENSION.lstrip("."):
            package = package.with_name(stem)

        if package.suffix != PACKAGE_EXTENSION:
            package = package.with_name(package.name + PACKAGE_EXTENSION)

        candidates.append(self.content_root.joinpath(*package.parts))
        return candidates
