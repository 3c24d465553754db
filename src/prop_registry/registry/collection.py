"""
Ordered upsert-by-key collection.

Shared by the writer (JSON objects of one document) and the loader
(records folded across documents).
"""

from typing import Callable, Dict, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class KeyedCollection(Generic[T]):
    """Ordered list with a key -> position index.

    Upserting an item whose key is already indexed replaces the item at
    that position; otherwise the item is appended and its position is
    indexed. Items never move once placed.
    """

    def __init__(
        self,
        key: Callable[[T], Optional[str]],
        items: Optional[Iterable[T]] = None,
    ):
        """Initialize the collection.

        Args:
            key: Function returning the key of an item, or None for items
                 that can be stored but never matched
            items: Initial items, indexed first-seen-wins
        """
        self._key = key
        self._items: List[T] = []
        self._index: Dict[str, int] = {}

        for item in items or ():
            item_key = key(item)
            self._items.append(item)
            if item_key is not None and item_key not in self._index:
                self._index[item_key] = len(self._items) - 1

    def upsert(self, item: T) -> bool:
        """Replace the item with the same key, or append it.

        Returns:
            True if an existing item was replaced, False if appended
        """
        item_key = self._key(item)
        position = self._index.get(item_key) if item_key is not None else None
        if position is not None:
            self._items[position] = item
            return True

        self._items.append(item)
        if item_key is not None:
            self._index[item_key] = len(self._items) - 1
        return False

    def update_or_append(self, item_key: str, update: Callable[[T], None], create: Callable[[], T]) -> bool:
        """Mutate the item with `item_key` in place, or append a new one.

        Used when the stored item owns data the caller must not drop.

        Returns:
            True if an existing item was updated, False if one was appended
        """
        position = self._index.get(item_key)
        if position is not None:
            update(self._items[position])
            return True

        self._items.append(create())
        self._index[item_key] = len(self._items) - 1
        return False

    def get(self, item_key: str) -> Optional[T]:
        """Return the item stored under `item_key`, if any."""
        position = self._index.get(item_key)
        return self._items[position] if position is not None else None

    def __contains__(self, item_key: object) -> bool:
        return item_key in self._index

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> List[T]:
        """Return a copy of the items in order."""
        return self._items.copy()
