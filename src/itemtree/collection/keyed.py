"""Name-keyed collection.

Stores items in an insertion-ordered mapping keyed by item name. Position
follows insertion order, so the mapping still satisfies the indexed
collection contract.

Example:
    >>> from itemtree.collection.keyed import KeyedCollection
    >>> from itemtree.models.item import Item
    >>> items = KeyedCollection([Item(name="Soup", price="3.69")])
    >>> items.get("Soup").price
    Decimal('3.69')
    >>> items.get("Burrito") is None
    True
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from itemtree.collection.base import BaseCollection

if TYPE_CHECKING:
    from itemtree.models.item import Item

logger = logging.getLogger(__name__)


class KeyedCollection(BaseCollection):
    """Insertion-ordered mapping of name to item.

    Adding an item whose name is already present replaces the old item
    in its original position instead of appending a duplicate.
    """

    def __init__(self, items: Iterable[Item] = ()) -> None:
        super().__init__()
        self._items: dict[str, Item] = {}
        self._keys: list[str] | None = None
        self.extend(items)

    def get(self, name: str) -> Item | None:
        """Item stored under ``name``, or None."""
        return self._items.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def add(self, item: Item) -> None:
        """Append ``item``, or replace the item of the same name in place."""
        if item.name in self._items:
            logger.warning(f"KeyedCollection: replacing existing item {item.name!r}")
            self._items[item.name] = item
            self._revision += 1
            return
        super().add(item)

    def count(self) -> int:
        return len(self._items)

    def _key_at(self, index: int) -> str:
        if self._keys is None:
            self._keys = list(self._items)
        return self._keys[index]

    def _get(self, index: int) -> Item:
        return self._items[self._key_at(index)]

    def _insert(self, index: int, item: Item) -> None:
        entries = [(key, value) for key, value in self._items.items() if key != item.name]
        entries.insert(min(index, len(entries)), (item.name, item))
        self._items = dict(entries)
        self._keys = None

    def _delete(self, index: int) -> Item:
        removed = self._items.pop(self._key_at(index))
        self._keys = None
        return removed
