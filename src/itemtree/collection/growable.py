"""List-backed collection with no size limit.

Example:
    >>> from itemtree.collection.growable import GrowableCollection
    >>> from itemtree.models.item import Item
    >>> items = GrowableCollection([Item(name="Waffles", price="3.59")])
    >>> items.item_at(0).name
    'Waffles'
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from itemtree.collection.base import BaseCollection

if TYPE_CHECKING:
    from itemtree.models.item import Item


class GrowableCollection(BaseCollection):
    """Dynamically resized ordered sequence."""

    def __init__(self, items: Iterable[Item] = ()) -> None:
        super().__init__()
        self._items: list[Item] = []
        self.extend(items)

    def count(self) -> int:
        return len(self._items)

    def _get(self, index: int) -> Item:
        return self._items[index]

    def _insert(self, index: int, item: Item) -> None:
        self._items.insert(index, item)

    def _delete(self, index: int) -> Item:
        return self._items.pop(index)
