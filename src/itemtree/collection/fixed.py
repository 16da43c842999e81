"""Fixed-capacity collection.

Items live in a preallocated slot array. ``size`` is the watermark of
live slots and is independent of ``capacity``.

Example:
    >>> from itemtree.collection.fixed import FixedCollection
    >>> from itemtree.models.item import Item
    >>> slots = FixedCollection(capacity=5)
    >>> for name in ("A", "B", "C"):
    ...     slots.add(Item(name=name, price="1"))
    >>> slots.count(), slots.capacity
    (3, 5)
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, cast

from itemtree.collection.base import BaseCollection
from itemtree.core.config import get_settings
from itemtree.core.exceptions import CollectionFullError

if TYPE_CHECKING:
    from itemtree.models.item import Item


class FixedCollection(BaseCollection):
    """Slot array with a live-count watermark.

    Inserting shifts later slots up; removing shifts them down and clears
    the vacated tail slot.
    """

    def __init__(
        self,
        items: Iterable[Item] = (),
        capacity: int | None = None,
    ) -> None:
        """Initialize the collection.

        Args:
            items: Initial contents, in order.
            capacity: Number of slots (default: ``Settings.fixed_capacity``).

        Raises:
            ValueError: If ``capacity`` is not positive.
            CollectionFullError: If ``items`` does not fit.
        """
        super().__init__()
        if capacity is None:
            capacity = get_settings().fixed_capacity
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._slots: list[Item | None] = [None] * capacity
        self._size = 0
        self.extend(items)

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_full(self) -> bool:
        return self._size >= len(self._slots)

    def count(self) -> int:
        return self._size

    def _get(self, index: int) -> Item:
        return cast("Item", self._slots[index])

    def _check_room(self, batch: list[Item]) -> None:
        if self._size + len(batch) > len(self._slots):
            raise CollectionFullError(
                f"Cannot add {len(batch)} items: {self._size} of {self.capacity} slots used"
            )

    def _insert(self, index: int, item: Item) -> None:
        if self.is_full():
            raise CollectionFullError(
                f"Cannot add {item.name!r}: capacity {self.capacity} reached"
            )
        for slot in range(self._size, index, -1):
            self._slots[slot] = self._slots[slot - 1]
        self._slots[index] = item
        self._size += 1

    def _delete(self, index: int) -> Item:
        removed = self._get(index)
        for slot in range(index, self._size - 1):
            self._slots[slot] = self._slots[slot + 1]
        self._size -= 1
        self._slots[self._size] = None
        return removed
