"""Base collection adapter.

Wraps a backing store behind the uniform ItemCollection interface.
Subclasses supply the storage primitives; this class owns bounds checks,
revision tracking and iterator creation so every variant behaves alike.

Example:
    >>> from itemtree.collection.base import BaseCollection, ItemCollection
    >>> hasattr(BaseCollection, "create_iterator")
    True
    >>> hasattr(ItemCollection, "item_at")
    True
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from itemtree.core.exceptions import OutOfRangeError
from itemtree.iterator.sequential import SequentialIterator
from itemtree.protocols.collection import ItemCollection

if TYPE_CHECKING:
    from itemtree.models.item import Item

logger = logging.getLogger(__name__)

__all__ = ["BaseCollection", "ItemCollection"]


class BaseCollection(ABC):
    """Base class for collection adapters.

    Subclasses implement four primitives over their backing store:
    ``count()``, ``_get()``, ``_insert()`` and ``_delete()``. Indexes passed
    to the primitives are already validated.

    Example:
        >>> class ListBacked(BaseCollection):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self._data = []
        ...     def count(self):
        ...         return len(self._data)
        ...     def _get(self, index):
        ...         return self._data[index]
        ...     def _insert(self, index, item):
        ...         self._data.insert(index, item)
        ...     def _delete(self, index):
        ...         return self._data.pop(index)
        >>> ListBacked().count()
        0
    """

    def __init__(self) -> None:
        self._revision = 0

    @property
    def revision(self) -> int:
        """Counter bumped on every insert or removal."""
        return self._revision

    @abstractmethod
    def count(self) -> int:
        """Number of live items."""
        ...

    @abstractmethod
    def _get(self, index: int) -> Item:
        ...

    @abstractmethod
    def _insert(self, index: int, item: Item) -> None:
        ...

    @abstractmethod
    def _delete(self, index: int) -> Item:
        """Remove the item at ``index`` and close the gap."""
        ...

    def item_at(self, index: int) -> Item:
        """Item at ``index``.

        Raises:
            OutOfRangeError: If ``index`` is outside ``[0, count())``.
        """
        self._check_index(index, self.count())
        return self._get(index)

    def insert(self, index: int, item: Item) -> None:
        """Insert ``item`` before position ``index`` (``count()`` appends).

        Raises:
            OutOfRangeError: If ``index`` is outside ``[0, count()]``.
        """
        self._check_index(index, self.count() + 1)
        self._insert(index, item)
        self._revision += 1
        logger.debug(f"{type(self).__name__}: inserted {item.name!r} at {index}")

    def add(self, item: Item) -> None:
        """Append ``item``."""
        self.insert(self.count(), item)

    def extend(self, items: Iterable[Item]) -> None:
        """Append several items, all or none.

        Raises:
            CollectionFullError: If the batch does not fit; nothing is added.
        """
        batch = list(items)
        self._check_room(batch)
        for item in batch:
            self.add(item)

    def _check_room(self, batch: list[Item]) -> None:
        """Raise before any write if ``batch`` cannot be stored."""

    def remove_at(self, index: int) -> Item:
        """Remove and return the item at ``index``.

        Raises:
            OutOfRangeError: If ``index`` is outside ``[0, count())``.
        """
        self._check_index(index, self.count())
        removed = self._delete(index)
        self._revision += 1
        logger.debug(f"{type(self).__name__}: removed {removed.name!r} from {index}")
        return removed

    def create_iterator(self) -> SequentialIterator[Item]:
        """Fresh iterator over the current contents. Does not copy."""
        return SequentialIterator(self)

    @staticmethod
    def _check_index(index: int, bound: int) -> None:
        if not 0 <= index < bound:
            raise OutOfRangeError(f"Index {index} out of range [0, {bound})")

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Item]:
        return self.create_iterator()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self.count()})"
