"""Iterator over exactly one item.

Returned by ``Item.create_iterator()`` so client code can iterate any node,
leaf or group, the same way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from itemtree.core.exceptions import NoSuchElementError, UnsupportedOperationError

if TYPE_CHECKING:
    from itemtree.models.item import Item


class SingleItemIterator:
    """Yields its item once, then is exhausted.

    Example:
        >>> from itemtree.iterator.single import SingleItemIterator
        >>> from itemtree.models.item import Item
        >>> it = SingleItemIterator(Item(name="Soup", price="4"))
        >>> it.next().name
        'Soup'
        >>> it.has_next()
        False
    """

    def __init__(self, item: Item) -> None:
        self._item = item
        self._done = False

    def has_next(self) -> bool:
        return not self._done

    def next(self) -> Item:
        if self._done:
            raise NoSuchElementError(f"Item {self._item.name!r} was already returned")
        self._done = True
        return self._item

    def remove(self) -> None:
        raise UnsupportedOperationError("An item cannot remove itself from its owner")

    def __iter__(self) -> SingleItemIterator:
        return self

    def __next__(self) -> Item:
        if self._done:
            raise StopIteration
        return self.next()
