"""Flat, position-based iterator.

Walks any IndexedSource (collection adapters, a group's direct children)
without copying it, and supports removing the element it just returned.

Example:
    >>> from itemtree.collection.growable import GrowableCollection
    >>> from itemtree.models.item import Item
    >>> items = GrowableCollection([
    ...     Item(name="A", price="1"), Item(name="B", price="2"), Item(name="C", price="3"),
    ... ])
    >>> it = items.create_iterator()
    >>> it.next().name
    'A'
    >>> it.remove()
    >>> it.next().name
    'B'
    >>> items.count()
    2
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from itemtree.core.exceptions import IllegalStateError, NoSuchElementError

if TYPE_CHECKING:
    from itemtree.protocols.collection import IndexedSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SequentialIterator(Generic[T]):
    """Cursor over one IndexedSource.

    ``has_next()`` is re-evaluated against the live count on every call.
    After ``remove()`` the cursor stays on the vacated slot, so the element
    that slid into it is the one the following ``next()`` returns.

    The iterator is fail-fast: if the source changes by any means other than
    this iterator's own ``remove()``, the next ``next()`` or ``remove()``
    raises IllegalStateError.
    """

    def __init__(self, source: IndexedSource[T]) -> None:
        """Bind the iterator to ``source`` at position 0.

        Args:
            source: Sequence to walk. Not copied.
        """
        self._source = source
        self._position = 0
        self._last: int | None = None
        self._expected_revision = source.revision

    @property
    def position(self) -> int:
        """Index of the element the next ``next()`` call returns."""
        return self._position

    def has_next(self) -> bool:
        return self._position < self._source.count()

    def next(self) -> T:
        """Return the element at the cursor and advance.

        Raises:
            NoSuchElementError: If the cursor is past the last element.
            IllegalStateError: If the source was modified behind the iterator.
        """
        self._check_revision()
        if not self.has_next():
            raise NoSuchElementError(
                f"No element at position {self._position} (count {self._source.count()})"
            )
        element = self._source.item_at(self._position)
        self._last = self._position
        self._position += 1
        return element

    def remove(self) -> None:
        """Delete the element most recently returned by ``next()``.

        Raises:
            IllegalStateError: Before any ``next()``, on a second ``remove()``
                without an intervening ``next()``, or after outside modification.
        """
        if self._last is None:
            raise IllegalStateError("remove() requires a preceding next()")
        self._check_revision()

        removed = self._source.remove_at(self._last)
        logger.debug(f"Removed element at {self._last} during iteration: {removed!r}")

        self._position = self._last
        self._last = None
        self._expected_revision = self._source.revision

    def _check_revision(self) -> None:
        if self._source.revision != self._expected_revision:
            raise IllegalStateError("Source was modified during iteration")

    def __iter__(self) -> SequentialIterator[T]:
        return self

    def __next__(self) -> T:
        self._check_revision()
        if not self.has_next():
            raise StopIteration
        return self.next()
