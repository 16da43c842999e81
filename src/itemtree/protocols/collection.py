"""Collection protocols.

``ItemCollection`` is what clients see of a collection adapter: a count,
positional access and a fresh iterator. ``IndexedSource`` is what a
SequentialIterator needs from whatever it walks over.

Example:
    >>> from itemtree.protocols.collection import IndexedSource, ItemCollection
    >>> hasattr(ItemCollection, "create_iterator")
    True
    >>> hasattr(IndexedSource, "remove_at")
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from itemtree.models.item import Item
    from itemtree.protocols.iterator import ItemIterator

T = TypeVar("T")


@runtime_checkable
class IndexedSource(Protocol[T]):
    """Positional, shrinkable sequence an iterator can walk and edit."""

    @property
    def revision(self) -> int:
        """Counter bumped on every structural change."""
        ...

    def count(self) -> int:
        """Number of live elements."""
        ...

    def item_at(self, index: int) -> T:
        """Element at ``index``.

        Raises:
            OutOfRangeError: If ``index`` is outside ``[0, count())``.
        """
        ...

    def remove_at(self, index: int) -> T:
        """Delete and return the element at ``index``, shifting later ones down."""
        ...


@runtime_checkable
class ItemCollection(Protocol):
    """Uniform view of a collection adapter.

    Callers must not depend on the backing store (fixed slots, list, mapping).
    """

    def count(self) -> int:
        """Number of live items."""
        ...

    def item_at(self, index: int) -> Item:
        """Item at ``index``."""
        ...

    def create_iterator(self) -> ItemIterator[Item]:
        """Fresh iterator over the current contents."""
        ...
