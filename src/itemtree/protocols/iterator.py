"""Iterator protocol.

Defines the cursor interface shared by every iterator in ItemTree. It is
the explicit ``has_next``/``next``/``remove`` contract plus the Python
iterator protocol, so iterators also work in ``for`` loops.

Example:
    >>> from itemtree.protocols.iterator import ItemIterator
    >>> hasattr(ItemIterator, "has_next")
    True
    >>> hasattr(ItemIterator, "remove")
    True
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ItemIterator(Protocol[T_co]):
    """Stateful, single-pass cursor.

    Implementations: SequentialIterator, SingleItemIterator, TreeIterator.
    """

    def has_next(self) -> bool:
        """Return True if ``next()`` would return an element."""
        ...

    def next(self) -> T_co:
        """Return the next element and advance.

        Raises:
            NoSuchElementError: If the iterator is exhausted.
        """
        ...

    def remove(self) -> None:
        """Remove the element last returned by ``next()`` from the source.

        Raises:
            IllegalStateError: If there is no element to remove.
            UnsupportedOperationError: If the iterator cannot remove.
        """
        ...

    def __iter__(self) -> Iterator[T_co]:
        ...

    def __next__(self) -> T_co:
        ...
