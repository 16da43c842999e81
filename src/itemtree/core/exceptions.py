"""Custom exceptions.

ItemTree uses a small hierarchy of exceptions so callers can catch either
the precise failure or everything the library raises:

Example:
    >>> from itemtree.core.exceptions import ItemTreeError, OutOfRangeError
    >>> isinstance(OutOfRangeError("index 3"), ItemTreeError)
    True
    >>> isinstance(OutOfRangeError("index 3"), IndexError)
    True
    >>> try:
    ...     raise OutOfRangeError("index 3 out of range")
    ... except ItemTreeError as e:
    ...     print(f"Caught: {type(e).__name__}")
    Caught: OutOfRangeError
"""

from __future__ import annotations


class ItemTreeError(Exception):
    """Base exception for ItemTree.

    Example:
        >>> from itemtree.core.exceptions import ItemTreeError
        >>> e = ItemTreeError("something went wrong")
        >>> str(e)
        'something went wrong'
    """


class OutOfRangeError(ItemTreeError, IndexError):
    """Index outside ``[0, count)``.

    Example:
        >>> from itemtree.core.exceptions import OutOfRangeError
        >>> raise OutOfRangeError("index 5 out of range")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        OutOfRangeError: index 5 out of range
    """


class NoSuchElementError(ItemTreeError, LookupError):
    """Iterator advanced past its last element.

    Example:
        >>> from itemtree.core.exceptions import NoSuchElementError
        >>> raise NoSuchElementError("iterator exhausted")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        NoSuchElementError: iterator exhausted
    """


class IllegalStateError(ItemTreeError):
    """Operation called in a state that does not allow it.

    Raised for ``remove()`` misuse, for iterators whose source was modified
    behind their back, and for tree edits that would share or cycle a group.

    Example:
        >>> from itemtree.core.exceptions import IllegalStateError
        >>> raise IllegalStateError("remove() before next()")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        IllegalStateError: remove() before next()
    """


class UnsupportedOperationError(ItemTreeError):
    """Capability invoked on a variant that does not support it.

    Example:
        >>> from itemtree.core.exceptions import UnsupportedOperationError
        >>> raise UnsupportedOperationError("Item has no children")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        UnsupportedOperationError: Item has no children
    """


class CollectionFullError(ItemTreeError):
    """Fixed-capacity collection has no free slot.

    Example:
        >>> from itemtree.core.exceptions import CollectionFullError
        >>> raise CollectionFullError("capacity 6 reached")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        CollectionFullError: capacity 6 reached
    """
