"""Client-side traversal helpers.

These functions depend only on ``create_iterator()`` and Item accessors,
so they work the same for a leaf, a subtree or any number of roots.

Example:
    >>> from itemtree.models.item import Item
    >>> from itemtree.query import iterate_all, vegetarian_items
    >>> from itemtree.tree.group import Group
    >>> lunch = Group("Lunch", children=[
    ...     Item(name="Soup", price="3.69", vegetarian=True),
    ...     Item(name="Hotdog", price="3.05"),
    ... ])
    >>> [item.name for item in vegetarian_items(lunch)]
    ['Soup']
    >>> [item.name for item in iterate_all([lunch, Item(name="Tea", price="1")])]
    ['Soup', 'Hotdog', 'Tea']
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from itemtree.models.item import Item
    from itemtree.tree.group import Node


def iterate_all(roots: Iterable[Node]) -> Iterator[Item]:
    """Yield the items of each root in turn, each root in pre-order."""
    for root in roots:
        iterator = root.create_iterator()
        while iterator.has_next():
            yield iterator.next()


def select(root: Node, predicate: Callable[[Item], bool]) -> Iterator[Item]:
    """Lazily yield the items under ``root`` that satisfy ``predicate``."""
    return (item for item in iterate_all([root]) if predicate(item))


def vegetarian_items(root: Node) -> Iterator[Item]:
    """Items under ``root`` flagged vegetarian.

    Groups are never yielded by the tree iterator, so no per-node error
    handling is needed to skip them.
    """
    return select(root, lambda item: item.is_vegetarian)
