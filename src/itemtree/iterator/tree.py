"""Depth-first traversal of a node tree.

Both traversals here use an explicit stack instead of recursion, so deep
trees cannot exhaust the interpreter stack and a TreeIterator can pause
between ``has_next()``/``next()`` calls.

Example:
    >>> from itemtree.iterator.tree import TreeIterator
    >>> from itemtree.models.item import Item
    >>> from itemtree.tree.group import Group
    >>> breakfast = Group("Breakfast", children=[Item(name="Pancakes", price="2.99")])
    >>> root = Group("All", children=[breakfast, Item(name="Hotdog", price="3.50")])
    >>> [item.name for item in TreeIterator(root)]
    ['Pancakes', 'Hotdog']
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from itemtree.core.exceptions import NoSuchElementError, UnsupportedOperationError
from itemtree.models.base import NodeKind

if TYPE_CHECKING:
    from itemtree.models.item import Item
    from itemtree.tree.group import Node


@dataclass
class _Frame:
    """Pending siblings at one depth and the cursor into them."""

    nodes: Sequence[Node]
    index: int = 0


def _pending(node: Node) -> Sequence[Node]:
    # A group contributes its children; an item stands for itself.
    if node.kind is NodeKind.GROUP:
        return node.children
    return (node,)


class TreeIterator:
    """Pre-order, left-to-right iterator over the Items of a subtree.

    Groups are descended into but never yielded. Each frame holds a
    snapshot of one group's children taken when the frame is pushed.
    Structural edits to the tree while an iterator is live are the
    caller's responsibility; they are not detected.

    ``remove()`` is not supported: removing mid-traversal would have to
    repair every stacked frame.
    """

    def __init__(self, root: Node) -> None:
        self._stack: list[_Frame] = [_Frame(_pending(root))]

    def _peek(self) -> Item | None:
        """Descend to the next reachable item without consuming it."""
        while self._stack:
            frame = self._stack[-1]
            if frame.index >= len(frame.nodes):
                self._stack.pop()
                continue
            node = frame.nodes[frame.index]
            if node.kind is NodeKind.GROUP:
                frame.index += 1
                self._stack.append(_Frame(node.children))
                continue
            return node
        return None

    def has_next(self) -> bool:
        return self._peek() is not None

    def next(self) -> Item:
        """Return the next item in pre-order.

        Raises:
            NoSuchElementError: If no item remains.
        """
        item = self._peek()
        if item is None:
            raise NoSuchElementError("Tree traversal is exhausted")
        self._stack[-1].index += 1
        return item

    def remove(self) -> None:
        raise UnsupportedOperationError("TreeIterator does not support remove()")

    def __iter__(self) -> TreeIterator:
        return self

    def __next__(self) -> Item:
        item = self._peek()
        if item is None:
            raise StopIteration
        self._stack[-1].index += 1
        return item


def walk(root: Node) -> Iterator[tuple[int, Node]]:
    """Yield ``(depth, node)`` for every node of a subtree, groups included.

    Pre-order, left-to-right; ``root`` is at depth 0.

    Example:
        >>> from itemtree.iterator.tree import walk
        >>> from itemtree.models.item import Item
        >>> from itemtree.tree.group import Group
        >>> root = Group("Root", children=[Group("Sub", children=[Item(name="X", price="1")])])
        >>> [(depth, node.name) for depth, node in walk(root)]
        [(0, 'Root'), (1, 'Sub'), (2, 'X')]
    """
    stack: list[tuple[int, Node]] = [(0, root)]
    while stack:
        depth, node = stack.pop()
        yield depth, node
        if node.kind is NodeKind.GROUP:
            stack.extend((depth + 1, child) for child in reversed(node.children))
