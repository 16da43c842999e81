"""Group - the composite node of a tree.

A Group has a name, a description and an ordered list of children, each
an Item or another Group. Together with Item it forms the ``Node`` union:
both variants answer the same capability set, and operations that do not
apply to a variant raise UnsupportedOperationError.

Groups own their children exclusively. A Group can be attached to one
parent at a time and never to itself or one of its ancestors, so trees
stay acyclic. Items are immutable values and may be shared.

Example:
    >>> from itemtree.models.item import Item
    >>> from itemtree.tree.group import Group
    >>> breakfast = Group("Breakfast", "Served until 11", [
    ...     Item(name="Pancakes", description="With syrup", price="2.99", vegetarian=True),
    ... ])
    >>> root = Group("All", children=[breakfast, Item(name="Hotdog", price="3.50")])
    >>> [item.name for item in root.create_iterator()]
    ['Pancakes', 'Hotdog']
    >>> breakfast.parent is root
    True
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar, TextIO

from itemtree.core.exceptions import (
    IllegalStateError,
    OutOfRangeError,
    UnsupportedOperationError,
)
from itemtree.iterator.sequential import SequentialIterator
from itemtree.iterator.tree import TreeIterator
from itemtree.models.base import NodeKind
from itemtree.models.item import Item
from itemtree.render import render_node

if TYPE_CHECKING:
    from itemtree.core.config import Settings

logger = logging.getLogger(__name__)


class Group:
    """Named, ordered container of Items and Groups.

    Example:
        >>> from itemtree.tree.group import Group
        >>> g = Group("Desserts")
        >>> g.count()
        0
        >>> g.price  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        UnsupportedOperationError: Group 'Desserts' has no price
    """

    kind: ClassVar[NodeKind] = NodeKind.GROUP

    def __init__(
        self,
        name: str,
        description: str = "",
        children: Iterable[Node] = (),
    ) -> None:
        """Initialize the group.

        Args:
            name: Non-empty display name.
            description: Free-text description.
            children: Initial children, in order.

        Raises:
            ValueError: If ``name`` is blank.
        """
        if not name.strip():
            raise ValueError("Group name must not be empty")
        self._name = name.strip()
        self._description = description.strip()
        self._children: list[Node] = []
        self._parent: Group | None = None
        self._revision = 0
        self.extend(children)

    # --- Descriptive attributes ---

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def price(self) -> Decimal:
        raise UnsupportedOperationError(f"Group {self._name!r} has no price")

    @property
    def vegetarian(self) -> bool:
        raise UnsupportedOperationError(f"Group {self._name!r} has no dietary flag")

    @property
    def is_vegetarian(self) -> bool:
        return self.vegetarian

    # --- Structure ---

    @property
    def parent(self) -> Group | None:
        """Group this group is attached to, if any."""
        return self._parent

    @property
    def children(self) -> tuple[Node, ...]:
        """Snapshot of the direct children."""
        return tuple(self._children)

    @property
    def revision(self) -> int:
        """Counter bumped on every add or removal of a direct child."""
        return self._revision

    def count(self) -> int:
        """Number of direct children."""
        return len(self._children)

    def add(self, child: Node) -> None:
        """Append ``child``.

        Raises:
            TypeError: If ``child`` is not an Item or a Group.
            IllegalStateError: If ``child`` is a Group that already has a
                parent, or is this group or one of its ancestors.
        """
        self.extend([child])

    def extend(self, children: Iterable[Node]) -> None:
        """Append several children, all or none.

        Every child is checked before any is linked, so a failure leaves
        this group and the children untouched.

        Raises:
            TypeError: If a child is not an Item or a Group.
            IllegalStateError: If a Group in the batch cannot be attached,
                or appears in the batch twice.
        """
        batch = list(children)
        pending: set[int] = set()
        for child in batch:
            if not isinstance(child, (Item, Group)):
                raise TypeError(f"Cannot add {type(child).__name__} to a group")
            if child.kind is NodeKind.GROUP:
                self._check_attachable(child)
                if id(child) in pending:
                    raise IllegalStateError(f"Group {child.name!r} appears twice in one batch")
                pending.add(id(child))

        for child in batch:
            if child.kind is NodeKind.GROUP:
                child._parent = self
            self._children.append(child)
            self._revision += 1
            logger.debug(f"Group {self._name!r}: added {child.kind.value} {child.name!r}")

    def remove(self, child: Node) -> bool:
        """Detach ``child``. Returns True if it was a direct child.

        The child is matched by identity first, then by equality, so an
        equal Item value removes the first matching item.
        """
        for index, candidate in enumerate(self._children):
            if candidate is child:
                self.remove_at(index)
                return True
        for index, candidate in enumerate(self._children):
            if candidate == child:
                self.remove_at(index)
                return True
        return False

    def remove_at(self, index: int) -> Node:
        """Detach and return the direct child at ``index``.

        Raises:
            OutOfRangeError: If ``index`` is outside ``[0, count())``.
        """
        self._check_index(index)
        child = self._children.pop(index)
        if child.kind is NodeKind.GROUP:
            child._parent = None
        self._revision += 1
        logger.debug(f"Group {self._name!r}: removed {child.kind.value} {child.name!r}")
        return child

    def get_child(self, index: int) -> Node:
        """Direct child at ``index``.

        Raises:
            OutOfRangeError: If ``index`` is outside ``[0, count())``.
        """
        self._check_index(index)
        return self._children[index]

    def item_at(self, index: int) -> Node:
        return self.get_child(index)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._children):
            raise OutOfRangeError(
                f"Index {index} out of range [0, {len(self._children)}) in group {self._name!r}"
            )

    def _check_attachable(self, group: Group) -> None:
        if group._parent is not None:
            raise IllegalStateError(
                f"Group {group.name!r} already belongs to group {group._parent.name!r}"
            )
        ancestor: Group | None = self
        while ancestor is not None:
            if ancestor is group:
                raise IllegalStateError(
                    f"Adding group {group.name!r} to {self._name!r} would create a cycle"
                )
            ancestor = ancestor._parent

    # --- Traversal and rendering ---

    def create_iterator(self) -> TreeIterator:
        """Iterator over every Item in this subtree, pre-order."""
        return TreeIterator(self)

    def children_iterator(self) -> SequentialIterator[Node]:
        """Flat iterator over the direct children; supports ``remove()``."""
        return SequentialIterator(self)

    def describe(self, settings: Settings | None = None) -> str:
        if self._description:
            return f"{self._name}, {self._description}"
        return self._name

    def render(self, indent: int = 0, settings: Settings | None = None) -> str:
        return render_node(self, indent=indent, settings=settings)

    def print(self, stream: TextIO | None = None, settings: Settings | None = None) -> None:
        (stream or sys.stdout).write(self.render(settings=settings) + "\n")

    def __len__(self) -> int:
        return len(self._children)

    def __repr__(self) -> str:
        return f"Group(name={self._name!r}, children={len(self._children)})"


Node = Item | Group
