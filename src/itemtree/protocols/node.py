"""Tree node protocol.

Every node of a tree, leaf or group, answers the same capability set.
Operations that make no sense for a variant raise UnsupportedOperationError
instead of being absent.

Example:
    >>> from itemtree.protocols.node import Component
    >>> hasattr(Component, "create_iterator")
    True
    >>> hasattr(Component, "get_child")
    True
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Protocol, TextIO, runtime_checkable

if TYPE_CHECKING:
    from itemtree.core.config import Settings
    from itemtree.models.base import NodeKind
    from itemtree.models.item import Item
    from itemtree.protocols.iterator import ItemIterator


@runtime_checkable
class Component(Protocol):
    """Capability set shared by Item and Group."""

    @property
    def kind(self) -> NodeKind:
        """Which variant this node is."""
        ...

    @property
    def name(self) -> str:
        ...

    @property
    def description(self) -> str:
        ...

    @property
    def price(self) -> Decimal:
        """Leaf-only."""
        ...

    @property
    def is_vegetarian(self) -> bool:
        """Leaf-only."""
        ...

    def add(self, child: Component) -> None:
        """Group-only: append a child."""
        ...

    def remove(self, child: Component) -> bool:
        """Group-only: detach a child. Returns True if it was present."""
        ...

    def get_child(self, index: int) -> Component:
        """Group-only: direct child at ``index``."""
        ...

    def create_iterator(self) -> ItemIterator[Item]:
        """Iterator over every Item at or below this node."""
        ...

    def describe(self, settings: Settings | None = None) -> str:
        """One-line description of this node alone."""
        ...

    def render(self, indent: int = 0, settings: Settings | None = None) -> str:
        """Textual dump of this node and its descendants."""
        ...

    def print(self, stream: TextIO | None = None, settings: Settings | None = None) -> None:
        """Write ``render()`` to ``stream``."""
        ...
