"""Item - the leaf value of every collection and tree.

Example:
    >>> from decimal import Decimal
    >>> from itemtree.models.item import Item
    >>> item = Item(name="Pancakes", description="With syrup", price="2.99", vegetarian=True)
    >>> item.price
    Decimal('2.99')
    >>> item.is_vegetarian
    True
    >>> item.describe()
    'Pancakes (v), 2.99 -- With syrup'
"""

from __future__ import annotations

import sys
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, ClassVar, TextIO

from pydantic import ConfigDict, Field

from itemtree.core.config import get_settings
from itemtree.core.exceptions import UnsupportedOperationError
from itemtree.models.base import ItemTreeModel, NodeKind

if TYPE_CHECKING:
    from itemtree.core.config import Settings
    from itemtree.iterator.single import SingleItemIterator
    from itemtree.protocols.node import Component


def format_price(price: Decimal, places: int = 2) -> str:
    """Format a price with a fixed number of decimals.

    Example:
        >>> from decimal import Decimal
        >>> format_price(Decimal("3.5"))
        '3.50'
        >>> format_price(Decimal("3.456"), places=1)
        '3.5'
    """
    quantum = Decimal(1).scaleb(-places)
    return str(price.quantize(quantum, rounding=ROUND_HALF_UP))


class Item(ItemTreeModel):
    """Immutable leaf with descriptive attributes.

    Items answer the whole node capability set. Child management raises
    UnsupportedOperationError; iteration yields the item itself once.

    Example:
        >>> from itemtree.models.item import Item
        >>> hotdog = Item(name="Hotdog", description="With relish", price="3.50")
        >>> [i.name for i in hotdog.create_iterator()]
        ['Hotdog']
        >>> hotdog.vegetarian
        False
    """

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[NodeKind] = NodeKind.ITEM

    name: str = Field(..., min_length=1, description="Display name")
    description: str = Field(default="", description="Free-text description")
    price: Decimal = Field(..., ge=0, description="Non-negative price")
    vegetarian: bool = Field(default=False, description="Dietary flag")

    @property
    def is_vegetarian(self) -> bool:
        """Dietary flag accessor."""
        return self.vegetarian

    # --- Group-only operations ---

    def add(self, child: Component) -> None:
        raise UnsupportedOperationError(f"Item {self.name!r} cannot hold children")

    def remove(self, child: Component) -> bool:
        raise UnsupportedOperationError(f"Item {self.name!r} has no children to remove")

    def get_child(self, index: int) -> Component:
        raise UnsupportedOperationError(f"Item {self.name!r} has no children")

    # --- Traversal and rendering ---

    def create_iterator(self) -> SingleItemIterator:
        """Iterator yielding this item exactly once."""
        from itemtree.iterator.single import SingleItemIterator

        return SingleItemIterator(self)

    def describe(self, settings: Settings | None = None) -> str:
        """All four attributes on one line."""
        places = (settings or get_settings()).price_places
        flag = " (v)" if self.vegetarian else ""
        line = f"{self.name}{flag}, {format_price(self.price, places)}"
        if self.description:
            line = f"{line} -- {self.description}"
        return line

    def render(self, indent: int = 0, settings: Settings | None = None) -> str:
        from itemtree.render import render_node

        return render_node(self, indent=indent, settings=settings)

    def print(self, stream: TextIO | None = None, settings: Settings | None = None) -> None:
        (stream or sys.stdout).write(self.render(settings=settings) + "\n")
