"""Pydantic models for ItemTree."""

from itemtree.models.base import ItemTreeModel, NodeKind
from itemtree.models.item import Item, format_price

__all__ = [
    # Base
    "ItemTreeModel",
    "NodeKind",
    # Leaf
    "Item",
    "format_price",
]
