"""Protocol definitions - the uniform interfaces clients depend on."""

from itemtree.protocols.collection import IndexedSource, ItemCollection
from itemtree.protocols.iterator import ItemIterator
from itemtree.protocols.node import Component

__all__ = [
    # Iteration
    "ItemIterator",
    # Collections
    "IndexedSource",
    "ItemCollection",
    # Tree
    "Component",
]
