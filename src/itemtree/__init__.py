"""
ItemTree - Uniform Iteration over Collections and Composite Trees.

ItemTree lets client code enumerate items without knowing how they are
stored: a fixed slot array, a growable list, a name-keyed mapping, or a
nested tree of groups.

Key Features:
- Collection adapters with one interface over different backing stores
- Position-based iterators with safe in-place removal
- Composite trees of items and groups with enforced single ownership
- Stack-based pre-order tree iteration that yields items only

Quick Start:
    >>> from itemtree import Group, GrowableCollection, Item, group_from_collection
    >>> pancakes = GrowableCollection([Item(name="Pancakes", price="2.99", vegetarian=True)])
    >>> root = Group("All", children=[
    ...     group_from_collection("Breakfast", "", pancakes),
    ...     Item(name="Hotdog", price="3.50"),
    ... ])
    >>> [item.name for item in root.create_iterator()]
    ['Pancakes', 'Hotdog']

Architecture:
    Collections: FixedCollection, GrowableCollection, KeyedCollection
    Iterators: SequentialIterator, SingleItemIterator, TreeIterator
    Tree: Item, Group
"""

# Collection adapters
from itemtree.collection.base import BaseCollection
from itemtree.collection.fixed import FixedCollection
from itemtree.collection.growable import GrowableCollection
from itemtree.collection.keyed import KeyedCollection

# Configuration and errors
from itemtree.core.config import Settings, get_settings
from itemtree.core.exceptions import (
    CollectionFullError,
    IllegalStateError,
    ItemTreeError,
    NoSuchElementError,
    OutOfRangeError,
    UnsupportedOperationError,
)

# Iterators
from itemtree.iterator.sequential import SequentialIterator
from itemtree.iterator.single import SingleItemIterator
from itemtree.iterator.tree import TreeIterator, walk

# Models
from itemtree.models.base import NodeKind
from itemtree.models.item import Item

# Protocols
from itemtree.protocols import Component, IndexedSource, ItemCollection, ItemIterator
from itemtree.render import render_node
from itemtree.query import iterate_all, select, vegetarian_items

# Tree
from itemtree.tree.bridge import group_from_collection
from itemtree.tree.group import Group, Node

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Collections
    "BaseCollection",
    "FixedCollection",
    "GrowableCollection",
    "KeyedCollection",
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "ItemTreeError",
    "OutOfRangeError",
    "NoSuchElementError",
    "IllegalStateError",
    "UnsupportedOperationError",
    "CollectionFullError",
    # Iterators
    "SequentialIterator",
    "SingleItemIterator",
    "TreeIterator",
    "walk",
    # Models
    "Item",
    "NodeKind",
    # Protocols
    "Component",
    "IndexedSource",
    "ItemCollection",
    "ItemIterator",
    # Tree
    "Group",
    "Node",
    "group_from_collection",
    "render_node",
    # Selection
    "iterate_all",
    "select",
    "vegetarian_items",
]
