"""Collection adapters over different backing stores."""

from itemtree.collection.base import BaseCollection, ItemCollection
from itemtree.collection.fixed import FixedCollection
from itemtree.collection.growable import GrowableCollection
from itemtree.collection.keyed import KeyedCollection

__all__ = [
    "BaseCollection",
    "ItemCollection",
    "FixedCollection",
    "GrowableCollection",
    "KeyedCollection",
]
