"""Iterators over collections and trees."""

from itemtree.iterator.sequential import SequentialIterator
from itemtree.iterator.single import SingleItemIterator
from itemtree.iterator.tree import TreeIterator, walk

__all__ = [
    "SequentialIterator",
    "SingleItemIterator",
    "TreeIterator",
    "walk",
]
