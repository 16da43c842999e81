"""Composite trees of items and groups."""

from itemtree.tree.bridge import group_from_collection
from itemtree.tree.group import Group, Node

__all__ = [
    "Group",
    "Node",
    "group_from_collection",
]
