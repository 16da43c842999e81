"""Bridge from collection adapters to trees.

Example:
    >>> from itemtree.collection.fixed import FixedCollection
    >>> from itemtree.models.item import Item
    >>> from itemtree.tree.bridge import group_from_collection
    >>> diner = FixedCollection([Item(name="BLT", price="2.99")], capacity=6)
    >>> group = group_from_collection("Diner", "Lunch", diner)
    >>> group.get_child(0).name
    'BLT'
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from itemtree.tree.group import Group

if TYPE_CHECKING:
    from itemtree.protocols.collection import ItemCollection

logger = logging.getLogger(__name__)


def group_from_collection(
    name: str,
    description: str,
    collection: ItemCollection,
) -> Group:
    """Build a Group holding the items of ``collection``, in iteration order.

    Only the collection's iterator is used, so any backing store works.
    The collection itself is left untouched.
    """
    group = Group(name, description)
    iterator = collection.create_iterator()
    while iterator.has_next():
        group.add(iterator.next())
    logger.debug(f"Built group {name!r} from {type(collection).__name__} ({group.count()} items)")
    return group
