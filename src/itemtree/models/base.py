"""Base models and shared types.

Example:
    >>> from itemtree.models.base import NodeKind
    >>> NodeKind.ITEM.value
    'item'
    >>> list(NodeKind)
    [<NodeKind.ITEM: 'item'>, <NodeKind.GROUP: 'group'>]
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class NodeKind(str, Enum):
    """Tag of the ``Item | Group`` node union.

    Traversal code dispatches on this tag rather than on class checks.
    """

    ITEM = "item"
    GROUP = "group"


class ItemTreeModel(BaseModel):
    """Base model with standard configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
    )
