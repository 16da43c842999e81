"""Plain-text rendering of nodes.

Example:
    >>> from itemtree.models.item import Item
    >>> from itemtree.render import render_node
    >>> from itemtree.tree.group import Group
    >>> root = Group("Lunch", "Weekdays", [Item(name="Soup", price="3.69", vegetarian=True)])
    >>> print(render_node(root))
    Lunch, Weekdays
        Soup (v), 3.69
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from itemtree.core.config import get_settings
from itemtree.iterator.tree import walk

if TYPE_CHECKING:
    from itemtree.core.config import Settings
    from itemtree.tree.group import Node


def render_node(node: Node, indent: int = 0, settings: Settings | None = None) -> str:
    """Render ``node`` and its descendants, one line per node.

    Each depth level adds one ``settings.indent`` unit on top of ``indent``.
    """
    settings = settings or get_settings()
    return "\n".join(
        f"{settings.indent * (indent + depth)}{child.describe(settings)}"
        for depth, child in walk(node)
    )
