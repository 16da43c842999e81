"""Core configuration and exceptions."""

from itemtree.core.config import Settings, get_settings
from itemtree.core.exceptions import (
    CollectionFullError,
    IllegalStateError,
    ItemTreeError,
    NoSuchElementError,
    OutOfRangeError,
    UnsupportedOperationError,
)

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Exceptions
    "ItemTreeError",
    "OutOfRangeError",
    "NoSuchElementError",
    "IllegalStateError",
    "UnsupportedOperationError",
    "CollectionFullError",
]
