"""ItemTree configuration.

Settings loaded from environment variables with ITEMTREE_ prefix.

Example:
    >>> from itemtree.core.config import get_settings
    >>> settings = get_settings(log_level="DEBUG")
    >>> settings.log_level
    'DEBUG'
    >>> settings.fixed_capacity
    6
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings.

    Loads from environment variables with ITEMTREE_ prefix.

    Example:
        >>> from itemtree.core.config import Settings
        >>> s = Settings(price_places=3)
        >>> s.price_places
        3
        >>> s.indent
        '    '
    """

    model_config = SettingsConfigDict(
        env_prefix="ITEMTREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Collections
    fixed_capacity: int = Field(
        default=6, ge=1, description="Default slot count for FixedCollection"
    )

    # Rendering
    indent: str = Field(default="    ", description="Indent unit per tree depth")
    price_places: int = Field(default=2, ge=0, le=6, description="Decimals shown for prices")


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from itemtree.core.config import get_settings
        >>> s = get_settings(fixed_capacity=10)
        >>> s.fixed_capacity
        10
    """
    return Settings(**overrides)
