"""Tests for the Item leaf model.

Tests cover:
- Construction and validation
- Immutability and value semantics
- Group-only operations raising UnsupportedOperationError
- Single-item iteration
- Rendering
"""

from __future__ import annotations

import io
from decimal import Decimal

import pytest

from itemtree.core.config import get_settings
from itemtree.core.exceptions import NoSuchElementError, UnsupportedOperationError
from itemtree.models.base import NodeKind
from itemtree.models.item import Item, format_price

# =============================================================================
# Construction Tests
# =============================================================================


class TestItemCreation:
    """Tests for Item construction and validation."""

    def test_create_with_all_fields(self) -> None:
        """All four attributes are stored."""
        item = Item(name="Pancakes", description="With syrup", price="2.99", vegetarian=True)

        assert item.name == "Pancakes"
        assert item.description == "With syrup"
        assert item.price == Decimal("2.99")
        assert item.vegetarian is True
        assert item.is_vegetarian is True

    def test_defaults(self) -> None:
        """Description defaults to empty, vegetarian to False."""
        item = Item(name="Hotdog", price="3.50")

        assert item.description == ""
        assert item.is_vegetarian is False

    def test_kind_is_item(self) -> None:
        """Items carry the ITEM tag."""
        assert Item(name="X", price="1").kind is NodeKind.ITEM

    def test_whitespace_stripped(self) -> None:
        """Names are stripped like every ItemTree model string."""
        assert Item(name="  Waffles ", price="3.59").name == "Waffles"

    def test_negative_price_rejected(self) -> None:
        """Price must be non-negative."""
        with pytest.raises(ValueError):
            Item(name="Refund", price="-1")

    def test_zero_price_allowed(self) -> None:
        """Zero is a valid price."""
        assert Item(name="Water", price="0").price == Decimal("0")

    def test_empty_name_rejected(self) -> None:
        """Name is required and non-empty."""
        with pytest.raises(ValueError):
            Item(name="", price="1")

    def test_price_required(self) -> None:
        """Price has no default."""
        with pytest.raises(ValueError):
            Item(name="Soup")  # type: ignore[call-arg]

    def test_unknown_fields_rejected(self) -> None:
        """Extra attributes are forbidden."""
        with pytest.raises(ValueError):
            Item(name="Soup", price="1", spicy=True)  # type: ignore[call-arg]


# =============================================================================
# Value Semantics Tests
# =============================================================================


class TestItemImmutability:
    """Items never change once built."""

    def test_cannot_assign_attribute(self) -> None:
        """Assignment raises."""
        item = Item(name="Soup", price="3.69")

        with pytest.raises(ValueError):
            item.price = Decimal("1")  # type: ignore[misc]

    def test_equal_items_compare_equal(self) -> None:
        """Two items with the same attributes are equal and hash alike."""
        a = Item(name="Soup", price="3.69")
        b = Item(name="Soup", price="3.69")

        assert a == b
        assert hash(a) == hash(b)


# =============================================================================
# Unsupported Operation Tests
# =============================================================================


class TestItemGroupOperations:
    """Group-only operations fail loudly on an Item."""

    def test_add_unsupported(self) -> None:
        item = Item(name="Soup", price="3.69")

        with pytest.raises(UnsupportedOperationError):
            item.add(Item(name="Bread", price="1"))

    def test_remove_unsupported(self) -> None:
        item = Item(name="Soup", price="3.69")

        with pytest.raises(UnsupportedOperationError):
            item.remove(item)

    def test_get_child_unsupported(self) -> None:
        item = Item(name="Soup", price="3.69")

        with pytest.raises(UnsupportedOperationError):
            item.get_child(0)


# =============================================================================
# Iteration Tests
# =============================================================================


class TestItemIterator:
    """create_iterator() yields the item itself once."""

    def test_yields_self_once(self) -> None:
        item = Item(name="Soup", price="3.69")
        it = item.create_iterator()

        assert it.has_next() is True
        assert it.next() is item
        assert it.has_next() is False

    def test_next_after_exhaustion_raises(self) -> None:
        it = Item(name="Soup", price="3.69").create_iterator()
        it.next()

        with pytest.raises(NoSuchElementError):
            it.next()

    def test_for_loop(self) -> None:
        item = Item(name="Soup", price="3.69")

        assert list(item.create_iterator()) == [item]

    def test_remove_unsupported(self) -> None:
        it = Item(name="Soup", price="3.69").create_iterator()
        it.next()

        with pytest.raises(UnsupportedOperationError):
            it.remove()


# =============================================================================
# Rendering Tests
# =============================================================================


class TestItemRendering:
    """Items render their four attributes on one line."""

    def test_describe_vegetarian(self) -> None:
        item = Item(name="Pancakes", description="With syrup", price="2.99", vegetarian=True)

        assert item.describe(get_settings()) == "Pancakes (v), 2.99 -- With syrup"

    def test_describe_without_description(self) -> None:
        item = Item(name="Hotdog", price="3.5")

        assert item.describe(get_settings()) == "Hotdog, 3.50"

    def test_describe_uses_price_places(self) -> None:
        item = Item(name="Hotdog", price="3.5")

        assert item.describe(get_settings(price_places=0)) == "Hotdog, 4"

    def test_render_indent(self) -> None:
        item = Item(name="Hotdog", price="3.5")

        assert item.render(indent=2, settings=get_settings(indent="  ")) == "    Hotdog, 3.50"

    def test_print_writes_line(self) -> None:
        out = io.StringIO()
        item = Item(name="Hotdog", price="3.5")

        item.print(stream=out, settings=get_settings(indent="  "))

        assert out.getvalue() == "Hotdog, 3.50\n"


class TestFormatPrice:
    """Tests for format_price()."""

    def test_pads_decimals(self) -> None:
        assert format_price(Decimal("3")) == "3.00"

    def test_rounds_half_up(self) -> None:
        assert format_price(Decimal("2.995")) == "3.00"
