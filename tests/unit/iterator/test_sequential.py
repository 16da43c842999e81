"""Tests for SequentialIterator.

Tests cover:
- Storage-order traversal and exhaustion
- remove() semantics and positioning
- remove() misuse (IllegalStateError)
- Fail-fast detection of outside modification
"""

from __future__ import annotations

import pytest

from itemtree.collection.fixed import FixedCollection
from itemtree.collection.growable import GrowableCollection
from itemtree.core.exceptions import IllegalStateError, NoSuchElementError
from itemtree.iterator.sequential import SequentialIterator
from itemtree.models.item import Item
from itemtree.protocols.iterator import ItemIterator


def make_collection(*names: str, capacity: int = 10) -> FixedCollection:
    return FixedCollection(
        [Item(name=name, price="1") for name in names],
        capacity=capacity,
    )


def names_of(collection) -> list[str]:
    return [collection.item_at(i).name for i in range(collection.count())]


# =============================================================================
# Traversal Tests
# =============================================================================


class TestSequentialTraversal:
    """Tests for plain traversal."""

    def test_is_item_iterator(self) -> None:
        assert isinstance(make_collection().create_iterator(), ItemIterator)

    def test_initial_position_zero(self) -> None:
        it = SequentialIterator(make_collection("A"))

        assert it.position == 0

    def test_yields_all_in_order(self) -> None:
        it = make_collection("A", "B", "C").create_iterator()

        assert [it.next().name for _ in range(3)] == ["A", "B", "C"]
        assert it.has_next() is False

    def test_empty_collection(self) -> None:
        it = make_collection().create_iterator()

        assert it.has_next() is False
        with pytest.raises(NoSuchElementError):
            it.next()

    def test_next_past_end_raises(self) -> None:
        it = make_collection("A").create_iterator()
        it.next()

        with pytest.raises(NoSuchElementError):
            it.next()

    def test_has_next_is_idempotent(self) -> None:
        it = make_collection("A").create_iterator()

        assert it.has_next() is True
        assert it.has_next() is True
        assert it.next().name == "A"

    def test_for_loop_stops_cleanly(self) -> None:
        collection = make_collection("A", "B")

        assert [item.name for item in collection.create_iterator()] == ["A", "B"]

    def test_next_does_not_mutate(self) -> None:
        collection = make_collection("A", "B")
        it = collection.create_iterator()
        it.next()

        assert collection.count() == 2


# =============================================================================
# Removal Tests
# =============================================================================


class TestSequentialRemove:
    """Tests for remove()."""

    def test_remove_after_first_next(self) -> None:
        """next()->A, remove(), next()->B."""
        collection = make_collection("A", "B", "C")
        it = collection.create_iterator()

        assert it.next().name == "A"
        it.remove()

        assert names_of(collection) == ["B", "C"]
        assert it.next().name == "B"

    def test_remove_reduces_count_by_one(self) -> None:
        collection = make_collection("A", "B", "C")
        it = collection.create_iterator()
        it.next()
        it.next()

        it.remove()

        assert collection.count() == 2
        assert [item.name for item in collection.create_iterator()] == ["A", "C"]

    def test_remove_last_element(self) -> None:
        collection = make_collection("A", "B")
        it = collection.create_iterator()
        it.next()
        it.next()

        it.remove()

        assert it.has_next() is False
        assert names_of(collection) == ["A"]

    def test_remove_every_element(self) -> None:
        collection = make_collection("A", "B", "C")
        it = collection.create_iterator()

        seen = []
        while it.has_next():
            seen.append(it.next().name)
            it.remove()

        assert seen == ["A", "B", "C"]
        assert collection.count() == 0

    def test_selective_remove(self) -> None:
        collection = GrowableCollection(
            [Item(name=n, price="1", vegetarian=n in {"B", "D"}) for n in "ABCDE"]
        )
        it = collection.create_iterator()

        while it.has_next():
            if it.next().vegetarian:
                it.remove()

        assert [item.name for item in collection] == ["A", "C", "E"]

    def test_removed_slot_cleared_in_fixed_collection(self) -> None:
        collection = make_collection("A", "B", capacity=2)
        it = collection.create_iterator()
        it.next()
        it.remove()

        collection.add(Item(name="C", price="1"))

        assert names_of(collection) == ["B", "C"]

    def test_remove_before_next_raises(self) -> None:
        collection = make_collection("A")
        it = collection.create_iterator()

        with pytest.raises(IllegalStateError):
            it.remove()
        assert collection.count() == 1

    def test_remove_twice_raises(self) -> None:
        collection = make_collection("A", "B")
        it = collection.create_iterator()
        it.next()
        it.remove()

        with pytest.raises(IllegalStateError):
            it.remove()
        assert names_of(collection) == ["B"]

    def test_remove_allowed_again_after_next(self) -> None:
        collection = make_collection("A", "B")
        it = collection.create_iterator()
        it.next()
        it.remove()
        it.next()

        it.remove()

        assert collection.count() == 0


# =============================================================================
# Fail-fast Tests
# =============================================================================


class TestSequentialModificationDetection:
    """Outside modification invalidates the iterator."""

    def test_next_after_outside_add_raises(self) -> None:
        collection = make_collection("A", "B")
        it = collection.create_iterator()
        it.next()

        collection.add(Item(name="C", price="1"))

        with pytest.raises(IllegalStateError):
            it.next()

    def test_remove_after_outside_removal_raises(self) -> None:
        collection = make_collection("A", "B", "C")
        it = collection.create_iterator()
        it.next()

        collection.remove_at(2)

        with pytest.raises(IllegalStateError):
            it.remove()
        assert names_of(collection) == ["A", "B"]

    def test_has_next_never_raises(self) -> None:
        collection = make_collection("A", "B")
        it = collection.create_iterator()
        it.next()

        collection.remove_at(1)

        assert it.has_next() is False

    def test_other_iterator_remove_invalidates(self) -> None:
        collection = make_collection("A", "B")
        first = collection.create_iterator()
        second = collection.create_iterator()
        second.next()
        second.remove()

        with pytest.raises(IllegalStateError):
            first.next()

    def test_for_loop_fails_fast_when_source_shrinks(self) -> None:
        collection = make_collection("A", "B", "C")

        with pytest.raises(IllegalStateError):
            for element in collection.create_iterator():
                if element.name == "A":
                    collection.remove_at(2)
                    collection.remove_at(1)
