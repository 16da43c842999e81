"""Tests for group_from_collection()."""

from __future__ import annotations

import pytest

from itemtree.collection.fixed import FixedCollection
from itemtree.collection.growable import GrowableCollection
from itemtree.collection.keyed import KeyedCollection
from itemtree.models.item import Item
from itemtree.tree.bridge import group_from_collection
from itemtree.tree.group import Group


def make_items(*names: str) -> list[Item]:
    return [Item(name=name, price="1") for name in names]


class TestGroupFromCollection:
    """Collections of any backing store become tree groups."""

    @pytest.mark.parametrize(
        "collection",
        [
            FixedCollection(make_items("A", "B"), capacity=6),
            GrowableCollection(make_items("A", "B")),
            KeyedCollection(make_items("A", "B")),
        ],
        ids=["fixed", "growable", "keyed"],
    )
    def test_children_follow_iteration_order(self, collection) -> None:
        group = group_from_collection("Menu", "Desc", collection)

        assert group.name == "Menu"
        assert group.description == "Desc"
        assert [child.name for child in group.children] == ["A", "B"]

    def test_collection_left_untouched(self) -> None:
        collection = GrowableCollection(make_items("A", "B"))
        revision = collection.revision

        group_from_collection("Menu", "", collection)

        assert collection.count() == 2
        assert collection.revision == revision

    def test_heterogeneous_roots_in_one_tree(self) -> None:
        """Fixed and growable adapters become siblings in one tree."""
        pancake_house = GrowableCollection([
            Item(name="Pancakes", price="2.99", vegetarian=True),
            Item(name="Waffles", price="3.59", vegetarian=True),
        ])
        diner = FixedCollection([Item(name="BLT", price="2.99")], capacity=6)
        cafe = KeyedCollection([Item(name="Burrito", price="4.29", vegetarian=True)])

        root = Group("All", children=[
            group_from_collection("Pancake House", "Breakfast", pancake_house),
            group_from_collection("Diner", "Lunch", diner),
            group_from_collection("Cafe", "Dinner", cafe),
        ])

        names = [item.name for item in root.create_iterator()]
        assert names == ["Pancakes", "Waffles", "BLT", "Burrito"]

    def test_empty_collection(self) -> None:
        group = group_from_collection("Empty", "", GrowableCollection())

        assert group.count() == 0
