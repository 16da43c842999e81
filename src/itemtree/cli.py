"""CLI entry point."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.table import Table

from itemtree.collection.fixed import FixedCollection
from itemtree.collection.growable import GrowableCollection
from itemtree.collection.keyed import KeyedCollection
from itemtree.core.config import get_settings
from itemtree.models.item import Item, format_price
from itemtree.query import vegetarian_items
from itemtree.tree.bridge import group_from_collection
from itemtree.tree.group import Group

app = typer.Typer(
    name="itemtree",
    help="Uniform iteration over collections and composite trees",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main() -> None:
    """Apply the configured log level."""
    logging.basicConfig(level=get_settings().log_level.upper())


@app.command()
def version() -> None:
    """Show version."""
    from itemtree import __version__

    console.print(f"itemtree {__version__}")


@app.command()
def info() -> None:
    """Show system information."""
    import sys

    from itemtree import __version__

    console.print(f"[bold]ItemTree[/bold] {__version__}")
    console.print(f"Python {sys.version}")


@app.command()
def settings() -> None:
    """Show effective settings (ITEMTREE_* environment variables)."""
    table = Table(title="ItemTree settings")
    table.add_column("Setting")
    table.add_column("Value")
    for name, value in get_settings().model_dump().items():
        table.add_row(name, repr(value))
    console.print(table)


def _sample_tree() -> Group:
    pancake_house = GrowableCollection([
        Item(name="Pancakes", description="With syrup", price="2.99", vegetarian=True),
        Item(name="Waffles", description="With berries", price="3.59", vegetarian=True),
    ])
    diner = FixedCollection(
        [
            Item(name="BLT", description="Bacon, lettuce, tomato", price="2.99"),
            Item(name="Soup", description="Of the day", price="3.29", vegetarian=True),
        ],
        capacity=6,
    )
    cafe = KeyedCollection([
        Item(name="Burrito", description="Pinto beans, salsa", price="4.29", vegetarian=True),
    ])

    dinner = group_from_collection("Cafe", "Dinner", cafe)
    dinner.add(Group("Desserts", "After dinner", [
        Item(name="Apple Pie", description="With ice cream", price="1.59", vegetarian=True),
    ]))
    return Group("All", "All menus combined", [
        group_from_collection("Pancake House", "Breakfast", pancake_house),
        group_from_collection("Diner", "Lunch", diner),
        dinner,
    ])


@app.command()
def demo(
    vegetarian: bool = typer.Option(False, "--vegetarian", help="List vegetarian items only"),
) -> None:
    """Build a sample tree from three collection types and show it."""
    root = _sample_tree()
    if not vegetarian:
        console.print(root.render(), markup=False, highlight=False)
        return

    table = Table(title="Vegetarian items")
    table.add_column("Name")
    table.add_column("Price", justify="right")
    places = get_settings().price_places
    for item in vegetarian_items(root):
        table.add_row(item.name, format_price(item.price, places))
    console.print(table)


if __name__ == "__main__":
    app()
