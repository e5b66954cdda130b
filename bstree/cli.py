"""Bstree CLI
---

Command line application for building a binary search tree from a list of
values and printing its traversals and shape.
"""

import sys

import click
from wasabi import msg

from .config import TreeConfig
from .core.errors import TreeException
from .core.tree import ORDERS, BinarySearchTree


@click.group()
@click.version_option()
def cli():
    """
    Bstree

    Build unbalanced binary search trees and print their traversals.
    """


@cli.command("show")
@click.argument("values", nargs=-1, required=True)
@click.option(
    "order",
    "--order",
    default="all",
    type=click.Choice(ORDERS + ("all",)),
    help="Which traversal to print",
)
@click.option(
    "graph",
    "--graph/--no-graph",
    default=True,
    help="Print the sideways structure of the tree",
)
@click.option(
    "removals",
    "--remove",
    multiple=True,
    help="A value to remove after inserting, may be repeated",
)
@click.option(
    "separator", "--separator", default="  ", help="Text written after each value"
)
@click.option(
    "strings",
    "--strings",
    is_flag=True,
    default=False,
    help="Compare values as strings instead of integers",
)
@click.option("verbose", "--verbose", is_flag=True, default=False)
def cli_show(
    values: tuple,
    order: str,
    graph: bool,
    removals: tuple,
    separator: str,
    strings: bool,
    verbose: bool,
):
    """Insert VALUES in the given order and print the resulting tree."""
    convert = str if strings else int
    try:
        items = [convert(value) for value in values]
        removed = [convert(value) for value in removals]
    except ValueError as error:
        msg.fail(
            "Values must be integers unless --strings is given", str(error), exits=1
        )

    tree = BinarySearchTree(TreeConfig(separator=separator, verbose=verbose))
    try:
        for item in items:
            tree.insert(item)
        for item in removed:
            tree.remove(item)
    except TreeException as error:
        msg.fail(f"{error}: {item}", exits=1)

    msg.good(f"Built a tree of {len(tree)} values with height {tree.height()}")
    selected = ORDERS if order == "all" else (order,)
    for name in selected:
        msg.divider(name)
        getattr(tree, name)(sys.stdout)
        sys.stdout.write("\n")
    if graph:
        msg.divider("graph")
        tree.graph(sys.stdout)


if __name__ == "__main__":
    cli()
