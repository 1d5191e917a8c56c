"""Human-readable rendering of tag caches."""

from collections.abc import Mapping
from operator import itemgetter
from typing import Any

from natsort import natsorted
from tree_format import format_tree


def _tag_tree(tags: Mapping[str, Mapping[str, Any]], root: str) -> tuple[str, list]:
    """Build a tree-format-compatible tuple from a by-tag index."""
    children = []
    for tag in natsorted(tags):
        values = tags[tag]
        leaves = [(f"{attr}: {values[attr]!r}", []) for attr in natsorted(values)]
        children.append((tag, leaves))
    return (root, children)


def format_tag_tree(tags: Mapping[str, Mapping[str, Any]], root: str = "tags") -> str:
    """
    Format a by-tag index as an indented tree.

    Parameters
    ----------
    tags : Mapping[str, Mapping[str, Any]]
        Tag name to {attribute name: value}; a TagCache qualifies.
    root : str, optional
        Label of the root node, typically the class name.

    Returns
    -------
    str
        Tree with one branch per tag and one leaf per attribute, both in natural order.
    """
    tree = _tag_tree(tags, root)
    return format_tree(tree, format_node=itemgetter(0), get_children=itemgetter(1))
