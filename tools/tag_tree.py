"""Prints the tag tree of a tagattrs class for documentation."""

import importlib
import sys

from tagattrs.utils.format import format_tag_tree


def load_class(path: str) -> type:
    """Import ``package.module:Class`` (nested classes separated by dots)."""
    module_name, _, qualname = path.partition(":")
    if not qualname:
        raise ValueError(f"Expected 'module:Class', got {path!r}")

    target = importlib.import_module(module_name)
    for part in qualname.split("."):
        target = getattr(target, part)
    return target


def print_tree(cls: type) -> None:
    """Print the tag tree of ``cls``."""
    print(format_tag_tree(cls.tags(), root=cls.__qualname__))


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("usage: python tools/tag_tree.py module:Class [module:Class ...]", file=sys.stderr)
        sys.exit(1)

    for arg in sys.argv[1:]:
        print(f"\nPrinting tags: {arg}\n")
        print_tree(load_class(arg))
