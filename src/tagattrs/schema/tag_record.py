"""
Structured representation of a single tag declaration.

Defines the TagRecord dataclass, produced once per attribute declaration that carried
a recognized tag as one of its options. Records are threaded through composition and
inheritance by the chain accumulator and folded into the tag cache.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TagRecord:
    """
    Container for one tag value attached to one or more attributes.

    Attributes
    ----------
    tag : str
        Name of the tag (e.g., "tag1").
    attributes : frozenset[str]
        Names of the attributes declared together with this tag value. Usually a single
        name, but several attributes may be declared at once with shared options.
    value : Any
        The value given for the tag in the declaration options.

    Notes
    -----
    - Records compare by value; they are not hashed anywhere, so unhashable tag values
      are allowed.
    """

    tag: str
    attributes: frozenset[str] = field(default_factory=frozenset)
    value: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.attributes, frozenset):
            object.__setattr__(self, "attributes", frozenset(self.attributes))
