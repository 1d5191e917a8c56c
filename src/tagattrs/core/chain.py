"""
Chain accumulator: reconstructs every tag record visible to a class or role.

Each tag-tracking target owns an ordered list of contributors. A contributor either
holds the records of one attribute declaration, or stands for a role merged into the
target and defers to that role's own chain. Walking a class therefore concatenates

1. the contributors of every class in its ``__mro__`` that participates, most specific
   first (vertical propagation), where
2. each role contributor expands to the full chain of the role (horizontal propagation).

Records keep insertion order within one target. No order is promised between the
records of two roles merged side by side.
"""

import logging
import threading
import weakref
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from tagattrs.schema.tag_record import TagRecord
from tagattrs.utils.logging import get_logger


@dataclass(frozen=True, eq=False)
class DeclaredRecords:
    """Records produced by a single attribute declaration."""

    records: tuple[TagRecord, ...]


@dataclass(frozen=True, eq=False)
class ComposedRole:
    """Placeholder for the full chain of a role merged into a target."""

    role: type


Contributor = DeclaredRecords | ComposedRole


class ChainAccumulator:
    """
    Ordered contributor lists per target, and the walks over them.

    Parameters
    ----------
    logger : logging.Logger, optional
        Custom logger for diagnostics.
    verbose : bool, optional
        If True, enables detailed logging output.
    """

    def __init__(self, logger: logging.Logger | None = None, verbose: bool = False) -> None:
        self._chains: weakref.WeakKeyDictionary[type, list[Contributor]] = weakref.WeakKeyDictionary()
        self._lock = threading.RLock()
        self.logger = logger or get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)

    def ensure(self, target: type) -> None:
        """Make ``target`` a participant of the chain, with no contributors yet."""
        with self._lock:
            self._chains.setdefault(target, [])

    def participates(self, target: type) -> bool:
        """Check whether ``target`` carries a chain of its own."""
        with self._lock:
            return target in self._chains

    def contributors(self, target: type) -> tuple[Contributor, ...]:
        """Get the contributors of ``target`` itself, in insertion order."""
        with self._lock:
            return tuple(self._chains.get(target, ()))

    def extend(self, target: type, records: Iterable[TagRecord]) -> None:
        """Append the records of one declaration to ``target``'s own chain."""
        records = tuple(records)
        if not records:
            return
        with self._lock:
            self._chains.setdefault(target, []).append(DeclaredRecords(records))
        self.logger.debug(f"{target.__qualname__}: recorded {len(records)} tag record(s)")

    def compose(self, target: type, role: type) -> bool:
        """
        Thread ``role``'s chain into ``target``'s.

        The role is expanded along its ``__mro__``, so a role subclassing a tag-tracking
        role carries the parent's records. A role with no participant in its ``__mro__``
        contributes nothing and leaves the target untouched. Composing the same role twice
        into one target is a no-op.

        Returns
        -------
        bool
            True if a role contributor was added.
        """
        with self._lock:
            if not any(klass in self._chains for klass in role.__mro__):
                return False
            chain = self._chains.setdefault(target, [])
            if any(isinstance(c, ComposedRole) and c.role is role for c in chain):
                return False
            chain.append(ComposedRole(role))
        self.logger.debug(f"{target.__qualname__}: composed tag chain of {role.__qualname__}")
        return True

    def _expand(self, target: type, seen: set[int], visited: set[type]) -> Iterator[TagRecord]:
        # a target already expanded in this walk has emitted all of its records
        if target in visited:
            return
        visited.add(target)
        for contributor in self.contributors(target):
            if isinstance(contributor, ComposedRole):
                for klass in contributor.role.__mro__:
                    yield from self._expand(klass, seen, visited)
            elif id(contributor) not in seen:
                seen.add(id(contributor))
                yield from contributor.records

    def levels(self, cls: type) -> list[tuple[type, tuple[TagRecord, ...]]]:
        """
        Get the records of every participating class in ``cls.__mro__``.

        Returns
        -------
        list[tuple[type, tuple[TagRecord, ...]]]
            ``(class, records)`` pairs, most specific class first. A declaration reached
            through several composition paths is reported once, at its first encounter.
            Roles composed into each other in a cycle are expanded once.
        """
        seen: set[int] = set()
        visited: set[type] = set()
        return [
            (klass, tuple(self._expand(klass, seen, visited))) for klass in cls.__mro__ if self.participates(klass)
        ]

    def tag_list(self, cls: type) -> list[TagRecord]:
        """Get all records visible to ``cls``, most specific class first; empty if none."""
        return [record for _, records in self.levels(cls) for record in records]

    def fold_order(self, cls: type) -> list[TagRecord]:
        """Get all records visible to ``cls`` ordered so the most specific one comes last."""
        return [record for _, records in reversed(self.levels(cls)) for record in records]
