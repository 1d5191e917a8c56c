"""
Per-class tag cache.

The cache flattens the chain accumulator's records into two locked indices:

- by tag: tag name -> {attribute name: value}
- by attribute: attribute name -> {tag name: value}

Records are folded in order and a later record overrides an earlier one for the same
(tag, attribute) pair, so the most specific declaration wins. Caches are built once per
class and shared by the class and all of its instances; they are never invalidated.
"""

import copy
import logging
import threading
import weakref
from collections.abc import Iterable, Mapping
from typing import Any

from natsort import natsorted

from tagattrs.core.chain import ChainAccumulator
from tagattrs.data.locked import LockedMapping
from tagattrs.schema.tag_record import TagRecord
from tagattrs.utils.logging import get_logger


class TagCache(LockedMapping):
    """
    Immutable tag index for one class.

    The cache itself is a read-only mapping over the by-tag index, so code expecting a
    plain nested mapping (``cache["tag1"]["attr"]``) keeps working.

    Parameters
    ----------
    records : Iterable[TagRecord]
        Records in fold order: the last record for a (tag, attribute) pair wins.
    name : str, optional
        Label used in error messages and reprs (typically the class name).
    """

    __slots__ = ("_records", "_attr_hash")

    def __init__(self, records: Iterable[TagRecord] = (), name: str = "") -> None:
        self._records = tuple(records)

        by_tag: dict[str, dict[str, Any]] = {}
        by_attr: dict[str, dict[str, Any]] = {}
        for record in self._records:
            for attr in record.attributes:
                by_tag.setdefault(record.tag, {})[attr] = record.value
                by_attr.setdefault(attr, {})[record.tag] = record.value

        label = f"tag cache of {name}" if name else "tag cache"
        super().__init__(
            {tag: LockedMapping(values, name=f"{label}[{tag!r}]") for tag, values in by_tag.items()},
            name=label,
        )
        self._attr_hash = LockedMapping(
            {attr: LockedMapping(values, name=f"{label} attribute {attr!r}") for attr, values in by_attr.items()},
            name=f"{label} attribute index",
        )

    @property
    def records(self) -> tuple[TagRecord, ...]:
        """tuple[TagRecord, ...]: Records the cache was folded from, in fold order."""
        return self._records

    @property
    def tag_hash(self) -> Mapping[str, Mapping[str, Any]]:
        """Mapping: Tag name to {attribute name: value}."""
        return self

    @property
    def attr_hash(self) -> Mapping[str, Mapping[str, Any]]:
        """Mapping: Attribute name to {tag name: value}."""
        return self._attr_hash

    def by_tag(self, tag: str) -> Mapping[str, Any]:
        """Get {attribute name: value} for ``tag``; empty if the tag was never used."""
        return self.get(tag, _EMPTY)

    def by_attribute(self, attr: str) -> Mapping[str, Any]:
        """Get {tag name: value} for ``attr``; empty if it carries no tags."""
        return self._attr_hash.get(attr, _EMPTY)

    def tags_for_attribute(self, attr: str) -> frozenset[str]:
        """Get the set of tags attached to ``attr``."""
        return frozenset(self.by_attribute(attr))

    def value(self, attr: str, tag: str, default: Any = None) -> Any:
        """Get the value of ``tag`` on ``attr``, or ``default`` if it is absent."""
        return self.by_attribute(attr).get(tag, default)

    def tag_names(self) -> tuple[str, ...]:
        """Get every tag name in use, in natural order."""
        return tuple(natsorted(self))

    def attributes(self) -> tuple[str, ...]:
        """Get every tagged attribute name, in natural order."""
        return tuple(natsorted(self._attr_hash))

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Create a plain, mutable deep copy of the by-tag index, tag values included."""
        return copy.deepcopy({tag: dict(values) for tag, values in self.items()})


_EMPTY = LockedMapping(name="empty tag mapping")


class TagCacheStore:
    """
    Memoized :class:`TagCache` per class.

    Parameters
    ----------
    chain : ChainAccumulator
        Source of the records each cache is built from.
    logger : logging.Logger, optional
        Custom logger for diagnostics.
    verbose : bool, optional
        If True, enables detailed logging output.

    Notes
    -----
    A cache is built the first time a class, or any of its instances, asks for it and
    is kept for as long as the class exists. Roles merged into, or attributes declared
    on, the class afterwards do not show up in the cache.
    """

    def __init__(self, chain: ChainAccumulator, logger: logging.Logger | None = None, verbose: bool = False) -> None:
        self.chain = chain
        self._caches: weakref.WeakKeyDictionary[type, TagCache] = weakref.WeakKeyDictionary()
        self._lock = threading.RLock()
        self.logger = logger or get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)

    def for_class(self, cls: type) -> TagCache:
        """Get, building it on first use, the cache of ``cls``."""
        if not isinstance(cls, type):
            raise TypeError(f"Expected a class, got {type(cls).__name__}: {cls!r}")

        with self._lock:
            cache = self._caches.get(cls)
            if cache is None:
                cache = TagCache(self.chain.fold_order(cls), name=cls.__qualname__)
                self._caches[cls] = cache
                self.logger.debug(
                    f"Built tag cache for {cls.__qualname__}: {len(cache)} tag(s), {len(cache.records)} record(s)"
                )
            return cache

    def for_instance(self, instance: Any) -> TagCache:
        """Get the cache shared by every instance of ``type(instance)``."""
        return self.for_class(type(instance))

    def is_cached(self, cls: type) -> bool:
        """Check whether the cache of ``cls`` has been built."""
        with self._lock:
            return cls in self._caches
