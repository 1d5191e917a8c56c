"""Registry of the tag names each class or role recognizes."""

import logging
import threading
import weakref
from collections.abc import Callable, Iterable

from tagattrs.utils.logging import get_logger
from tagattrs.utils.validation import validate_tag_names


class TagRegistry:
    """
    Process-wide table of tag-tracking targets and their recognized tag names.

    Parameters
    ----------
    installer : Callable[[type], None], optional
        Called exactly once per target, when it is first registered, before the entry is
        stored. If it raises, the registration does not happen.
    logger : logging.Logger, optional
        Custom logger for diagnostics.
    verbose : bool, optional
        If True, enables detailed logging output.

    Notes
    -----
    Entries are keyed weakly by the target class and only ever grow: registering an
    already known target appends the new names (duplicates allowed, order preserved).
    """

    def __init__(
        self,
        installer: Callable[[type], None] | None = None,
        logger: logging.Logger | None = None,
        verbose: bool = False,
    ) -> None:
        self._installer = installer
        self._tags: weakref.WeakKeyDictionary[type, list[str]] = weakref.WeakKeyDictionary()
        self._lock = threading.RLock()
        self.logger = logger or get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)

    def register(self, target: type, tags: str | Iterable[str]) -> tuple[str, ...]:
        """
        Add tag names to ``target``, installing tag tracking on first registration.

        Parameters
        ----------
        target : type
            Class or role requesting tag tracking.
        tags : str or iterable of str
            Tag names to recognize from now on.

        Returns
        -------
        tuple[str, ...]
            The target's complete tag list after registration.
        """
        tags = validate_tag_names(tags)
        with self._lock:
            if target in self._tags:
                self._tags[target].extend(tags)
                self.logger.debug(f"Extended tags of {target.__qualname__} with {list(tags)}")
            else:
                if self._installer is not None:
                    self._installer(target)
                self._tags[target] = list(tags)
                self.logger.debug(f"Registered {target.__qualname__} with tags {list(tags)}")
            return tuple(self._tags[target])

    def lookup(self, target: type) -> tuple[str, ...]:
        """Get the ordered tag names of ``target``; empty if it never registered."""
        with self._lock:
            return tuple(self._tags.get(target, ()))

    def is_tracking(self, target: type) -> bool:
        """Check whether ``target`` has requested tag tracking itself."""
        with self._lock:
            return target in self._tags

    def __contains__(self, target: object) -> bool:
        try:
            return self.is_tracking(target)
        except TypeError:
            return False

    def __len__(self) -> int:
        """Get the number of registered targets."""
        return len(self._tags)

    def __iter__(self):
        """Iterate over a snapshot of the registered targets."""
        with self._lock:
            return iter(list(self._tags.keys()))
