"""
Process-wide tagging service.

Wires the registry, the attribute interceptor, the chain accumulator and the cache store
together and exposes the operations the declarative surface is built from.
"""

import functools
import logging
from typing import Any

from tagattrs.core.cache import TagCache, TagCacheStore
from tagattrs.core.chain import ChainAccumulator
from tagattrs.core.declarable import is_declarable, is_role, merge_role
from tagattrs.core.interceptor import AttributeInterceptor
from tagattrs.core.registry import TagRegistry
from tagattrs.exceptions import ConfigurationError, InstallationError
from tagattrs.schema.config import TaggingConfig
from tagattrs.schema.tag_record import TagRecord
from tagattrs.utils.logging import get_logger


class TaggingService:
    """
    Tag tracking for declarable classes and roles.

    Parameters
    ----------
    verbose : bool, optional
        If True, every component logs at DEBUG level.

    Attributes
    ----------
    registry : TagRegistry
        Tag names recognized by each target.
    chain : ChainAccumulator
        Tag records contributed by each target.
    interceptor : AttributeInterceptor
        Declaration hook installed on every registered target.
    caches : TagCacheStore
        Memoized per-class caches.
    """

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)
        self.chain = ChainAccumulator(verbose=verbose)
        self.registry = TagRegistry(installer=self._install, verbose=verbose)
        self.interceptor = AttributeInterceptor(self.registry, self.chain, verbose=verbose)
        self.caches = TagCacheStore(self.chain, verbose=verbose)

    def _install(self, target: type) -> None:
        self.interceptor.install(target)

    def track_tags(self, target: Any, **options: Any) -> TaggingConfig:
        """
        Apply the tag-tracking directive to ``target``.

        Parameters
        ----------
        target : type
            Declarable class or role.
        **options
            Directive options; only ``tags`` (a name or a list of names) is known.

        Returns
        -------
        TaggingConfig
            The parsed directive.

        Raises
        ------
        ConfigurationError
            If an option is unknown or the tag names are malformed.
        InstallationError
            If ``target`` cannot carry tag tracking.
        """
        config = TaggingConfig.from_options(options)
        if not is_declarable(target):
            self.logger.error(f"Tag tracking requested on unsupported target {target!r}")
            raise InstallationError(f"error installing tag tracking into {target!r}: not a declarable class")

        if config.tags:
            self.registry.register(target, config.tags)
        return config

    def apply_role(self, target: type, role: type) -> bool:
        """
        Merge ``role`` into ``target``, carrying along the role's existing tag records.

        The target does not gain the ability to tag attributes of its own.

        Returns
        -------
        bool
            True if the role was merged, False if it already had been.
        """
        if not merge_role(target, role):
            return False
        self.chain.compose(target, role)
        self.logger.debug(f"Applied role {role.__qualname__} to {target.__qualname__}")
        return True

    def use_role(self, target: type, role: Any) -> bool:
        """
        Merge a tag-tracking ``role`` into ``target`` and let ``target`` tag attributes too.

        Raises
        ------
        ConfigurationError
            If ``role`` is not a role, or is a role that does not track tags.
        """
        if not is_role(role):
            raise ConfigurationError(f"{getattr(role, '__qualname__', role)!r} is not a role and cannot be used")
        tags = self.role_tags(role)
        if not tags:
            raise ConfigurationError(
                f"role {role.__qualname__} does not track tags; compose it with roles= instead of uses="
            )

        merged = self.apply_role(target, role)
        self.registry.register(target, tags)
        return merged

    def role_tags(self, role: type) -> tuple[str, ...]:
        """Get the tags tracked by ``role`` or any class in its ``__mro__``, without duplicates."""
        return tuple(dict.fromkeys(tag for klass in role.__mro__ for tag in self.registry.lookup(klass)))

    def tag_list(self, target: type) -> list[TagRecord]:
        """Get every record visible to ``target`` right now, most specific first."""
        return self.chain.tag_list(target)

    def for_class(self, cls: type) -> TagCache:
        """Get the memoized cache of ``cls``."""
        return self.caches.for_class(cls)

    def for_instance(self, instance: Any) -> TagCache:
        """Get the memoized cache shared by the instances of ``type(instance)``."""
        return self.caches.for_instance(instance)


@functools.lru_cache(maxsize=None)
def get_service() -> TaggingService:
    """Return the process-wide :class:`TaggingService` used by Object and Role."""
    return TaggingService()


def set_verbose(verbose: bool = True) -> logging.Logger:
    """Switch DEBUG logging of the process-wide service on or off."""
    service = get_service()
    service.verbose = verbose
    level = logging.DEBUG if verbose else logging.WARNING
    for component in (service, service.registry, service.chain, service.interceptor, service.caches):
        component.logger.setLevel(level)
    return service.logger
