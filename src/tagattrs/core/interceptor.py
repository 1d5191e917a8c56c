"""Declaration hook turning tagged attribute options into tag records."""

import logging
from collections.abc import Mapping
from typing import Any

from tagattrs.core.chain import ChainAccumulator
from tagattrs.core.declarable import add_declaration_hook, is_declarable
from tagattrs.core.registry import TagRegistry
from tagattrs.exceptions import InstallationError
from tagattrs.schema.tag_record import TagRecord
from tagattrs.utils.logging import get_logger


class AttributeInterceptor:
    """
    Watches attribute declarations on tag-tracking targets.

    Once installed on a target, every declaration on that target is matched against the
    target's current tag names; each tag present among the declaration options becomes a
    :class:`TagRecord` appended to the target's chain. Options that are not tags are left
    alone.

    Parameters
    ----------
    registry : TagRegistry
        Source of each target's recognized tag names.
    chain : ChainAccumulator
        Chain the produced records are appended to.
    logger : logging.Logger, optional
        Custom logger for diagnostics.
    verbose : bool, optional
        If True, enables detailed logging output.
    """

    def __init__(
        self,
        registry: TagRegistry,
        chain: ChainAccumulator,
        logger: logging.Logger | None = None,
        verbose: bool = False,
    ) -> None:
        self.registry = registry
        self.chain = chain
        self.logger = logger or get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)

    def install(self, target: Any) -> None:
        """Attach the declaration hook to ``target`` and open its chain."""
        if not is_declarable(target):
            self.logger.error(f"Cannot install tag tracking on {target!r}")
            raise InstallationError(
                f"error installing tag tracking into {target!r}: expected a subclass of Declarable"
            )
        if self.intercept in target.__declaration_hooks__:
            return

        add_declaration_hook(target, self.intercept)
        self.chain.ensure(target)
        self.logger.debug(f"Installed attribute interceptor on {target.__qualname__}")

    def records_for(self, target: type, names: tuple[str, ...], options: Mapping[str, Any]) -> list[TagRecord]:
        """Build the records one declaration contributes to ``target``."""
        attrs = frozenset(names)
        return [
            TagRecord(tag=tag, attributes=attrs, value=options[tag])
            for tag in dict.fromkeys(self.registry.lookup(target))
            if tag in options
        ]

    def intercept(self, target: type, names: tuple[str, ...], options: Mapping[str, Any]) -> None:
        """Declaration hook: record the tags found among ``options``."""
        records = self.records_for(target, names, options)
        if records:
            self.logger.debug(
                f"{target.__qualname__}.{'/'.join(names)} tagged {[record.tag for record in records]}"
            )
        self.chain.extend(target, records)
