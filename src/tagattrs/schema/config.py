"""Structured representation of the tag-tracking directive options."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from tagattrs.exceptions import ConfigurationError
from tagattrs.utils.validation import validate_tag_names

KNOWN_OPTIONS = frozenset({"tags"})


@dataclass(frozen=True)
class TaggingConfig:
    """
    Parsed options of the tag-tracking directive.

    Attributes
    ----------
    tags : tuple[str, ...]
        Ordered tag names the target recognizes as attribute-declaration options.
    """

    tags: tuple[str, ...] = ()

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "TaggingConfig":
        """
        Validate and normalize raw directive options.

        Parameters
        ----------
        options : Mapping[str, Any]
            Keyword options given to the directive.

        Returns
        -------
        TaggingConfig
            Normalized configuration.

        Raises
        ------
        ConfigurationError
            If an option is unknown or the tag names are malformed.
        """
        unknown = sorted(set(options) - KNOWN_OPTIONS)
        if unknown:
            raise ConfigurationError(f"unknown argument(s) to tag tracking: {', '.join(unknown)}")

        tags: str | Iterable[str] | None = options.get("tags")
        return cls(tags=validate_tag_names(tags))
