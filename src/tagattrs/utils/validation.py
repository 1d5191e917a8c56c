"""
Contains generic input validation utilities used across tagattrs modules.

These functions are stateless and reusable; they normalize the loose shapes accepted by
the declarative surface (a single name or an iterable of names) into tuples.
"""

from collections.abc import Iterable

from tagattrs.exceptions import ConfigurationError


def _as_name_tuple(names: str | Iterable[str] | None) -> tuple:
    if names is None:
        return ()
    if isinstance(names, str):
        return (names,)
    if isinstance(names, (bytes, bytearray)) or not isinstance(names, Iterable):
        raise TypeError(f"Expected a name or an iterable of names, got {type(names).__name__}: {names!r}")
    return tuple(names)


def validate_tag_names(tags: str | Iterable[str] | None) -> tuple[str, ...]:
    """Normalize tag names to an ordered tuple; duplicates are kept."""
    try:
        tags = _as_name_tuple(tags)
    except TypeError as e:
        raise ConfigurationError(f"tags must be a string or a list of strings: {e}") from e

    for tag in tags:
        if not isinstance(tag, str) or not tag:
            raise ConfigurationError(f"tag names must be non-empty strings, got {tag!r}")
    return tags


def validate_attribute_names(names: str | Iterable[str]) -> tuple[str, ...]:
    """Normalize attribute names to an ordered tuple of unique identifiers."""
    names = _as_name_tuple(names)
    if not names:
        raise ValueError("At least one attribute name is required.")

    for name in names:
        if not isinstance(name, str) or not name.isidentifier():
            raise ValueError(f"Attribute names must be identifiers, got {name!r}")
        if name.startswith("__"):
            raise ValueError(f"Attribute names may not be private or special, got {name!r}")
    return tuple(dict.fromkeys(names))
