"""
Error taxonomy for tagattrs.

Every error derives from :class:`TaggingError` and from the builtin exception a caller
would naturally catch for the same mistake, so ``except ValueError`` or
``except TypeError`` keep working for code that does not know about tagattrs.
"""


class TaggingError(Exception):
    """Base class for all tagattrs errors."""


class ConfigurationError(TaggingError, ValueError):
    """Raised at definition time when the tag-tracking directive is misconfigured."""


class InstallationError(TaggingError, TypeError):
    """Raised when tag tracking cannot be installed on the requested target."""


class LockedError(TaggingError, TypeError):
    """Raised on any attempt to mutate a locked tag structure."""
