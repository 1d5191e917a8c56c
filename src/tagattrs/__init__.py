"""tagattrs package."""

from tagattrs._version import __version__
from tagattrs.core import (
    Attribute,
    Object,
    Role,
    TagCache,
    apply_role,
    attribute,
    get_service,
    has,
    track_tags,
    use_role,
)
from tagattrs.exceptions import ConfigurationError, InstallationError, LockedError, TaggingError
from tagattrs.schema import TagRecord

__all__ = [
    "Attribute",
    "ConfigurationError",
    "InstallationError",
    "LockedError",
    "Object",
    "Role",
    "TagCache",
    "TagRecord",
    "TaggingError",
    "__version__",
    "apply_role",
    "attribute",
    "get_service",
    "has",
    "track_tags",
    "use_role",
]
