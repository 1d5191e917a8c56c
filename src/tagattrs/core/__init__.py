"""Tag registration, propagation and caching."""

from tagattrs.core.cache import TagCache, TagCacheStore
from tagattrs.core.chain import ChainAccumulator
from tagattrs.core.declarable import NOTHING, Attribute, Declarable, attribute, attributes, has
from tagattrs.core.interceptor import AttributeInterceptor
from tagattrs.core.objects import Object, Role, apply_role, track_tags, use_role
from tagattrs.core.registry import TagRegistry
from tagattrs.core.service import TaggingService, get_service, set_verbose

__all__ = [
    "NOTHING",
    "Attribute",
    "AttributeInterceptor",
    "ChainAccumulator",
    "Declarable",
    "Object",
    "Role",
    "TagCache",
    "TagCacheStore",
    "TagRegistry",
    "TaggingService",
    "apply_role",
    "attribute",
    "attributes",
    "get_service",
    "has",
    "set_verbose",
    "track_tags",
    "use_role",
]
