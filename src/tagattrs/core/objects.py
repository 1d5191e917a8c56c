"""
Declarative surface: the Object and Role base classes.

Classes and roles opt into tag tracking with class keywords::

    class T1(Role, tags=["tag1", "tag2"]):
        t1_1 = attribute(tag1="t1_1.t1")

    class C1(Object, uses=[T1]):
        c1_1 = attribute(tag1="c1_1.t1", tag2="c1_1.t2")

``uses=`` merges tag-tracking roles and lets the new class tag its own attributes;
``roles=`` only merges, carrying along the tags the roles already declared. ``tags()`` on
a class or an instance returns the class's :class:`~tagattrs.core.cache.TagCache`.

Tagging a single instance after it was built is not supported: caches are per class.
"""

import functools
import types
from collections.abc import Callable, Iterable
from typing import Any

from tagattrs.core.cache import TagCache
from tagattrs.core.declarable import Declarable, attributes
from tagattrs.core.service import get_service
from tagattrs.schema.config import TaggingConfig
from tagattrs.schema.tag_record import TagRecord


class hybridmethod:
    """Method receiving the class when called on the class, the instance otherwise."""

    def __init__(self, func: Callable[..., Any]) -> None:
        self.func = func
        functools.update_wrapper(self, func)

    def __get__(self, instance: Any, owner: type | None = None) -> Callable[..., Any]:
        return types.MethodType(self.func, owner if instance is None else instance)


def _as_roles(roles: type | Iterable[type] | None) -> tuple[type, ...]:
    if roles is None:
        return ()
    if isinstance(roles, type):
        return (roles,)
    return tuple(roles)


class Composable(Declarable):
    """Common base of Object and Role: composition keywords and tag queries."""

    @classmethod
    def _compose(
        cls,
        tags: str | Iterable[str] | None = None,
        uses: type | Iterable[type] | None = None,
        roles: type | Iterable[type] | None = None,
        **options: Any,
    ) -> None:
        service = get_service()
        if tags is not None or options:
            service.track_tags(cls, tags=tags, **options)
        for role in _as_roles(uses):
            service.use_role(cls, role)
        for role in _as_roles(roles):
            service.apply_role(cls, role)

    @hybridmethod
    def tags(self) -> TagCache:
        """Get the tag cache of this class (shared by all its instances)."""
        service = get_service()
        if isinstance(self, type):
            return service.for_class(self)
        return service.for_instance(self)

    @hybridmethod
    def tag_list(self) -> list[TagRecord]:
        """Get the live list of tag records visible to this class, most specific first."""
        return get_service().tag_list(self if isinstance(self, type) else type(self))


class Object(Composable):
    """
    Base class for instantiable classes with declared attributes.

    Keyword arguments to the constructor set declared attributes; anything else is a
    ``TypeError``. Instantiation builds the class's tag cache if it does not exist yet.
    """

    def __init__(self, **kwargs: Any) -> None:
        declared = attributes(type(self))
        unknown = sorted(set(kwargs) - set(declared))
        if unknown:
            raise TypeError(f"{type(self).__name__}() got unexpected attribute(s): {', '.join(unknown)}")

        for name, value in kwargs.items():
            setattr(self, name, value)
        get_service().for_instance(self)

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={self.__dict__[name]!r}" for name in attributes(type(self)) if name in self.__dict__)
        return f"{type(self).__name__}({values})"


class Role(Composable):
    """Base class for roles: bundles of attributes and methods merged into other classes."""

    __is_role__ = True

    def __new__(cls, *args: Any, **kwargs: Any) -> "Role":
        raise TypeError(f"{cls.__name__} is a role and cannot be instantiated")


def track_tags(target: type, **options: Any) -> TaggingConfig:
    """Request tag tracking on an existing class or role (see ``tags=``)."""
    return get_service().track_tags(target, **options)


def use_role(target: type, role: type) -> bool:
    """Merge a tag-tracking role into an existing class or role (see ``uses=``)."""
    return get_service().use_role(target, role)


def apply_role(target: type, role: type) -> bool:
    """Merge a role into an existing class or role (see ``roles=``)."""
    return get_service().apply_role(target, role)
