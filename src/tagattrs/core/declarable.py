"""
Minimal attribute-declaring object system that tag tracking plugs into.

Provides declared attributes (``attribute()`` in a class body, or ``has()`` afterwards),
per-class declaration hooks fired on every declaration, and role merging. Inheritance is
plain Python inheritance; ``__mro__`` is the linearized lookup order.
"""

from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any

from tagattrs.utils.validation import validate_attribute_names

DeclarationHook = Callable[[type, tuple[str, ...], Mapping[str, Any]], None]


class _Nothing:
    """Sentinel for an attribute without a default."""

    def __repr__(self) -> str:
        return "NOTHING"

    def __bool__(self) -> bool:
        return False


NOTHING = _Nothing()


class Attribute:
    """
    Data descriptor for a declared attribute.

    Parameters
    ----------
    options : Mapping[str, Any]
        Declaration options. ``default`` is understood by the descriptor; every other
        key is kept verbatim for declaration hooks and introspection.
    """

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self.options = MappingProxyType(dict(options or {}))
        self.name = ""
        self.owner: type | None = None

    @property
    def default(self) -> Any:
        return self.options.get("default", NOTHING)

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.owner = owner

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        try:
            return instance.__dict__[self.name]
        except KeyError:
            if self.default is NOTHING:
                raise AttributeError(f"{type(instance).__name__!r} object has no value for {self.name!r}") from None
            return self.default

    def __set__(self, instance: Any, value: Any) -> None:
        instance.__dict__[self.name] = value

    def __delete__(self, instance: Any) -> None:
        instance.__dict__.pop(self.name, None)

    def copy(self) -> "Attribute":
        return type(self)(self.options)

    def __repr__(self) -> str:
        return f"Attribute(name={self.name!r}, options={dict(self.options)!r})"


def attribute(**options: Any) -> Attribute:
    """Declare an attribute in a class body; keyword options are passed to hooks."""
    return Attribute(options)


class Declarable:
    """
    Base for classes and roles that declare attributes.

    Each subclass owns three structures, none of which are inherited:

    - ``__attributes__``: attributes declared on or merged into the class,
    - ``__roles__``: roles merged into the class, in merge order,
    - ``__declaration_hooks__``: callables fired after each declaration.

    Class-body attributes are declared only after :meth:`_compose` has run, so
    composition keywords take effect before the body's own declarations.
    """

    __attributes__: dict[str, Attribute] = {}
    __roles__: list[type] = []
    __declaration_hooks__: list[DeclarationHook] = []

    def __init_subclass__(cls, **kwargs: Any) -> None:
        body = [(name, value) for name, value in vars(cls).items() if isinstance(value, Attribute)]
        super().__init_subclass__()

        cls.__attributes__ = {}
        cls.__roles__ = []
        cls.__declaration_hooks__ = []

        cls._compose(**kwargs)

        for name, attr in body:
            _install(cls, name, attr)
            _notify(cls, (name,), attr.options)

    @classmethod
    def _compose(cls, roles: Iterable[type] = (), **kwargs: Any) -> None:
        """Handle class keywords; subclasses extend this with their own keywords."""
        if kwargs:
            raise TypeError(f"{cls.__name__}: unexpected class keyword(s): {', '.join(sorted(kwargs))}")
        for role in roles:
            merge_role(cls, role)


def is_declarable(target: Any) -> bool:
    """Return True if ``target`` is a class that supports attribute declaration hooks."""
    return isinstance(target, type) and issubclass(target, Declarable) and target is not Declarable


def is_role(target: Any) -> bool:
    """Return True if ``target`` is a role class (see :class:`tagattrs.core.objects.Role`)."""
    return is_declarable(target) and getattr(target, "__is_role__", False) is True and "__is_role__" not in vars(target)


def attributes(cls: type) -> dict[str, Attribute]:
    """Collect all attributes visible on ``cls``, most specific declaration last."""
    found: dict[str, Attribute] = {}
    for klass in reversed(cls.__mro__):
        found.update(vars(klass).get("__attributes__", {}))
    return found


def add_declaration_hook(target: type, hook: DeclarationHook) -> None:
    """Register ``hook`` to run after every later declaration on ``target`` itself."""
    target.__declaration_hooks__.append(hook)


def _install(target: type, name: str, attr: Attribute) -> None:
    attr.__set_name__(target, name)
    setattr(target, name, attr)
    target.__attributes__[name] = attr


def _notify(target: type, names: tuple[str, ...], options: Mapping[str, Any]) -> None:
    for hook in list(target.__declaration_hooks__):
        hook(target, names, options)


def has(target: type, names: str | Iterable[str], **options: Any) -> tuple[Attribute, ...]:
    """
    Declare one or more attributes on ``target`` with shared options.

    Parameters
    ----------
    target : type
        Declarable class or role.
    names : str or iterable of str
        Attribute name(s). All of them receive the same options and the declaration
        hooks see them as a single declaration.
    **options
        Declaration options (``default`` plus arbitrary keys such as tag names).

    Returns
    -------
    tuple[Attribute, ...]
        The installed descriptors, in name order.
    """
    if not is_declarable(target):
        raise TypeError(f"Cannot declare attributes on {target!r}: not a declarable class")

    names = validate_attribute_names(names)
    installed = []
    for name in names:
        attr = Attribute(options)
        _install(target, name, attr)
        installed.append(attr)

    _notify(target, names, installed[0].options)
    return tuple(installed)


def merge_role(target: type, role: type) -> bool:
    """
    Copy a role's attributes and public methods into ``target``.

    Members the target defines itself win over the role's. Merging a role twice into the
    same target is a no-op. Declaration hooks are not fired.

    Returns
    -------
    bool
        True if the role was merged, False if it already had been.
    """
    if not is_declarable(target):
        raise TypeError(f"Cannot merge roles into {target!r}: not a declarable class")
    if not is_role(role):
        raise TypeError(f"{getattr(role, '__name__', role)!r} is not a role")
    if role in target.__roles__:
        return False

    own = set(vars(target))
    for name, attr in attributes(role).items():
        if name not in own:
            _install(target, name, attr.copy())

    for klass in reversed(role.__mro__):
        if not is_role(klass):
            continue
        for name, value in vars(klass).items():
            if name.startswith("__") or isinstance(value, Attribute) or name in own:
                continue
            if callable(value) or isinstance(value, (property, classmethod, staticmethod)):
                setattr(target, name, value)

    target.__roles__.append(role)
    return True
