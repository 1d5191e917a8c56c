"""
Read-only mapping used for every structure the tag cache hands out.

A plain ``MappingProxyType`` already rejects item assignment, but with a generic
``TypeError`` and without covering the ``dict`` mutator methods callers tend to try.
LockedMapping fails every mutation with a :class:`LockedError` naming the structure.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from tagattrs.exceptions import LockedError


class LockedMapping(Mapping):
    """
    Immutable mapping view over a private copy of its input.

    Parameters
    ----------
    data : Mapping or iterable of pairs, optional
        Initial contents. The mapping is copied; later changes to ``data`` are not seen.
    name : str, optional
        Label used in error messages (defaults to the class name).
    """

    __slots__ = ("_data", "_name")

    def __init__(self, data: Any = (), name: str = "") -> None:
        self._data = MappingProxyType(dict(data))
        self._name = name or type(self).__name__

    def __getitem__(self, key: Any) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._data)!r})"

    def _locked(self, *args: Any, **kwargs: Any) -> None:
        raise LockedError(f"{self._name} is locked and cannot be modified")

    __setitem__ = _locked
    __delitem__ = _locked
    __ior__ = _locked
    clear = _locked
    pop = _locked
    popitem = _locked
    setdefault = _locked
    update = _locked
