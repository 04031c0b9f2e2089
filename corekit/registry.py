"""
Named-instance registry.

Indexes a sequence of objects by their ``name`` attribute so callers can fetch
them back by a unique, non-empty name. Objects without a name are named after
their type; clashing names are disambiguated with an increasing numeric suffix
(``reader``, ``reader1``, ``reader2``, ...).

Construction writes the resolved name back onto each object. After that the
index is fixed: there is no way to add or remove entries, so a registry can be
shared freely between threads.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Container, Generic, Iterable, Iterator, Optional, Protocol, TypeVar

from .errors import InstanceNotFoundError

logger = logging.getLogger(__name__)


class NamedInstance(Protocol):
    name: Optional[str]


T = TypeVar("T", bound=NamedInstance)


def _base_name(instance: NamedInstance) -> str:
    return getattr(instance, "name", None) or instance.__class__.__name__


def _claim(base: str, claimed: Container[str]) -> str:
    if base not in claimed:
        return base
    counter = 1
    candidate = f"{base}{counter}"
    while candidate in claimed:
        counter += 1
        candidate = f"{base}{counter}"
    return candidate


class NamedInstanceRegistry(Mapping[str, T], Generic[T]):
    """
    Immutable name -> instance index.

    Building the registry mutates the supplied instances: any instance whose
    name was empty or already taken has its ``name`` replaced with the name it
    was indexed under.
    """

    def __init__(self, instances: Iterable[T] = ()) -> None:
        index: dict[str, T] = {}
        for instance in instances:
            declared = getattr(instance, "name", None)
            resolved = _claim(_base_name(instance), index)
            if resolved != declared:
                logger.debug(
                    "Renamed %s instance %r -> %r",
                    instance.__class__.__name__,
                    declared,
                    resolved,
                )
                instance.name = resolved
            index[resolved] = instance
        self._index = index
        self._view = MappingProxyType(index)

    def lookup(self, name: str) -> T:
        if not name:
            raise InstanceNotFoundError(name)
        try:
            return self._index[name]
        except KeyError:
            raise InstanceNotFoundError(name) from None

    def try_lookup(self, name: str) -> tuple[Optional[T], bool]:
        if not name:
            return None, False
        if name not in self._index:
            return None, False
        return self._index[name], True

    def count(self) -> int:
        return len(self._index)

    def names(self) -> list[str]:
        return list(self._index)

    @property
    def clients(self) -> Mapping[str, T]:
        """Read-only view of the whole index, in input order."""
        return self._view

    def __getitem__(self, name: str) -> T:
        return self.lookup(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and bool(name) and name in self._index

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.names()!r})"
