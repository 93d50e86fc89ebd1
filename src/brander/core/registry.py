"""Type-keyed provider registry with lazily added built-ins"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, Optional, TypeVar

from brander.util.mapping import trim

log = logging.getLogger(__name__)

P = TypeVar("P")


def normalize_type(type_name) -> str:
    return trim(type_name).lower()


class ProviderRegistry(ABC, Generic[P]):
    """Holds at most one provider per key; a later ``add`` replaces the earlier one.

    Built-ins are instantiated from ``builtins`` on the first CRUD call, once per
    registry. Calling ``clear()`` before anything else opts out of them.
    """

    base_class: type = object

    def __init__(self, builtins: Optional[Callable[[], Iterable[type]]] = None):
        self._providers: dict[str, P] = {}
        self._builtins = builtins if builtins is not None else self.default_builtins
        self._builtins_added = False

    @abstractmethod
    def key(self, provider: P) -> str:
        """Registry key for provider."""

    def default_builtins(self) -> Iterable[type]:
        return ()

    def add(self, provider: P) -> None:
        self._add_builtins()
        self._check(provider)
        log.debug("Adding provider: %s", provider)
        self._providers[self.key(provider)] = provider

    def remove(self, provider: P) -> None:
        self._add_builtins()
        log.debug("Removing provider: %s", provider)
        key = self.key(provider)
        if self._providers.get(key) is provider:
            del self._providers[key]

    def get_all(self) -> list[P]:
        self._add_builtins()
        return list(self._providers.values())

    def clear(self) -> None:
        self._builtins_added = True
        log.debug("Removing all providers")
        self._providers.clear()

    def _check(self, provider: P) -> None:
        if not isinstance(provider, self.base_class):
            raise TypeError(f"{provider!r} is not a {self.base_class.__name__} implementation")

    def _add_builtins(self) -> None:
        if self._builtins_added:
            return
        self._builtins_added = True
        for provider_class in self._builtins():
            provider = provider_class()
            self._check(provider)
            log.debug("Adding internal provider: %s", provider)
            self._providers[self.key(provider)] = provider
