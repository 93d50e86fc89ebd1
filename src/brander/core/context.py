"""Context base types and the sequential parse/run machinery shared by documents and tasks.

A run is split in two phases. A ``ContextParser`` turns configuration entries
into contexts, one entry per ``parse_next()`` call; a ``ContextRunner`` then
executes already-parsed contexts strictly in order. Later contexts may rely on
side effects of earlier ones (e.g. a table of contents reading sibling titles),
so nothing here runs in parallel.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, Sequence, TypeVar

from brander.util.mapping import get_path

if TYPE_CHECKING:
    from brander.config import Config

log = logging.getLogger(__name__)

C = TypeVar("C", bound="Context")


class Context:
    """A parsed unit of configuration data bound to the shared Config."""

    def __init__(self, type: Any, data: dict, config: Config):
        self._type = type
        self._data = data if data is not None else {}
        self._config = config

    def get(self, name: str, default: Any = None) -> Any:
        """Read a (dotted) field from this context's configuration data."""
        return get_path(self._data, name, default)

    @property
    def type(self) -> Any:
        return self._type

    @property
    def data(self) -> dict:
        """Deep copy of the configuration data this context was built from."""
        return copy.deepcopy(self._data)

    @property
    def config(self) -> Config:
        return self._config


@dataclass(frozen=True)
class ParsedEvent(Generic[C]):
    """Payload passed to ``on_parsed`` after each configuration entry is parsed."""
    contexts: list[C]
    data:     Any
    index:    int


class ContextParser(ABC, Generic[C]):
    """Iterates over an ordered data set, turning each entry into zero or more contexts."""

    def __init__(
        self,
        data_set: Sequence,
        config: Config,
        on_parsed: Optional[Callable[[ParsedEvent[C]], None]] = None,
        on_reset: Optional[Callable[[], None]] = None,
        ):
        self._data_set = list(data_set or [])
        self._config = config
        self._index = 0
        self._on_parsed = on_parsed
        self._on_reset = on_reset

    @abstractmethod
    def parse_data(self, data: Any, index: int) -> list[C]:
        """Create the contexts for a single, non-empty (deep copied) data entry."""

    def parse_next(self) -> list[C] | None:
        """Parse the entry at the cursor; None once the data set is exhausted.

        An empty entry still advances the cursor and yields an empty list.
        """
        if self._index >= len(self._data_set):
            log.debug("No more data to be parsed")
            return None
        index = self._index
        self._index += 1

        data = copy.deepcopy(self._data_set[index])
        if not data:
            log.debug("No data found at index: %d", index)
            return []

        log.debug("Creating context for data at index: %d", index)
        contexts = list(self.parse_data(data, index))
        if self._on_parsed:
            self._on_parsed(ParsedEvent(contexts, data, index))
        log.debug("%d context(s) created for data at index: %d", len(contexts), index)
        return contexts

    def parse_remaining(self) -> list[C]:
        """Parse every entry left after the cursor into one flat, ordered list."""
        results: list[C] = []
        while (contexts := self.parse_next()) is not None:
            results.extend(contexts)
        return results

    def reset(self) -> None:
        self._index = 0
        if self._on_reset:
            self._on_reset()

    @property
    def config(self) -> Config:
        return self._config

    @property
    def index(self) -> int:
        return self._index


class ContextRunner(ABC, Generic[C]):
    """Runs parsed contexts one after another and collects their results in order."""

    def __init__(
        self,
        contexts: Sequence[C],
        config: Config,
        on_ran: Optional[Callable[[C, Any], None]] = None,
        ):
        self._contexts = list(contexts)
        self._config = config
        self._on_ran = on_ran

    @abstractmethod
    def run_context(self, context: C) -> Any:
        """Run a single context and return its result."""

    def run(self) -> list:
        results = []
        for context in self._contexts:
            result = self.run_context(context)
            if self._on_ran:
                self._on_ran(context, result)
            results.append(result)
        return results

    @property
    def config(self) -> Config:
        return self._config

    @property
    def contexts(self) -> list[C]:
        return list(self._contexts)
