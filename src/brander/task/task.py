"""Task base class and the closed set of task types"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any

from brander.errors import ConfigError
from brander.util.mapping import trim

if TYPE_CHECKING:
    from brander.config import Config
    from brander.task.context import TaskContext


class TaskType(Enum):
    CLEAN = "clean"
    CONVERT = "convert"
    OPTIMIZE = "optimize"
    PACKAGE = "package"

    def __str__(self) -> str:
        return self.value

    @property
    def output_required(self) -> bool:
        """Whether tasks of this type need an ``output`` configuration."""
        return self in (TaskType.CONVERT, TaskType.PACKAGE)

    @classmethod
    def value_of(cls, name: str) -> TaskType:
        value = trim(name).lower()
        for member in cls:
            if member.value == value:
                return member
        raise ConfigError(f'No TaskType found for name: "{value}"')


class Task(ABC):
    """A unit of asset work for contexts of one ``TaskType``.

    The runner offers every context of the matching type to ``supports()``; a
    task that accepts it is wrapped in ``before``/``after``, with ``after``
    firing even when ``execute`` raises. ``before_all`` and ``after_all`` run
    once per batch.
    """

    name: str = ""

    @abstractmethod
    def get_type(self) -> TaskType:
        """Type of the contexts this task can execute."""

    @abstractmethod
    def supports(self, context: TaskContext) -> bool:
        """Whether this task can execute context."""

    @abstractmethod
    def execute(self, context: TaskContext) -> Any:
        """Execute context; errors propagate to the runner."""

    def before(self, context: TaskContext) -> None:
        pass

    def after(self, context: TaskContext) -> None:
        pass

    def before_all(self, config: Config) -> None:
        pass

    def after_all(self, config: Config) -> None:
        pass

    def __repr__(self) -> str:
        return f"Task({self.name or type(self).__name__}, {self.get_type()})"
