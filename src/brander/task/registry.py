"""Task registry: built-in and custom tasks grouped by TaskType"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable

from brander.core.registry import ProviderRegistry, normalize_type
from brander.task.task import Task, TaskType


def builtin_tasks() -> Iterable[type]:
    from brander.task.tasks.clean import CleanAnyTask
    from brander.task.tasks.convert import ConvertImageTask, ConvertSvgTask
    from brander.task.tasks.optimize import OptimizePngTask
    from brander.task.tasks.package import PackageAnyToZipTask, PackagePngToIcoTask, PackageSvgToIcoTask

    return (
        CleanAnyTask,
        ConvertImageTask,
        ConvertSvgTask,
        OptimizePngTask,
        PackageAnyToZipTask,
        PackagePngToIcoTask,
        PackageSvgToIcoTask,
    )


class TaskRegistry(ProviderRegistry[Task]):
    """Tasks keyed by name; several tasks may share a TaskType and are tried in registration order."""

    base_class = Task

    def key(self, task: Task) -> str:
        return normalize_type(task.name or type(task).__name__)

    def default_builtins(self) -> Iterable[type]:
        return builtin_tasks()

    def _check(self, task: Task) -> None:
        super()._check(task)
        if not isinstance(task.get_type(), TaskType):
            raise TypeError(f"{task!r}.get_type() did not return a TaskType")

    def find_by_type(self, task_type: TaskType) -> list[Task]:
        if not isinstance(task_type, TaskType):
            raise TypeError(f"{task_type!r} is not a TaskType")
        self._add_builtins()
        return [t for t in self._providers.values() if t.get_type() is task_type]

    def remove_by_type(self, task_type: TaskType) -> None:
        for task in self.find_by_type(task_type):
            del self._providers[self.key(task)]


@lru_cache(maxsize=None)
def get_task_registry() -> TaskRegistry:
    """The process-wide task registry."""
    return TaskRegistry()
