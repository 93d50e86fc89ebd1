"""Removes every input file"""

from __future__ import annotations

import logging

from brander.task.context import TaskContext
from brander.task.task import Task, TaskType
from brander.util.fs import delete

log = logging.getLogger(__name__)


class CleanAnyTask(Task):
    name = "clean-any"

    def get_type(self) -> TaskType:
        return TaskType.CLEAN

    def supports(self, context: TaskContext) -> bool:
        return True

    def execute(self, context: TaskContext) -> None:
        for input_file in context.input_files:
            log.debug("Removing file: %s", input_file.absolute)
            delete(input_file.absolute)
            log.info("Cleaned file: %s", input_file.relative)
