"""Lossless PNG optimisation with Pillow"""

from __future__ import annotations

import logging

from PIL import Image

from brander.core.file import File
from brander.task.context import TaskContext
from brander.task.task import Task, TaskType

log = logging.getLogger(__name__)

DEFAULT_NAME = "{{ file.base(True) }}.min.png"


class OptimizePngTask(Task):
    name = "optimize-png"

    def get_type(self) -> TaskType:
        return TaskType.OPTIMIZE

    def supports(self, context: TaskContext) -> bool:
        return all(f.format == "png" for f in context.input_files)

    def execute(self, context: TaskContext) -> None:
        for input_file in context.input_files:
            output_file = (
                (context.output_file or File(None, None, None, context.config))
                .defaults(input_file.dir, DEFAULT_NAME, input_file.format)
                .evaluate(file=input_file)
            )
            output_path = output_file.absolute
            output_path.parent.mkdir(parents=True, exist_ok=True)

            log.debug("Optimizing PNG file: %s", input_file.absolute)
            with Image.open(input_file.absolute) as image:
                image.load()
                image.save(output_path, format="PNG", optimize=True)
            log.info("Optimized PNG file: %s -> %s", input_file.relative, output_file.relative)
