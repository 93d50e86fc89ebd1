"""Packaging tasks: ZIP archives and multi-resolution ICO files"""

from __future__ import annotations

import logging
import zipfile

from PIL import Image

from brander.core.file import File
from brander.task.context import TaskContext
from brander.task.task import Task, TaskType
from brander.util.image import open_image, render_svg, save_ico

log = logging.getLogger(__name__)


def _output_file(context: TaskContext, default_name: str, fmt: str) -> File:
    first = context.input_files[0]
    return context.output_file.defaults(first.dir, default_name, fmt).evaluate(file=first)


class PackageAnyToZipTask(Task):
    """Adds every input file to one ZIP archive, stored under its config-relative path."""

    name = "package-any-to-zip"

    def get_type(self) -> TaskType:
        return TaskType.PACKAGE

    def supports(self, context: TaskContext) -> bool:
        return context.output_file is not None and context.output_file.format == "zip"

    def execute(self, context: TaskContext) -> None:
        input_files = context.input_files
        output_file = _output_file(context, "{{ file.base(True) }}.zip", "zip")
        level = context.option("compression")
        output_path = output_file.absolute
        output_path.parent.mkdir(parents=True, exist_ok=True)

        log.debug("Creating ZIP file: %s", output_path)
        with zipfile.ZipFile(output_path, "w", zipfile.ZIP_DEFLATED, compresslevel=level) as archive:
            for input_file in input_files:
                archive.write(input_file.absolute, arcname=input_file.relative)
        log.info("Packaged %d file(s) into ZIP file: %s", len(input_files), output_file.relative)


class PackagePngToIcoTask(Task):
    """Packs every PNG input into a single ICO, one entry per image size."""

    name = "package-png-to-ico"
    input_format = "png"

    def get_type(self) -> TaskType:
        return TaskType.PACKAGE

    def supports(self, context: TaskContext) -> bool:
        return (
            context.output_file is not None
            and context.output_file.format == "ico"
            and all(f.format == self.input_format for f in context.input_files)
        )

    def execute(self, context: TaskContext) -> None:
        input_files = context.input_files
        output_file = _output_file(context, "{{ file.base(True) }}.ico", "ico")
        output_path = output_file.absolute
        output_path.parent.mkdir(parents=True, exist_ok=True)

        save_ico(output_path, self.load_images(context))
        log.info("Packaged %d %s file(s) into ICO file: %s",
                 len(input_files), self.input_format.upper(), output_file.relative)

    def load_images(self, context: TaskContext) -> list[Image.Image]:
        return [open_image(f.absolute) for f in context.input_files]


class PackageSvgToIcoTask(PackagePngToIcoTask):
    """Rasterizes each SVG input (the Nth at the Nth configured size) into one ICO."""

    name = "package-svg-to-ico"
    input_format = "svg"

    def load_images(self, context: TaskContext) -> list[Image.Image]:
        sizes = context.option("sizes") or []
        return [
            render_svg(f.absolute, sizes[i] if i < len(sizes) else None)
            for i, f in enumerate(context.input_files)
        ]
