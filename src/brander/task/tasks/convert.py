"""Image conversion: raster inputs with Pillow, SVG inputs rasterized with CairoSVG"""

from __future__ import annotations

import logging
from typing import Optional

from PIL import Image

from brander.core.file import File
from brander.task.context import TaskContext
from brander.task.size import Size
from brander.task.task import Task, TaskType
from brander.util.image import open_image, render_svg

log = logging.getLogger(__name__)

INPUT_FORMATS = {"png", "jpg", "jpeg", "gif", "bmp", "webp"}
# output format -> Pillow format name
OUTPUT_FORMATS = {
    "png": "PNG",
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "gif": "GIF",
    "bmp": "BMP",
    "webp": "WEBP",
    "ico": "ICO",
}
DEFAULT_NAME = "{{ file.base(True) }}{{ '-' ~ size if size else '' }}.{{ format }}"


class ConvertImageTask(Task):
    """Converts each raster input into the output format, once per configured size.

    ICO outputs embed every configured size in a single file instead.
    """

    name = "convert-image"
    input_formats = INPUT_FORMATS

    def get_type(self) -> TaskType:
        return TaskType.CONVERT

    def supports(self, context: TaskContext) -> bool:
        output = context.output_file
        return (
            output is not None
            and output.format in OUTPUT_FORMATS
            and all(f.format in self.input_formats for f in context.input_files)
        )

    def execute(self, context: TaskContext) -> None:
        sizes: list[Size] = context.option("sizes") or []
        fmt = context.output_file.format
        for input_file in context.input_files:
            if not sizes or fmt == "ico":
                self._convert(context, input_file, None, sizes)
            else:
                for size in sizes:
                    self._convert(context, input_file, size, sizes)

    def load(self, input_file: File, size: Optional[Size]) -> Image.Image:
        return open_image(input_file.absolute, size)

    def _convert(self, context: TaskContext, input_file: File, size: Optional[Size], sizes: list[Size]) -> None:
        fmt = context.output_file.format
        output_file = (
            context.output_file
            .defaults(input_file.dir, DEFAULT_NAME, fmt)
            .evaluate(file=input_file, size=size, format=fmt)
        )
        output_path = output_file.absolute
        output_path.parent.mkdir(parents=True, exist_ok=True)

        log.debug("Converting %s to %s", input_file.absolute, output_path)
        if fmt == "ico" and sizes:
            # render once at the largest size; Pillow scales down for the other entries
            image = self.load(input_file, max(sizes, key=lambda s: (s.width * s.height, s.width)))
            image.save(output_path, format="ICO", sizes=[(s.width, s.height) for s in sizes])
        else:
            image = self.load(input_file, size)
            if OUTPUT_FORMATS[fmt] == "JPEG" and image.mode != "RGB":
                image = image.convert("RGB")
            image.save(output_path, format=OUTPUT_FORMATS[fmt])
        log.info("Converted %s file: %s -> %s", input_file.format, input_file.relative, output_file.relative)


class ConvertSvgTask(ConvertImageTask):
    """Rasterizes SVG inputs at each configured size, then saves them like ``convert-image``."""

    name = "convert-svg"
    input_formats = {"svg"}

    def load(self, input_file: File, size: Optional[Size]) -> Image.Image:
        return render_svg(input_file.absolute, size)
