"""Image loading helpers shared by the image tasks and the asset-feature document"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence

from PIL import Image, UnidentifiedImageError

from brander.errors import BranderError

if TYPE_CHECKING:
    from brander.task.size import Size

log = logging.getLogger(__name__)


def open_image(path: Path, size: Optional[Size] = None) -> Image.Image:
    """Fully load the raster image at path, resized to size when given."""
    with Image.open(path) as image:
        image.load()
        if size is not None:
            return image.resize((size.width, size.height))
        return image.copy()


def render_svg(path: Path, size: Optional[Size] = None) -> Image.Image:
    """Rasterize the SVG at path with CairoSVG (at its own size unless size is given)."""
    try:
        import cairosvg
    except (ImportError, OSError) as e:
        raise BranderError(f"cairosvg (and the Cairo library) is required to convert SVG assets: {e}") from e

    options = {"output_width": size.width, "output_height": size.height} if size is not None else {}
    log.debug("Rendering SVG file: %s %s", path, size or "")
    data = cairosvg.svg2png(url=str(path), **options)
    image = Image.open(io.BytesIO(data))
    image.load()
    return image


def save_ico(path: Path, images: Sequence[Image.Image]) -> None:
    """Write images into one ICO file, one entry per image size."""
    images = sorted(images, key=lambda im: im.size, reverse=True)
    largest, rest = images[0], images[1:]
    largest.save(path, format="ICO", sizes=[im.size for im in images], append_images=rest)


def image_sizes(path: Path) -> list[tuple[int, int]]:
    """Sizes stored in the image at path, smallest first ([] for formats Pillow can't read, e.g. SVG)."""
    try:
        with Image.open(path) as image:
            sizes = image.info.get("sizes") if image.format == "ICO" else None
            return sorted(sizes or [image.size])
    except UnidentifiedImageError:
        return []
