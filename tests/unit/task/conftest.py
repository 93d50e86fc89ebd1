"""Task test fixtures: small generated images under tmp_path/assets and a stand-in for cairosvg"""

import io
import sys

import pytest
from PIL import Image

SVG = '<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100"><rect width="100" height="100"/></svg>'


@pytest.fixture(name="make_image")
def make_image_fixture(tmp_path):
    """Create a solid image at assets/<name> and return its path."""
    def _make(name, size=(64, 64), fmt="PNG"):
        path = tmp_path / "assets" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        mode = "RGBA" if fmt == "PNG" else "RGB"
        Image.new(mode, size, "red").save(path, format=fmt)
        return path
    return _make


@pytest.fixture(name="make_svg")
def make_svg_fixture(tmp_path):
    def _make(name):
        path = tmp_path / "assets" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(SVG, encoding="utf-8")
        return path
    return _make


@pytest.fixture(name="svg_renders")
def svg_renders_fixture(monkeypatch):
    """Replace cairosvg with a renderer drawing a solid PNG (100x100 unless sized); returns its calls."""
    calls = []

    class _CairoSvg:
        @staticmethod
        def svg2png(url=None, output_width=None, output_height=None, **_kwargs):
            calls.append((url, output_width, output_height))
            buffer = io.BytesIO()
            Image.new("RGBA", (output_width or 100, output_height or 100), "green").save(buffer, format="PNG")
            return buffer.getvalue()

    monkeypatch.setitem(sys.modules, "cairosvg", _CairoSvg)
    return calls
