"""Unit tests for the built-in tasks, run end to end through parser and runner"""

import zipfile

from PIL import Image

from brander.task.parser import TaskContextParser, TaskContextRunner


def _run(config):
    contexts = TaskContextParser(config.tasks, config).parse_remaining()
    TaskContextRunner(contexts, config).run()
    return contexts


def test_clean_any(make_config, make_image, tmp_path):
    make_image("old/a.png")
    make_image("old/b.png")
    make_image("keep.png")
    _run(make_config(tasks=[{"type": "clean", "input": "old/*.png"}]))
    assert not (tmp_path / "assets" / "old" / "a.png").exists()
    assert not (tmp_path / "assets" / "old" / "b.png").exists()
    assert (tmp_path / "assets" / "keep.png").exists()


def test_convert_image_per_size(make_config, make_image, tmp_path):
    make_image("logo.png")
    _run(make_config(tasks=[{
        "type": "convert",
        "input": "logo.png",
        "output": {"dir": "png", "format": "png"},
        "options": {"sizes": ["16x16", 32]},
    }]))
    for name, size in (("logo-16x16.png", (16, 16)), ("logo-32x32.png", (32, 32))):
        with Image.open(tmp_path / "assets" / "png" / name) as image:
            assert image.size == size


def test_convert_image_to_jpeg_without_sizes(make_config, make_image, tmp_path):
    make_image("logo.png", size=(20, 10))
    _run(make_config(tasks=[{"type": "convert", "input": "logo.png", "output": "logo.jpg"}]))
    with Image.open(tmp_path / "assets" / "logo.jpg") as image:
        assert image.format == "JPEG"
        assert image.size == (20, 10)


def test_convert_image_to_ico_embeds_sizes(make_config, make_image, tmp_path):
    make_image("logo.png")
    _run(make_config(tasks=[{
        "type": "convert", "input": "logo.png", "output": "favicon.ico",
        "options": {"sizes": ["16", "32"]},
    }]))
    with Image.open(tmp_path / "assets" / "favicon.ico") as image:
        assert image.format == "ICO"
        assert {(16, 16), (32, 32)} <= set(image.info["sizes"])


def test_optimize_png_default_name(make_config, make_image, tmp_path):
    make_image("logo.png")
    _run(make_config(tasks=[{"type": "optimize", "input": "logo.png"}]))
    with Image.open(tmp_path / "assets" / "logo.min.png") as image:
        assert image.format == "PNG"
        assert image.size == (64, 64)


def test_package_any_to_zip(make_config, make_image, tmp_path):
    make_image("logo.png")
    make_image("icon.png")
    _run(make_config(tasks=[{"type": "package", "input": "*.png", "output": "dist/brand.zip"}]))
    with zipfile.ZipFile(tmp_path / "assets" / "dist" / "brand.zip") as archive:
        assert sorted(archive.namelist()) == ["assets/icon.png", "assets/logo.png"]


def test_package_png_to_ico(make_config, make_image, tmp_path):
    make_image("icon-16.png", size=(16, 16))
    make_image("icon-32.png", size=(32, 32))
    _run(make_config(tasks=[{"type": "package", "input": "icon-*.png", "output": "favicon.ico"}]))
    with Image.open(tmp_path / "assets" / "favicon.ico") as image:
        assert image.format == "ICO"
        assert {(16, 16), (32, 32)} <= set(image.info["sizes"])
