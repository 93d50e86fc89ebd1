"""Unit tests for util/color.py"""

import pytest

from brander.errors import ConfigError
from brander.util.color import Color


@pytest.mark.parametrize("value", ["#F00", "f00", "#ff0000", "FF0000"])
def test_hex_forms(value):
    color = Color("hex", "Red", value)
    assert color.rgb == [255, 0, 0]
    assert color.hex == "FF0000"


def test_rgb_conversions():
    color = Color("RGB", "Blue", [0, 0, 255])
    assert color.format == "rgb"
    assert color.hex == "0000FF"
    assert color.hsl == [240, 100, 50]
    assert color.hsv == [240, 100, 100]


def test_hsl_to_rgb():
    color = Color("hsl", None, [120, 100, 50])
    assert color.rgb == [0, 255, 0]
    assert color.hex == "00FF00"
    assert color.name is None


def test_hsv_to_rgb():
    assert Color("hsv", "White", [0, 0, 100]).rgb == [255, 255, 255]


def test_parse_mapping():
    color = Color.parse({"format": "hex", "name": "Grey", "value": "808080"})
    assert color.name == "Grey"
    assert color.rgb == [128, 128, 128]


def test_unsupported_format():
    with pytest.raises(ConfigError, match="Unsupported color format: cmyk"):
        Color("cmyk", "Ink", [0, 0, 0, 100])


@pytest.mark.parametrize("fmt,value", [("hex", "#12345"), ("rgb", [1, 2]), ("hsl", ["a", 1, 2])])
def test_invalid_values(fmt, value):
    with pytest.raises(ConfigError, match="color value"):
        Color(fmt, "Bad", value)


def test_parse_requires_mapping():
    with pytest.raises(ConfigError, match="must be a mapping"):
        Color.parse("#FFF")
