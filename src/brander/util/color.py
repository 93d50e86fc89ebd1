"""Color values for the color-table document, convertible between hex, rgb, hsl and hsv"""

from __future__ import annotations

import colorsys
import re
from typing import Any, Optional

from brander.errors import ConfigError
from brander.util.mapping import trim

HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
FORMATS = ("hex", "rgb", "hsl", "hsv")


class Color:
    """A named color; ``hex``, ``rgb``, ``hsl`` and ``hsv`` convert it on access.

    ``hex`` is six upper-case digits without ``#``; the others are lists of ints
    (rgb 0-255, hue in degrees, saturation/lightness/value in percent).
    """

    def __init__(self, format: str, name: Optional[str], value: Any):
        self._format = trim(format).lower()
        if self._format not in FORMATS:
            raise ConfigError(f"Unsupported color format: {self._format or format!r}")
        self._name = trim(name) or None
        self._value = value
        self._rgb = self._to_rgb(self._format, value)

    def __repr__(self) -> str:
        return f"Color({self._format!r}, {self._name!r}, {self._value!r})"

    @classmethod
    def parse(cls, data: Any) -> Color:
        if not isinstance(data, dict):
            raise ConfigError(f"Color configuration must be a mapping: {data!r}")
        return cls(data.get("format"), data.get("name"), data.get("value"))

    @property
    def format(self) -> str:
        return self._format

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def value(self) -> Any:
        return self._value

    @property
    def rgb(self) -> list[int]:
        return list(self._rgb)

    @property
    def hex(self) -> str:
        return "".join(f"{c:02X}" for c in self._rgb)

    @property
    def hsl(self) -> list[int]:
        h, l, s = colorsys.rgb_to_hls(*(c / 255 for c in self._rgb))
        return [round(h * 360), round(s * 100), round(l * 100)]

    @property
    def hsv(self) -> list[int]:
        h, s, v = colorsys.rgb_to_hsv(*(c / 255 for c in self._rgb))
        return [round(h * 360), round(s * 100), round(v * 100)]

    @staticmethod
    def _to_rgb(fmt: str, value: Any) -> tuple[int, int, int]:
        if fmt == "hex":
            m = HEX_RE.match(trim(value))
            if not m:
                raise ConfigError(f"Invalid hex color value: {value!r}")
            digits = m.group(1)
            if len(digits) == 3:
                digits = "".join(d * 2 for d in digits)
            return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))

        if not isinstance(value, (list, tuple)) or len(value) != 3:
            raise ConfigError(f"Invalid {fmt} color value, expected 3 numbers: {value!r}")
        try:
            a, b, c = (float(v) for v in value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid {fmt} color value: {value!r}") from e
        if fmt == "rgb":
            channels = (a / 255, b / 255, c / 255)
        elif fmt == "hsl":
            channels = colorsys.hls_to_rgb(a / 360, c / 100, b / 100)
        else:
            channels = colorsys.hsv_to_rgb(a / 360, b / 100, c / 100)
        return tuple(max(0, min(255, round(x * 255))) for x in channels)
