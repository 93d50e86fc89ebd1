"""Image size values used by the ``sizes`` task option"""

from __future__ import annotations

import re
from dataclasses import dataclass

from brander.errors import ConfigError


SIZE_RE = re.compile(r"^\s*(\d+)\s*(?:[xX]\s*(\d+))?\s*$")


@dataclass(frozen=True)
class Size:
    width:  int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"

    @classmethod
    def parse(cls, value) -> Size:
        """Parse ``"16x32"``, ``"16"``/``16`` (square) or ``{"width", "height"}``."""
        if isinstance(value, Size):
            return value
        if isinstance(value, dict):
            try:
                return cls(int(value["width"]), int(value.get("height", value["width"])))
            except (KeyError, TypeError, ValueError) as e:
                raise ConfigError(f"Invalid size: {value!r}") from e
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value, value)
        m = SIZE_RE.match(str(value))
        if not m:
            raise ConfigError(f"Invalid size: {value!r}")
        width = int(m.group(1))
        return cls(width, int(m.group(2) or width))
