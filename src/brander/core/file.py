"""File descriptor used by document and task contexts"""

from __future__ import annotations

import mimetypes
from pathlib import Path, PurePath
from typing import TYPE_CHECKING, Optional

from brander.util.mapping import trim

if TYPE_CHECKING:
    from brander.config import Config


def derive_format(name: Optional[str], fmt: Optional[str] = None) -> Optional[str]:
    """Return fmt (lower-cased), else the extension of name without the dot, else None."""
    fmt = trim(fmt).lower()
    if not fmt and name:
        fmt = PurePath(name).suffix[1:].lower()
    return fmt or None


class File:
    """A target or source file whose dir and name may still be jinja2 templates.

    ``evaluate()`` renders both once and returns an evaluated copy; input files
    found by globbing are created already evaluated.
    """

    def __init__(self, dir, name: Optional[str], fmt: Optional[str], config: Config, evaluated: bool = False):
        self._dir = str(dir) if dir else None
        self._name = name or None
        self._format = fmt or None
        self._config = config
        self._evaluated = evaluated

    def __repr__(self) -> str:
        return f"File({self._dir!r}, {self._name!r}, {self._format!r})"

    def base(self, exclude_extension: bool = False) -> Optional[str]:
        if not self._name:
            return None
        name = PurePath(self._name).name
        ext = self.extension()
        if exclude_extension and ext and name.endswith(ext):
            return name[: -len(ext)]
        return name

    def extension(self) -> Optional[str]:
        if not self._name:
            return f".{self._format}" if self._format else None
        return PurePath(self._name).suffix or (f".{self._format}" if self._format else None)

    def defaults(self, dir=None, name: Optional[str] = None, fmt: Optional[str] = None) -> File:
        """Copy of this file with missing dir/name/format taken from the arguments (unevaluated)."""
        return File(self._dir or dir, self._name or name, self._format or fmt, self._config)

    def evaluate(self, **data) -> File:
        if self._evaluated:
            return self
        dir = self._config.evaluate(self._dir, **data) if self._dir else None
        name = self._config.evaluate(self._name, **data) if self._name else None
        return File(dir, name, self._format, self._config, evaluated=True)

    @property
    def absolute(self) -> Path:
        return Path(self._dir or self._config.base_dir) / (self._name or "")

    @property
    def relative(self) -> str:
        return self._config.relative(self.absolute)

    @property
    def dir(self) -> Optional[str]:
        return self._dir

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def format(self) -> Optional[str]:
        return self._format

    @property
    def evaluated(self) -> bool:
        return self._evaluated

    @property
    def config(self) -> Config:
        return self._config

    @property
    def mime_type(self) -> Optional[str]:
        ext = self.extension()
        return mimetypes.guess_type(f"file{ext}")[0] if ext else None
