from __future__ import annotations
from pathlib import Path, PurePath
import shutil

from brander.errors import ConfigError


def _glob(pattern: str, cwd: Path) -> list[Path]:
    if PurePath(pattern).is_absolute():
        raise ConfigError(f"Glob patterns must be relative: {pattern}")
    if not cwd.is_dir():
        return []
    return sorted(cwd.glob(pattern))


def find_files(pattern: str, cwd: Path) -> list[Path]:
    """Return files under cwd matching the glob pattern, sorted for a stable order."""
    return [p for p in _glob(pattern, cwd) if p.is_file()]


def find_dirs(pattern: str, cwd: Path) -> list[Path]:
    """Return directories under cwd matching the glob pattern, sorted."""
    return [p for p in _glob(pattern, cwd) if p.is_dir()]


def read_text(path: Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def write_text(path: Path, content: str) -> Path:
    """Write content to path (creating parent dirs), without newline translation."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8", newline="")
    return path


def delete(path: Path) -> None:
    path = Path(path)
    if path.is_dir():
        shutil.rmtree(path)
    elif path.exists():
        path.unlink()
