"""Configuration: settings schema, .branderrc loader and the runtime Config object"""

import copy
import os
from functools import cached_property
from pathlib import Path
from typing import Any, Optional

import yaml
from jinja2 import Environment, StrictUndefined, TemplateError
from pydantic import BaseModel, Field, ValidationError

from brander.core.scope import Scope
from brander.errors import ConfigError
from brander.util.git import file_url, hosted_info, resolve_remote_url
from brander.util.mapping import get_path, trim


CONFIG_FILES = (".branderrc", ".branderrc.yaml", ".branderrc.yml", ".branderrc.json")
ENV_FIELDS = ("name", "title", "email", "homepage", "repository")

_env = Environment(undefined=StrictUndefined, keep_trailing_newline=True, autoescape=False)


class Settings(BaseModel):
    name:       Optional[str] = None
    title:      Optional[str] = None
    email:      Optional[str] = None
    homepage:   Optional[str] = None
    repository: Optional[str] = Field(default=None, description="Repository URL; resolved from git when unset")
    options:    dict[str, Any] = Field(default_factory=dict, description="assets.*, docs.*, lineSeparator")
    docs:       list[Any] = Field(default_factory=list, description="Root document entries")
    tasks:      list[Any] = Field(default_factory=list, description="Asset task entries")


class Config:
    """Runtime view of a loaded configuration file, shared by every context of a run."""

    def __init__(self, settings: Settings, file_path: Path):
        self._settings = settings
        self._file_path = Path(file_path).resolve()
        self._base_dir = self._file_path.parent
        self._scope = Scope()

        separator = trim(self.option("lineSeparator")).lower()
        self._line_separator = {"crlf": "\r\n", "lf": "\n"}.get(separator, os.linesep)

    def __repr__(self) -> str:
        return f"Config({self.name})"

    def option(self, name: str, default: Any = None) -> Any:
        return get_path(self._settings.options, name, default)

    def resolve(self, *paths) -> Path:
        """Resolve paths against the directory holding the configuration file."""
        return self._base_dir.joinpath(*[str(p) for p in paths]).resolve()

    def relative(self, path) -> str:
        return Path(os.path.relpath(Path(path).resolve(), self._base_dir)).as_posix()

    def evaluate(self, template: Any, **data) -> str:
        """Render template with jinja2; ``config`` and ``eol`` are always available."""
        if template is None:
            return ""
        context = {"config": self, "eol": self._line_separator, **data}
        try:
            return _env.from_string(str(template)).render(context)
        except TemplateError as e:
            raise ConfigError(f"Unable to evaluate expression {template!r}: {e}") from e

    def asset_path(self, *paths) -> Path:
        """Resolve paths against the assets directory."""
        return self.resolve(self.assets_dir, *paths)

    def doc_url(self, paths, fragment: str | None = None) -> str:
        """URL of a generated document (relative to the config dir), with optional fragment."""
        path = _join_url_path(paths)
        template = self.option("docs.url")
        if template:
            return self.evaluate(template, file=path, fragment=fragment)
        hosted = file_url(self.repository, path, fragment) if self.repository else None
        if hosted:
            return hosted
        return f"{path}#{fragment}" if fragment else path

    def asset_url(self, paths) -> str:
        path = _join_url_path(paths)
        template = self.option("assets.url")
        if template:
            return self.evaluate(template, file=path)
        hosted = file_url(self.repository, path, raw=True) if self.repository else None
        return hosted or path

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    @property
    def scope(self) -> Scope:
        return self._scope

    @property
    def line_separator(self) -> str:
        return self._line_separator

    @property
    def assets_dir(self) -> str:
        return self.option("assets.dir", "assets")

    @property
    def docs_dir(self) -> str:
        return self.option("docs.dir", "docs")

    @cached_property
    def repository(self) -> str | None:
        return trim(self._settings.repository) or resolve_remote_url(self._base_dir)

    @property
    def name(self) -> str:
        if trim(self._settings.name):
            return trim(self._settings.name)
        info = hosted_info(self.repository) if self.repository else None
        return info[0].rsplit("/", 1)[-1] if info else self._base_dir.name

    @property
    def title(self) -> str:
        return trim(self._settings.title) or self.name

    @property
    def email(self) -> str | None:
        return trim(self._settings.email) or None

    @property
    def homepage(self) -> str | None:
        if trim(self._settings.homepage):
            return trim(self._settings.homepage)
        info = hosted_info(self.repository) if self.repository else None
        return info[0] if info else None

    @property
    def docs(self) -> list:
        """Deep copy of the root document entries."""
        return copy.deepcopy(self._settings.docs)

    @property
    def tasks(self) -> list:
        """Deep copy of the task entries."""
        return copy.deepcopy(self._settings.tasks)


def _join_url_path(paths) -> str:
    if isinstance(paths, (str, Path)):
        paths = [paths]
    path = "/".join(str(p).replace("\\", "/") for p in paths)
    return path[1:] if path.startswith("/") else path


def find_config_file(base_dir: Path) -> Path | None:
    """Return the first known configuration file name present in base_dir."""
    for name in CONFIG_FILES:
        candidate = base_dir / name
        if candidate.is_file():
            return candidate
    return None


def load_settings(path: Path, overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from path, then BRANDER_<FIELD> env vars, then non-None overrides."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid {path.name}: {e}") from e
    if not data:
        raise ConfigError(f"Configuration file contains no data: {path}")
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")

    for name in ENV_FIELDS:
        if val := os.getenv(f"BRANDER_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    for key in ("docs", "tasks"):
        if data.get(key) is None:
            data.pop(key, None)
        elif not isinstance(data[key], list):
            raise ConfigError(f'"{key}" configuration can only be a list')
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid {path.name}: {e}") from e


def load_config(path: str | Path = None, base_dir: Path = None, overrides: dict[str, Any] = None) -> Config:
    """Find (when path is None) and load a configuration file into a Config."""
    base_dir = Path(base_dir) if base_dir else Path.cwd()
    if path is None:
        found = find_config_file(base_dir)
        if found is None:
            raise ConfigError("Unable to find configuration file!")
        path = found
    path = (base_dir / path).resolve()
    if not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}")
    return Config(load_settings(path, overrides), path)
