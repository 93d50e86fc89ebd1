"""Root test configuration: config factory, isolated registries and logging reset"""

import logging

import pytest
import yaml

from brander.config import Config, load_config
from brander.doc.parser import DocumentContextParser
from brander.doc.registry import DocumentRegistry
from brander.task.registry import TaskRegistry


@pytest.fixture(autouse=True)
def no_git(monkeypatch):
    """Never shell out to git; documents link to plain relative paths unless configured."""
    monkeypatch.setattr("brander.config.resolve_remote_url", lambda _dir: None)


@pytest.fixture(autouse=True)
def reset_brander_logger():
    """Undo setup_logging() so caplog keeps seeing brander records in later tests."""
    yield
    logger = logging.getLogger("brander")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture(name="make_config")
def make_config_fixture(tmp_path):
    """Write a .branderrc.yaml into tmp_path and load it; options default to LF line endings."""
    def _make(docs=None, tasks=None, options=None, **fields) -> Config:
        data = {"name": "demo", **fields}
        data["options"] = {"lineSeparator": "lf", **(options or {})}
        if docs is not None:
            data["docs"] = docs
        if tasks is not None:
            data["tasks"] = tasks
        path = tmp_path / ".branderrc.yaml"
        path.write_text(yaml.safe_dump(data, sort_keys=False))
        return load_config(path, base_dir=tmp_path)
    return _make


@pytest.fixture(name="document_registry")
def document_registry_fixture():
    return DocumentRegistry()


@pytest.fixture(name="task_registry")
def task_registry_fixture():
    return TaskRegistry()


@pytest.fixture(name="parse_docs")
def parse_docs_fixture(document_registry):
    """Parse config.docs into root document trees using the isolated registry."""
    def _parse(config: Config) -> list:
        return DocumentContextParser(config.docs, config, "root", registry=document_registry).parse_remaining()
    return _parse
