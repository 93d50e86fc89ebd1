"""Unit tests for config.py"""

import os
from pathlib import Path

import pytest

from brander.config import find_config_file, load_config
from brander.errors import ConfigError


def test_load_config_finds_branderrc(tmp_path):
    """load_config picks up .branderrc.yaml from base_dir when no path is given."""
    (tmp_path / ".branderrc.yaml").write_text("name: acme\n")
    config = load_config(base_dir=tmp_path)
    assert config.name == "acme"
    assert config.base_dir == tmp_path.resolve()


def test_load_config_accepts_json(tmp_path):
    """JSON configuration files are parsed as YAML."""
    (tmp_path / ".branderrc.json").write_text('{"name": "acme", "docs": [{"doc": "README.md"}]}')
    config = load_config(base_dir=tmp_path)
    assert config.docs == [{"doc": "README.md"}]


def test_find_config_file_prefers_first_known_name(tmp_path):
    (tmp_path / ".branderrc.yml").write_text("name: b\n")
    (tmp_path / ".branderrc").write_text("name: a\n")
    assert find_config_file(tmp_path) == tmp_path / ".branderrc"


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="Unable to find configuration file"):
        load_config(base_dir=tmp_path)


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ConfigError when the file contains invalid YAML."""
    (tmp_path / ".branderrc.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ConfigError, match="Invalid .branderrc.yaml"):
        load_config(base_dir=tmp_path)


def test_load_config_empty_file(tmp_path):
    (tmp_path / ".branderrc.yaml").write_text("")
    with pytest.raises(ConfigError, match="contains no data"):
        load_config(base_dir=tmp_path)


def test_load_config_docs_must_be_list(tmp_path):
    (tmp_path / ".branderrc.yaml").write_text("docs:\n  doc: README.md\n")
    with pytest.raises(ConfigError, match='"docs" configuration can only be a list'):
        load_config(base_dir=tmp_path)


def test_load_config_env_overrides_file(tmp_path, monkeypatch):
    """BRANDER_TITLE takes precedence over the file's title."""
    (tmp_path / ".branderrc.yaml").write_text("name: acme\ntitle: File Title\n")
    monkeypatch.setenv("BRANDER_TITLE", "Env Title")
    assert load_config(base_dir=tmp_path).title == "Env Title"


def test_load_config_overrides_beat_env(tmp_path, monkeypatch):
    """A non-None override beats the BRANDER_NAME env var; None overrides are ignored."""
    (tmp_path / ".branderrc.yaml").write_text("name: acme\n")
    monkeypatch.setenv("BRANDER_NAME", "env")
    assert load_config(base_dir=tmp_path, overrides={"name": "cli"}).name == "cli"
    assert load_config(base_dir=tmp_path, overrides={"name": None}).name == "env"


def test_config_title_defaults_to_name(make_config):
    assert make_config().title == "demo"


def test_config_docs_are_copies(make_config):
    """Mutating Config.docs never changes the loaded settings."""
    config = make_config(docs=[{"doc": "README.md"}])
    config.docs[0]["doc"] = "OTHER.md"
    assert config.docs[0]["doc"] == "README.md"


@pytest.mark.parametrize("value,expected", [
    ("lf", "\n"),
    ("CRLF", "\r\n"),
    ("", os.linesep),
])
def test_config_line_separator(make_config, value, expected):
    assert make_config(options={"lineSeparator": value}).line_separator == expected


def test_config_option_nested_and_dotted(make_config):
    """option() accepts nested mappings as well as literal dotted keys."""
    config = make_config(options={"docs": {"dir": "documentation"}, "assets.dir": "art"})
    assert config.option("docs.dir") == "documentation"
    assert config.assets_dir == "art"
    assert config.option("docs.missing", "x") == "x"


def test_config_evaluate(make_config):
    config = make_config()
    assert config.evaluate("{{ config.name }}-{{ n }}{{ eol }}", n=2) == "demo-2\n"


def test_config_evaluate_undefined_is_config_error(make_config):
    with pytest.raises(ConfigError, match="Unable to evaluate"):
        make_config().evaluate("{{ missing }}")


def test_config_doc_url_plain_path(make_config):
    config = make_config()
    assert config.doc_url("docs/README.md", "Usage") == "docs/README.md#Usage"
    assert config.doc_url("/docs/README.md") == "docs/README.md"


def test_config_doc_url_template(make_config):
    config = make_config(options={"docs.url": "https://example.com/{{ file }}{% if fragment %}#{{ fragment }}{% endif %}"})
    assert config.doc_url("docs/README.md", "Usage") == "https://example.com/docs/README.md#Usage"


def test_config_doc_url_repository(make_config):
    config = make_config(repository="git@github.com:acme/logo.git#main")
    assert config.doc_url("docs/README.md", "Usage") == "https://github.com/acme/logo/blob/main/docs/README.md#Usage"
    assert config.asset_url("assets/logo.png") == "https://github.com/acme/logo/raw/main/assets/logo.png"
    assert config.homepage == "https://github.com/acme/logo"


def test_config_relative(make_config, tmp_path):
    config = make_config()
    assert config.relative(tmp_path / "docs" / "README.md") == "docs/README.md"
    assert config.resolve("docs") == Path(tmp_path / "docs").resolve()
