"""Unit tests for util/git.py"""

import subprocess

import pytest

from brander.util import git


@pytest.mark.parametrize("url,expected", [
    ("https://github.com/acme/logo.git", ("https://github.com/acme/logo", None)),
    ("git@github.com:acme/logo.git", ("https://github.com/acme/logo", None)),
    ("ssh://git@gitlab.com/acme/logo#develop", ("https://gitlab.com/acme/logo", "develop")),
    ("git+https://github.com/acme/logo#main", ("https://github.com/acme/logo", "main")),
    ("not a url", None),
])
def test_hosted_info(url, expected):
    assert git.hosted_info(url) == expected


def test_file_url_defaults_branch_to_head():
    assert git.file_url("https://github.com/acme/logo", "README.md") == "https://github.com/acme/logo/blob/HEAD/README.md"


def test_resolve_remote_url_prefers_origin(monkeypatch, tmp_path):
    outputs = {
        ("remote", "show"): "upstream\norigin\n",
        ("remote", "get-url", "origin"): "git@github.com:acme/logo.git\n",
        ("branch", "--show-current"): "main\n",
    }
    monkeypatch.setattr(git, "_git", lambda cwd, *args: outputs[args])
    assert git.resolve_remote_url(tmp_path) == "git@github.com:acme/logo.git#main"


def test_resolve_remote_url_unavailable_returns_none(monkeypatch, tmp_path):
    """A failing or missing git executable resolves to None instead of raising."""
    def _fail(cwd, *args):
        raise subprocess.CalledProcessError(128, ["git", *args])
    monkeypatch.setattr(git, "_git", _fail)
    assert git.resolve_remote_url(tmp_path) is None

    def _missing(cwd, *args):
        raise FileNotFoundError("git")
    monkeypatch.setattr(git, "_git", _missing)
    assert git.resolve_remote_url(tmp_path) is None


def test_resolve_remote_url_no_remotes(monkeypatch, tmp_path):
    monkeypatch.setattr(git, "_git", lambda cwd, *args: "")
    assert git.resolve_remote_url(tmp_path) is None
