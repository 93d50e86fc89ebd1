"""Unit tests for document tree construction (doc/parser.py, doc/context.py, root provider)"""

import pytest

from brander.doc.context import DocumentContext
from brander.doc.parser import DocumentContextParser, DocumentContextRunner
from brander.doc.providers.root import default_footer
from brander.errors import ConfigError, ProviderNotFoundError

NO_FOOTER = {"docs.disableDefaultFooter": True}


def _walk(context):
    yield context
    for child in context.children:
        yield from _walk(child)


def test_depth_follows_parent(make_config, parse_docs):
    config = make_config(docs=[{
        "doc": "README.md",
        "sections": [
            {"type": "container", "title": "A", "sections": [{"type": "hr"}]},
            {"type": "hr"},
        ],
    }], options=NO_FOOTER)
    (root,) = parse_docs(config)
    assert root.depth == 0 and root.is_root()
    for node in _walk(root):
        for child in node.children:
            assert child.parent is node
            assert child.depth == node.depth + 1
            assert child.root is root


def test_root_file_and_default_title(make_config, parse_docs, tmp_path):
    (root,) = parse_docs(make_config(docs=[{"doc": "GUIDE.md"}]))
    assert root.file.format == "md"
    assert root.file.absolute == (tmp_path / "docs" / "GUIDE.md").resolve()
    assert root.title == "GUIDE.md"


def test_root_dir_option(make_config, parse_docs, tmp_path):
    (root,) = parse_docs(make_config(docs=[{"doc": "README.md", "dir": "."}]))
    assert root.file.relative == "README.md"


def test_root_requires_doc(make_config, parse_docs):
    with pytest.raises(ConfigError, match='"doc" configuration is required'):
        parse_docs(make_config(docs=[{"title": "Nope"}]))


def test_root_rejects_non_markdown_format(make_config, parse_docs, tmp_path):
    config = make_config(docs=[{"doc": "README.pdf"}])
    with pytest.raises(ConfigError, match="unsupported: pdf"):
        parse_docs(config)
    assert not (tmp_path / "docs").exists()


def test_root_rejects_parent(make_config, parse_docs):
    config = make_config(docs=[{"doc": "README.md", "sections": [{"type": "root", "doc": "NESTED.md"}]}])
    with pytest.raises(ConfigError, match="cannot have parent"):
        parse_docs(config)


def test_section_type_is_required(make_config, parse_docs):
    with pytest.raises(ConfigError, match='"type" configuration is required'):
        parse_docs(make_config(docs=[{"doc": "README.md", "sections": [{"title": "Untyped"}]}]))


def test_unknown_section_type(make_config, parse_docs):
    config = make_config(docs=[{"doc": "README.md", "sections": [{"type": "video"}]}])
    with pytest.raises(ProviderNotFoundError, match="Unable to find provider for type: video"):
        parse_docs(config)


def test_non_mapping_entry(make_config, parse_docs):
    with pytest.raises(ConfigError):
        parse_docs(make_config(docs=["README.md"]))


def test_header_and_footer_wrap_sections(make_config, parse_docs):
    config = make_config(docs=[{"doc": "README.md", "sections": [{"type": "hr"}]}], options={
        "docs.header": {"type": "template", "title": "Header", "content": "top"},
    })
    (root,) = parse_docs(config)
    types = [c.type for c in root.children]
    assert types == ["template", "hr", "template"]
    assert root.children[0].title == "Header"
    assert root.children[-1].get("content") == default_footer(config)["content"]


def test_disable_default_footer(make_config, parse_docs):
    (root,) = parse_docs(make_config(docs=[{"doc": "README.md"}], options=NO_FOOTER))
    assert root.children == ()


def test_add_children_rejects_foreign_child(make_config):
    config = make_config()
    parent = DocumentContext("container", {}, None, config)
    other = DocumentContext("container", {}, None, config)
    with pytest.raises(ValueError):
        parent.add_children([DocumentContext("hr", {}, other, config)])


def test_detached_context_is_skipped(make_config, document_registry):
    config = make_config()
    detached = DocumentContext("hr", {"title": "Lost"}, None, config)
    assert detached.detached
    assert detached.root is None
    runner = DocumentContextRunner([detached], config, document_registry)
    assert runner.run() == [""]


def test_parser_default_type(make_config, document_registry):
    config = make_config()
    parser = DocumentContextParser([{"doc": "A.md"}, {"doc": "B.md"}], config, "root", registry=document_registry)
    assert [c.file.name for c in parser.parse_remaining()] == ["A.md", "B.md"]
