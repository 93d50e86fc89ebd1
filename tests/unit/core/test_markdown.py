"""Unit tests for core/markdown.py"""

from brander.core.markdown import horizontal_rule, image, link, table


def test_link():
    assert link("Intro", "docs/README.md#Intro") == "[Intro](docs/README.md#Intro)"


def test_horizontal_rule():
    assert horizontal_rule() == "---"


def test_table_with_headers():
    result = table([["logo.png", 32]], headers=["File", "Size"])
    assert result.splitlines() == [
        "| File | Size |",
        "| --- | --- |",
        "| logo.png | 32 |",
    ]


def test_table_promotes_first_row_and_pads():
    result = table([["A", "B"], ["only"]], line_separator="\r\n")
    assert result == "| A | B |\r\n| --- | --- |\r\n| only |  |"


def test_table_escapes_pipes():
    assert "a\\|b" in table([["a|b"]], headers=["x"])


def test_empty_table():
    assert table([]) == ""


def test_image():
    assert image("Logo", "assets/logo.svg") == "![Logo](assets/logo.svg)"
    assert image("Logo", "assets/logo.svg", "Brand") == '![Logo](assets/logo.svg "Brand")'
