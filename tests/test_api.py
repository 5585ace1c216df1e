"""Tests for the top-level API (parse, render, Markdown)."""

import pytest

import linemark
from linemark import (
    ConfigError,
    Document,
    Heading,
    LineBreak,
    ListItem,
    Markdown,
    Paragraph,
    ParseConfig,
    get_parse_config,
    parse,
    render,
)


class TestParse:
    """parse() builds a Document."""

    def test_returns_document(self) -> None:
        doc = parse("# Hello **World**")
        assert isinstance(doc, Document)
        assert isinstance(doc.children[0], Heading)
        assert doc.children[0].level == 1

    def test_document_location(self) -> None:
        doc = parse("abc", source_file="a.md")
        assert doc.location.end_offset == 3
        assert doc.location.source_file == "a.md"

    def test_config_argument(self) -> None:
        doc = parse("a\nb", config=ParseConfig(compact=False))
        assert [type(b) for b in doc.children] == [Paragraph, Paragraph]

    def test_config_argument_does_not_leak(self) -> None:
        before = get_parse_config()
        parse("a", config=ParseConfig(indent_width=2))
        assert get_parse_config() is before

    def test_document_is_immutable(self) -> None:
        doc = parse("a")
        with pytest.raises(AttributeError):
            doc.children = ()  # type: ignore[misc]

    def test_deterministic(self) -> None:
        source = "# T\n- *a*\n\n```\nx\n```\n[l](u)"
        assert parse(source) == parse(source)


class TestRender:
    """render() produces HTML."""

    def test_render(self) -> None:
        assert render(parse("---")) == "<hr>\n"


class TestMarkdown:
    """High-level processor."""

    def test_call(self) -> None:
        assert Markdown()("# Hello **World**") == "<h1>Hello <strong>World</strong></h1>\n"

    def test_compact_off(self) -> None:
        md = Markdown(compact=False)
        assert md("a\nb") == "<p>a</p>\n<p>b</p>\n"

    def test_indent_width(self) -> None:
        doc = Markdown(indent_width=2).parse("  - a")
        assert isinstance(doc.children[0], ListItem)
        assert doc.children[0].depth == 1

    def test_text_transformer(self) -> None:
        md = Markdown(text_transformer=lambda line: line.replace(":)", "*smile*"))
        assert md("hi :)") == "<p>hi <em>smile</em></p>\n"

    def test_invalid_indent_width(self) -> None:
        with pytest.raises(ConfigError):
            Markdown(indent_width=0)

    def test_parse_many(self) -> None:
        docs = Markdown().parse_many(["# Doc 1", "# Doc 2", "\n\n"])
        assert len(docs) == 3
        assert isinstance(docs[2].children[0], LineBreak)

    def test_config_property(self) -> None:
        assert Markdown(compact=False).config == ParseConfig(compact=False)

    def test_markdown_does_not_leak_config(self) -> None:
        before = get_parse_config()
        Markdown(compact=False)("a\nb")
        assert get_parse_config() is before


class TestExports:
    """Public names."""

    def test_version(self) -> None:
        assert isinstance(linemark.__version__, str)

    def test_all_names_resolve(self) -> None:
        for name in linemark.__all__:
            assert hasattr(linemark, name), name
