"""Tests for linemark.serialization: Document JSON round-trip."""

import json

import pytest

from linemark import parse
from linemark.location import SourceLocation
from linemark.nodes import (
    CodeBlock,
    Document,
    Heading,
    Image,
    LineBreak,
    Link,
    ListItem,
    ListKind,
    Paragraph,
    Rule,
    Style,
    StyledRun,
)
from linemark.serialization import from_dict, from_json, to_dict, to_json

_LOC = SourceLocation(lineno=1, col_offset=1)


def _doc(*blocks) -> Document:  # type: ignore[no-untyped-def]
    return Document(location=_LOC, children=tuple(blocks))


class TestToDict:
    """Dict shape."""

    def test_type_discriminator(self) -> None:
        assert to_dict(Rule(_LOC))["_type"] == "Rule"

    def test_style_as_sorted_names(self) -> None:
        data = to_dict(StyledRun(Style.STRONG | Style.EMPHASIS, "x"))
        assert data == {"_type": "StyledRun", "style": ["EMPHASIS", "STRONG"], "text": "x"}

    def test_normal_style_is_empty_list(self) -> None:
        assert to_dict(StyledRun(Style.NORMAL, "x"))["style"] == []

    def test_list_kind_by_name(self) -> None:
        item = ListItem(_LOC, ListKind.ORDERED, 0, (), ordinal=3)
        data = to_dict(item)
        assert data["kind"] == "ORDERED"
        assert data["ordinal"] == 3

    def test_location(self) -> None:
        data = to_dict(LineBreak(SourceLocation(2, 1, source_file="a.md")))
        assert data["location"]["_type"] == "SourceLocation"
        assert data["location"]["source_file"] == "a.md"


class TestRoundTrip:
    """from_dict(to_dict(x)) == x."""

    @pytest.mark.parametrize(
        "node",
        [
            Heading(_LOC, 3, (StyledRun(Style.MODIFIER, "*"), Link("a", "b"))),
            Paragraph(_LOC, (Image("alt", "src"), StyledRun(Style.CODE | Style.STRIKETHROUGH, "z"))),
            ListItem(_LOC, ListKind.UNORDERED, 2, (StyledRun(Style.NORMAL, "i"),)),
            CodeBlock(_LOC, "py", "x = 1\n"),
            LineBreak(_LOC),
            Rule(_LOC),
        ],
    )
    def test_block(self, node) -> None:  # type: ignore[no-untyped-def]
        assert from_dict(to_dict(node)) == node

    def test_parsed_document(self) -> None:
        source = "# T *e*\n\n- a\n\t1. b\n\n```py\ncode\n```\n---\n[l](u) ![i](s)\nnext"
        doc = parse(source, source_file="doc.md")
        assert from_json(to_json(doc)) == doc

    def test_deterministic(self) -> None:
        doc = parse("# a\nb")
        assert to_json(doc) == to_json(parse("# a\nb"))

    def test_indent(self) -> None:
        text = to_json(_doc(Rule(_LOC)), indent=2)
        assert "\n" in text
        assert json.loads(text)["_type"] == "Document"


class TestErrors:
    """Malformed input raises ValueError."""

    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing"):
            from_dict({"text": "x"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type"):
            from_dict({"_type": "Table"})

    def test_from_json_requires_document(self) -> None:
        with pytest.raises(ValueError, match="Expected Document"):
            from_json(json.dumps(to_dict(Rule(_LOC))))
