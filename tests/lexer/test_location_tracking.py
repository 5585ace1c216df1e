"""Tests for token source locations."""

from linemark.lexer import Lexer
from linemark.tokens import TokenType


class TestLocations:
    """Line, column and offset bookkeeping."""

    def test_simple_document(self) -> None:
        tokens = list(Lexer("# Hello\n\nWorld").tokenize())
        assert [(t.type, t.location.lineno, t.location.offset) for t in tokens] == [
            (TokenType.ATX_HEADING, 1, 0),
            (TokenType.BLANK_LINE, 2, 8),
            (TokenType.PARAGRAPH_LINE, 3, 9),
            (TokenType.EOF, 3, 14),
        ]
        assert tokens[-1].location.col_offset == 6

    def test_fence_spans_opener_to_closer(self) -> None:
        tokens = list(Lexer("intro\n```\na\nb\n```\nafter").tokenize())
        fence = tokens[1]
        assert fence.type == TokenType.FENCED_CODE
        assert fence.location.lineno == 2
        assert fence.location.end_lineno == 6
        assert fence.location.offset == 6
        assert fence.location.end_offset == 18

    def test_source_file_recorded(self) -> None:
        token = next(Lexer("text", source_file="notes.md").tokenize())
        assert token.location.source_file == "notes.md"
        assert str(token.location) == "notes.md:1:1"

    def test_location_is_cached(self) -> None:
        token = next(Lexer("text").tokenize())
        assert token.location is token.location

    def test_repr(self) -> None:
        token = next(Lexer("# Hello").tokenize())
        assert repr(token) == "Token(ATX_HEADING, 'Hello', 1:1)"

    def test_multibyte_offsets_are_characters(self) -> None:
        tokens = list(Lexer("ñandú\nb").tokenize())
        assert tokens[1].location.offset == 6
