"""Tests ensuring lexer state is consistent after tokenization.

The open fence is the only state carried between lines; these tests make
sure it is cleared whenever a fence token is emitted.
"""

from __future__ import annotations

from linemark.lexer import Lexer, LexerMode
from linemark.lexer.modes import OpenFence
from linemark.tokens import TokenType


class TestFenceStateConsistency:
    """Verify fence state is properly managed."""

    def test_fence_cleared_after_close(self) -> None:
        lexer = Lexer("```py\nx\n```\n")
        list(lexer.tokenize())
        assert lexer._fence is None
        assert lexer._mode == LexerMode.BLOCK

    def test_mode_switches_while_open(self) -> None:
        lexer = Lexer("```\nx\n```")
        stream = lexer.tokenize()
        token = next(stream)
        assert token.type == TokenType.FENCED_CODE
        assert lexer._mode == LexerMode.BLOCK

    def test_back_to_back_fences(self) -> None:
        tokens = list(Lexer("```a\n1\n```\n```b\n2\n```").tokenize())
        fences = [(t.info, t.value) for t in tokens if t.type == TokenType.FENCED_CODE]
        assert fences == [("a", "1\n"), ("b", "2\n")]

    def test_closing_line_does_not_reopen(self) -> None:
        tokens = list(Lexer("```\nx\n```\ny").tokenize())
        assert [t.type for t in tokens] == [
            TokenType.FENCED_CODE,
            TokenType.PARAGRAPH_LINE,
            TokenType.EOF,
        ]


class TestOpenFence:
    """OpenFence accumulator."""

    def test_code_joins_lines_with_newlines(self) -> None:
        fence = OpenFence(language="py", lineno=1, start_offset=0)
        fence.lines.extend(["a", "", "b"])
        assert fence.code == "a\n\nb\n"

    def test_empty(self) -> None:
        assert OpenFence(language="", lineno=1, start_offset=0).code == ""
