"""Block mode scanner mixin."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from linemark.parsing.charsets import HEADING_CHAR
from linemark.tokens import Token, TokenType


class BlockScannerMixin:
    """Mixin providing block mode scanning logic.

    Reads one line, classifies it, and yields at most one token. Priority
    (first match wins):

    1. fence opener (no token; switches to CODE_FENCE mode)
    2. blank line
    3. ATX heading
    4. thematic break, which also keeps ``- - -`` from being a list item
    5. list item
    6. paragraph line

    """

    # These will be set by the Lexer class
    _pos: int
    _text_transformer: Callable[[str], str] | None

    def _save_location(self) -> None:
        """Save current location for token creation."""
        raise NotImplementedError

    def _read_line(self) -> str:
        """Consume the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        start_pos: int,
        *,
        line_indent: int = 0,
        level: int = 0,
        ordered: bool = False,
        ordinal: int | None = None,
    ) -> Token:
        raise NotImplementedError

    # Classifier methods (provided by classifier mixins)
    def _try_open_fence(self, content: str, line_start: int) -> bool:
        raise NotImplementedError

    def _try_classify_atx_heading(self, content: str, line_start: int) -> Token | None:
        raise NotImplementedError

    def _try_classify_thematic_break(self, content: str, line_start: int) -> Token | None:
        raise NotImplementedError

    def _try_classify_list_marker(
        self, content: str, line: str, line_start: int
    ) -> Token | None:
        raise NotImplementedError

    def _scan_block(self) -> Iterator[Token]:
        """Classify one line outside of a code fence."""
        self._save_location()
        line_start = self._pos
        line = self._read_line()

        if self._text_transformer:
            line = self._text_transformer(line)

        content = line.strip()

        if self._try_open_fence(content, line_start):
            return

        if not content:
            yield self._make_token(TokenType.BLANK_LINE, "", line_start)
            return

        if content.startswith(HEADING_CHAR):
            token = self._try_classify_atx_heading(content, line_start)
            if token:
                yield token
                return

        token = self._try_classify_thematic_break(content, line_start)
        if token:
            yield token
            return

        token = self._try_classify_list_marker(content, line, line_start)
        if token:
            yield token
            return

        yield self._make_token(TokenType.PARAGRAPH_LINE, line, line_start)
