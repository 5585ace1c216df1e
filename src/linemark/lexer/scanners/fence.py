"""Fenced code mode scanner mixin."""

from collections.abc import Iterator

from linemark.lexer.modes import LexerMode, OpenFence
from linemark.tokens import Token, TokenType


class FenceScannerMixin:
    """Mixin providing fenced code mode scanning logic.

    Collects raw lines (untrimmed, untransformed) until a closing fence,
    then emits the whole block as one FENCED_CODE token.

    """

    # These will be set by the Lexer class
    _pos: int
    _lineno: int
    _mode: LexerMode
    _fence: OpenFence | None
    _source_file: str | None

    def _read_line(self) -> str:
        """Consume the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _is_closing_fence(self, line: str) -> bool:
        """Check if line is a closing fence. Implemented by FenceClassifierMixin."""
        raise NotImplementedError

    def _scan_code_fence_content(self) -> Iterator[Token]:
        """Consume one line inside an open fence.

        Yields:
            A FENCED_CODE token when the line closes the fence; nothing
            for content lines.
        """
        line = self._read_line()
        if self._is_closing_fence(line):
            yield self._close_fence()
            return

        assert self._fence is not None
        self._fence.lines.append(line)

    def _close_fence(self) -> Token:
        """Turn the open fence into a token and return to BLOCK mode."""
        fence = self._fence
        assert fence is not None

        self._fence = None
        self._mode = LexerMode.BLOCK
        return Token(
            type=TokenType.FENCED_CODE,
            value=fence.code,
            _lineno=fence.lineno,
            _col=1,
            _start_offset=fence.start_offset,
            _end_offset=self._pos,
            info=fence.language,
            _end_lineno=self._lineno,
            _source_file=self._source_file,
        )
