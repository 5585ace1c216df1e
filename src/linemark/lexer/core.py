"""Line-classifying lexer with O(n) guaranteed performance.

Every physical line is read once, classified, and committed. The only
state carried between lines is whether a code fence is open.

No regex in the hot path.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from linemark.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    ThematicClassifierMixin,
)
from linemark.lexer.modes import LexerMode, OpenFence
from linemark.lexer.scanners import BlockScannerMixin, FenceScannerMixin
from linemark.tokens import Token, TokenType
from linemark.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Classifiers (pure logic, no position mutation)
    HeadingClassifierMixin,
    FenceClassifierMixin,
    ThematicClassifierMixin,
    ListClassifierMixin,
    # Scanners (mode-specific scanning logic)
    BlockScannerMixin,
    FenceScannerMixin,
):
    """Line-classifying lexer.

    Usage:
            >>> lexer = Lexer("# Hello\n\nWorld")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(ATX_HEADING, 'Hello', 1:1)
        Token(BLANK_LINE, '', 2:1)
        Token(PARAGRAPH_LINE, 'World', 3:1)
        Token(EOF, '', 3:6)

    A fence left open at end of input is flushed as a FENCED_CODE token
    holding every line collected so far.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_col",
        "_mode",
        "_fence",
        "_source_file",
        "_saved_lineno",
        "_saved_col",
        "_text_transformer",
        "_indent_width",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        text_transformer: Callable[[str], str] | None = None,
        indent_width: int = 4,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markdown source text
            source_file: Optional source file path for error messages
            text_transformer: Optional callback applied to each line outside
                code fences before classification
            indent_width: Spaces per list nesting level
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._mode = LexerMode.BLOCK
        self._fence: OpenFence | None = None
        self._source_file = source_file
        self._text_transformer = text_transformer
        self._indent_width = indent_width

        self._saved_lineno: int = 1
        self._saved_col: int = 1

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, ending with EOF

        """
        source_len = self._source_len
        while self._pos < source_len:
            yield from self._dispatch_mode()

        if self._mode == LexerMode.CODE_FENCE:
            logger.debug(
                "Unterminated code fence opened at line %d flushed at end of input",
                self._fence.lineno if self._fence else self._lineno,
            )
            yield self._close_fence()

        yield Token(
            type=TokenType.EOF,
            value="",
            _lineno=self._lineno,
            _col=self._col,
            _start_offset=self._pos,
            _end_offset=self._pos,
            _end_lineno=self._lineno,
            _source_file=self._source_file,
        )

    def _dispatch_mode(self) -> Iterator[Token]:
        """Dispatch to appropriate scanner based on current mode."""
        if self._mode == LexerMode.BLOCK:
            yield from self._scan_block()
        elif self._mode == LexerMode.CODE_FENCE:
            yield from self._scan_code_fence_content()

    # =========================================================================
    # Line navigation helpers
    # =========================================================================

    def _find_line_end(self) -> int:
        """Find the end of the current line (position of \\n or EOF)."""
        idx = self._source.find("\n", self._pos)
        return idx if idx != -1 else self._source_len

    def _commit_to(self, line_end: int) -> None:
        """Commit position to line_end, consuming the newline if present."""
        self._col += line_end - self._pos
        self._pos = line_end

        if self._pos < self._source_len and self._source[self._pos] == "\n":
            self._pos += 1
            self._lineno += 1
            self._col = 1

    def _read_line(self) -> str:
        """Consume the current line and return it without its line ending."""
        line_end = self._find_line_end()
        line = self._source[self._pos : line_end]
        self._commit_to(line_end)
        return line.removesuffix("\r")

    def _calc_depth(self, line: str) -> int:
        """Nesting depth of a list item line.

        Each tab in the leading whitespace counts as one level, and every
        ``indent_width`` spaces count as one more.
        """
        tabs = 0
        spaces = 0
        for char in line:
            if char == "\t":
                tabs += 1
            elif char == " ":
                spaces += 1
            else:
                break
        return tabs + spaces // self._indent_width

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location; call at the start of each line."""
        self._saved_lineno = self._lineno
        self._saved_col = self._col

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
        """Create a Token with raw coordinates (lazy SourceLocation).

        Args:
            token_type: The token type.
            value: Text handed to the parser.
            start_pos: Start position in source.
            line_indent: List nesting depth.
            level: Heading level.
            ordered: Ordered list item flag.
            ordinal: Ordered list item number.

        Returns:
            Token spanning from start_pos to the current position.
        """
        return Token(
            type=token_type,
            value=value,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _start_offset=start_pos,
            _end_offset=self._pos,
            line_indent=line_indent,
            level=level,
            ordered=ordered,
            ordinal=ordinal,
            _end_lineno=self._lineno,
            _source_file=self._source_file,
        )
