"""Line-oriented parser producing typed blocks.

Consumes the token stream from Lexer and builds one block node per line,
then compacts the result.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token stream traversal
- `InlineParsingMixin`: Inline content (styles, links, escapes)
- `BlockParsingMixin`: Token to block node mapping

Thread Safety:
- Parser produces immutable blocks (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)

"""

from __future__ import annotations

from linemark.config import ParseConfig, get_parse_config
from linemark.lexer import Lexer
from linemark.nodes import Block
from linemark.parsing import (
    BlockParsingMixin,
    InlineParsingMixin,
    TokenNavigationMixin,
    compact_blocks,
)
from linemark.tokens import Token
from linemark.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    TokenNavigationMixin,
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Parser for linemark documents.

    Usage:
            >>> Parser("# Hello\n\nWorld").parse()
        [Heading(..., level=1, ...), Paragraph(...)]

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).

    """

    __slots__ = (
        "_source",
        "_tokens",
        "_pos",
        "_current",
        "_source_file",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: Markdown source text
            source_file: Optional source file path for locations

        """
        self._source = source
        self._source_file = source_file
        self._tokens: list[Token] = []
        self._pos = 0
        self._current: Token | None = None

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    def parse(self) -> list[Block]:
        """Parse source into blocks.

        Returns:
            Blocks in source order, compacted unless ``compact`` is off.
        """
        config = self._config
        lexer = Lexer(
            self._source,
            self._source_file,
            text_transformer=config.text_transformer,
            indent_width=config.indent_width,
        )
        self._tokens = list(lexer.tokenize())
        self._pos = 0
        self._current = self._tokens[0] if self._tokens else None

        blocks: list[Block] = []
        while not self._at_end():
            block = self._parse_block()
            if block is not None:
                blocks.append(block)

        logger.debug("parsed %d token(s) into %d block(s)", len(self._tokens), len(blocks))

        if config.compact:
            return compact_blocks(blocks)
        return blocks
