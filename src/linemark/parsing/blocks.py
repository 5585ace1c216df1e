"""Block node construction.

Every token except EOF maps to exactly one block node; there is no
lookahead and no container state. Merging paragraph lines and collapsing
blank-line markers happens afterwards in ``compact_blocks``.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linemark.nodes import (
    Block,
    CodeBlock,
    Heading,
    LineBreak,
    ListItem,
    ListKind,
    Paragraph,
    Rule,
    TextFragment,
)
from linemark.tokens import TokenType

if TYPE_CHECKING:
    from linemark.tokens import Token


class BlockParsingMixin:
    """Mixin turning line tokens into block nodes.

    Required Host Attributes:
        - _current: Token | None

    Required Host Methods:
        - _advance() -> Token | None
        - _parse_inline(text) -> tuple[TextFragment, ...]

    """

    _current: Token | None

    def _advance(self) -> Token | None:
        raise NotImplementedError

    def _parse_inline(self, text: str) -> tuple[TextFragment, ...]:
        raise NotImplementedError

    def _parse_block(self) -> Block | None:
        """Build the node for the current token and advance past it."""
        token = self._current
        if token is None:
            return None
        self._advance()
        return self._token_to_block(token)

    def _token_to_block(self, token: Token) -> Block | None:
        location = token.location

        match token.type:
            case TokenType.ATX_HEADING:
                return Heading(
                    location=location,
                    level=token.level,
                    content=self._parse_inline(token.value),
                )

            case TokenType.PARAGRAPH_LINE:
                return Paragraph(location=location, content=self._parse_inline(token.value))

            case TokenType.LIST_ITEM:
                kind = ListKind.ORDERED if token.ordered else ListKind.UNORDERED
                return ListItem(
                    location=location,
                    kind=kind,
                    depth=token.line_indent,
                    content=self._parse_inline(token.value),
                    ordinal=token.ordinal,
                )

            case TokenType.FENCED_CODE:
                return CodeBlock(location=location, language=token.info, code=token.value)

            case TokenType.BLANK_LINE:
                return LineBreak(location=location)

            case TokenType.THEMATIC_BREAK:
                return Rule(location=location)

            case _:
                return None
