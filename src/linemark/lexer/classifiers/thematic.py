"""Thematic break classifier mixin."""

from __future__ import annotations

from linemark.parsing.charsets import RULE_CHARS
from linemark.tokens import Token, TokenType


def is_thematic_break(content: str) -> bool:
    """Check whether ``content`` is 3+ of one rule character.

    Whitespace anywhere in the line is ignored; any other character, or a
    second rule character (``-*-``), disqualifies it.
    """
    marker = ""
    count = 0
    for c in content:
        if c.isspace():
            continue
        if not marker:
            marker = c
        elif c != marker:
            return False
        count += 1
    return marker in RULE_CHARS and count >= 3


class ThematicClassifierMixin:
    """Mixin providing thematic break classification."""

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
        """Create token with raw coordinates. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_thematic_break(self, content: str, line_start: int) -> Token | None:
        """Try to classify content as thematic break.

        Args:
            content: Trimmed line content
            line_start: Position in source where line starts

        Returns:
            Token if valid break, None otherwise.
        """
        if not content or content[0] not in RULE_CHARS:
            return None
        if not is_thematic_break(content):
            return None
        return self._make_token(TokenType.THEMATIC_BREAK, content, line_start)
