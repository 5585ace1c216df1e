"""List marker classifier mixin."""

from __future__ import annotations

from linemark.parsing.charsets import MAX_ORDINAL_DIGITS, UNORDERED_LIST_MARKERS
from linemark.tokens import Token, TokenType


class ListClassifierMixin:
    """Mixin providing list marker classification."""

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

    def _calc_depth(self, line: str) -> int:
        """Calculate list nesting depth. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_list_marker(
        self, content: str, line: str, line_start: int
    ) -> Token | None:
        """Try to classify content as a list item.

        Unordered: ``- ``, ``+ `` or ``* ``. Ordered: digits then ``. ``.

        Args:
            content: Trimmed line content
            line: Full line (used for the nesting depth)
            line_start: Position in source where line starts

        Returns:
            LIST_ITEM token, or None.
        """
        if len(content) < 2:
            return None

        if content[0] in UNORDERED_LIST_MARKERS and content[1] == " ":
            return self._make_token(
                TokenType.LIST_ITEM,
                content[2:],
                line_start,
                line_indent=self._calc_depth(line),
            )

        if content[0].isdecimal():
            pos = 0
            while pos < len(content) and content[pos].isdecimal():
                pos += 1
            if content.startswith(". ", pos):
                digits = content[:pos]
                # Keep huge ordinals out of int() entirely
                ordinal = int(digits) if pos <= MAX_ORDINAL_DIGITS else None
                return self._make_token(
                    TokenType.LIST_ITEM,
                    content[pos + 2 :],
                    line_start,
                    line_indent=self._calc_depth(line),
                    ordered=True,
                    ordinal=ordinal,
                )

        return None
