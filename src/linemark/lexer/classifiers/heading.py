"""ATX heading classifier mixin."""

from linemark.parsing.charsets import HEADING_CHAR, MAX_HEADING_LEVEL
from linemark.tokens import Token, TokenType


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

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

    def _try_classify_atx_heading(self, content: str, line_start: int) -> Token | None:
        """Try to classify content as ATX heading.

        A run of ``#`` followed by whitespace. Runs longer than five still
        make a heading, clamped to level 5.

        Args:
            content: Trimmed line content
            line_start: Position in source where line starts

        Returns:
            Token if valid heading, None otherwise.
        """
        run = len(content) - len(content.lstrip(HEADING_CHAR))
        if run == 0 or run == len(content):
            return None
        if not content[run].isspace():
            return None

        level = min(run, MAX_HEADING_LEVEL)
        text = content[run:].lstrip()
        return self._make_token(TokenType.ATX_HEADING, text, line_start, level=level)
