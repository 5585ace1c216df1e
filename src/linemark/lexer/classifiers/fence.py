"""Fenced code block classifier mixin."""

from linemark.lexer.modes import LexerMode, OpenFence
from linemark.parsing.charsets import FENCE


class FenceClassifierMixin:
    """Mixin providing fenced code block classification.

    Opening a fence switches the lexer to CODE_FENCE mode; the fence scanner
    collects lines until ``_is_closing_fence`` matches.
    """

    # These will be set by the Lexer class
    _mode: LexerMode
    _fence: OpenFence | None
    _saved_lineno: int

    def _try_open_fence(self, content: str, line_start: int) -> bool:
        """Try to open a code fence.

        A fence opener is exactly three backticks followed by an optional
        language tag. Four or more backticks do not open a fence.

        Args:
            content: Trimmed line content
            line_start: Position in source where line starts

        Returns:
            True if a fence was opened (the line produces no token).
        """
        if not content.startswith(FENCE) or content.startswith(FENCE + "`"):
            return False

        self._fence = OpenFence(
            language=content[len(FENCE) :].strip(),
            lineno=self._saved_lineno,
            start_offset=line_start,
        )
        self._mode = LexerMode.CODE_FENCE
        return True

    def _is_closing_fence(self, line: str) -> bool:
        """A closing fence is a line that is exactly ``` once trimmed."""
        return line.strip() == FENCE
