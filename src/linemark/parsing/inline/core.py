"""Inline parsing entry point.

Pipeline for one logical line:

1. ``scan_line`` finds links, marker runs and escapes.
2. ``InlineText.from_line`` wraps the line as one unstyled run.
3. ``resolve_delimiters`` pairs runs and applies styles (length preserving).
4. ``apply_substitutions`` swaps in links/images and drops escapes.
5. ``freeze`` hands back an immutable fragment tuple.

"""

from __future__ import annotations

from linemark.fragments import InlineText
from linemark.nodes import TextFragment
from linemark.parsing.inline.resolver import apply_substitutions, resolve_delimiters
from linemark.parsing.inline.scanner import scan_line
from linemark.utils.logger import get_logger

logger = get_logger(__name__)


def parse_inline(line: str) -> tuple[TextFragment, ...]:
    """Resolve the inline structure of ``line``.

    Example:
        >>> [f.text for f in parse_inline("**bold**")]
        ['**', 'bold', '**']

    """
    scan = scan_line(line)
    text = InlineText.from_line(line)

    applied = resolve_delimiters(text, scan.queues)
    apply_substitutions(text, scan.links, scan.escapes)

    logger.debug(
        "inline: %d style(s), %d link(s), %d escape(s) in %d chars",
        applied,
        len(scan.links),
        len(scan.escapes),
        len(line),
    )
    return text.freeze()


class InlineParsingMixin:
    """Mixin giving the parser inline resolution.

    Required Host Attributes: None

    Required Host Methods: None

    """

    def _parse_inline(self, text: str) -> tuple[TextFragment, ...]:
        """Parse one line of inline content."""
        return parse_inline(text)
