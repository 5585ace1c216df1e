"""Greedy delimiter resolution.

Pairs queued marker runs into style intervals, earliest pair first, and
applies them to an InlineText. The matcher has no notion of precedence
between marker classes: whichever pairable run starts first wins. A pair
that would cross a boundary created by an earlier pair is dropped (the
fragment model refuses spans that overrun a fragment), so overlapping
intervals of different classes cannot both apply.

After styling, link/image substitutions and escape removals run together,
right to left. Each of those operations shortens the line, and going from
the highest offset down keeps every remaining offset valid.

Thread Safety:
Pure functions over caller-owned objects.

"""

from __future__ import annotations

from linemark.fragments import InlineText, Span
from linemark.nodes import Image, Link, Style
from linemark.parsing.inline.queues import DelimiterQueues

# Rows follow MARKERS (*, _, `, ~); columns follow the run-length buckets.
# None means the pair is consumed without styling anything.
STYLE_TABLE: tuple[tuple[Style | None, Style | None, Style | None], ...] = (
    (Style.EMPHASIS, Style.STRONG, Style.EMPHASIS | Style.STRONG),
    (Style.EMPHASIS, Style.STRONG, Style.EMPHASIS | Style.STRONG),
    (Style.CODE, Style.CODE, Style.CODE),
    (None, Style.STRIKETHROUGH, None),
)


def resolve_delimiters(text: InlineText, queues: DelimiterQueues) -> int:
    """Drain ``queues`` into style applications on ``text``.

    Returns:
        Number of pairs that changed ``text``.
    """
    applied = 0
    while (pair := queues.pop_min_pair()) is not None:
        style = STYLE_TABLE[pair.marker][pair.bucket]
        if style is None:
            continue
        width = pair.width
        span = Span.from_start_end(pair.start, pair.end + width)
        if text.style(width, span, style):
            applied += 1
    return applied


def apply_substitutions(
    text: InlineText,
    links: list[tuple[Span, Link | Image]],
    escapes: list[int],
) -> None:
    """Replace link/image spans and strip escape characters.

    All edits are applied in descending offset order.
    """
    edits: list[tuple[Span, Link | Image | None]] = list(links)
    edits.extend((Span(offset, 1), None) for offset in escapes)
    edits.sort(key=lambda edit: edit[0].offset, reverse=True)

    for span, fragment in edits:
        if fragment is None:
            text.remove(span)
        else:
            text.replace(span, fragment)
