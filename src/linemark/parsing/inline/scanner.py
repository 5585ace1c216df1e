"""Single-pass delimiter scanner for one logical line.

The scanner does not build any fragments. It walks the line once and
records three things, all as character offsets into the original line:

- links and images, recognized eagerly: ``[alt](target)`` and
  ``![alt](source)``;
- the start of every marker run, queued by character and run length;
- every backslash escape, to be stripped after styling.

Escaped characters are skipped, so ``\\*`` never opens or closes a style.

Thread Safety:
Stateless module functions; each call returns a fresh ScanResult.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from linemark.fragments import Span
from linemark.nodes import Image, Link
from linemark.parsing.charsets import ESCAPE_CHAR, MARKER_INDEX
from linemark.parsing.inline.queues import DelimiterQueues


@dataclass(slots=True)
class ScanResult:
    """Everything the resolver needs to style one line.

    Attributes:
        links: (span, fragment) pairs in discovery order.
        queues: Marker run offsets waiting to be paired.
        escapes: Offsets of backslash characters to remove.

    """

    links: list[tuple[Span, Link | Image]] = field(default_factory=list)
    queues: DelimiterQueues = field(default_factory=DelimiterQueues)
    escapes: list[int] = field(default_factory=list)


def scan_line(line: str) -> ScanResult:
    """Scan ``line`` left to right, collecting links, runs and escapes.

    Args:
        line: One logical line (no trailing newline)

    Returns:
        ScanResult with offsets in character coordinates.
    """
    result = ScanResult()
    pos = 0
    line_len = len(line)

    while pos < line_len:
        link = try_scan_link(line, pos)
        if link is not None:
            result.links.append(link)
            pos = link[0].end
            continue

        char = line[pos]
        marker = MARKER_INDEX.get(char)
        if marker is not None:
            run_end = pos + 1
            while run_end < line_len and line[run_end] == char:
                run_end += 1
            result.queues.push(marker, run_end - pos, pos)
            pos = run_end
            continue

        if char == ESCAPE_CHAR:
            result.escapes.append(pos)
            pos += 2
            continue

        pos += 1

    return result


def try_scan_link(line: str, pos: int) -> tuple[Span, Link | Image] | None:
    """Try to read ``[alt](target)`` or ``![alt](source)`` at ``pos``.

    The alt text runs to the first ``]`` and may not contain ``[``; the
    target runs to the first ``)``. Anything missing means no match.

    Returns:
        (span of the whole construct, fragment) or None.
    """
    start = pos
    is_image = line.startswith("!", pos)
    if is_image:
        pos += 1

    if not line.startswith("[", pos):
        return None

    alt_end = line.find("]", pos + 1)
    if alt_end == -1:
        return None
    alt = line[pos + 1 : alt_end]
    if "[" in alt:
        return None

    if not line.startswith("(", alt_end + 1):
        return None
    target_end = line.find(")", alt_end + 2)
    if target_end == -1:
        return None
    target = line[alt_end + 2 : target_end]

    fragment: Link | Image = Image(alt, target) if is_image else Link(alt, target)
    return Span.from_start_end(start, target_end + 1), fragment
