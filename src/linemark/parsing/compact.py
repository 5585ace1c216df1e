"""Block compactor.

One forward pass over the per-line blocks:

- consecutive paragraphs merge into one, joined by NEWLINE runs
- a blank-line marker directly after a heading or another blank-line
  marker is dropped

Order is never changed, and compacting a compacted list returns it
unchanged.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from linemark.nodes import NEWLINE, Block, Heading, LineBreak, Paragraph
from linemark.utils.logger import get_logger

logger = get_logger(__name__)


def compact_blocks(blocks: Iterable[Block]) -> list[Block]:
    """Merge paragraph lines and collapse redundant blank-line markers.

    ``# Title`` followed by three blank lines and ``Next`` compacts to
    ``[Heading, Paragraph]``.
    """
    result: list[Block] = []
    pending: Paragraph | None = None
    # Armed by a Heading or an emitted LineBreak
    suppress_break = False
    dropped = 0

    def flush() -> None:
        nonlocal pending, suppress_break
        if pending is not None:
            result.append(pending)
            pending = None
            suppress_break = False

    for block in blocks:
        match block:
            case Paragraph():
                if pending is None:
                    pending = block
                else:
                    pending = replace(
                        pending,
                        location=pending.location.span_to(block.location),
                        content=(*pending.content, NEWLINE, *block.content),
                    )

            case LineBreak():
                flush()
                if suppress_break:
                    dropped += 1
                else:
                    result.append(block)
                    suppress_break = True

            case Heading():
                flush()
                result.append(block)
                suppress_break = True

            case _:
                flush()
                result.append(block)
                suppress_break = False

    flush()

    if dropped:
        logger.debug("compact: dropped %d redundant line break(s)", dropped)
    return result
