"""FIFO offset queues for delimiter pairing.

Each marker character (* _ ` ~) has three queues, one per
run-length bucket (1, 2, 3 or more). The scanner pushes run-start offsets
in left-to-right order, so every queue is sorted and its front is its
smallest element. Pairing always takes the two front offsets of the queue
whose front is smallest across all queues holding at least two.

Thread Safety:
DelimiterQueues instances are single-use per scanned line.

"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from linemark.parsing.charsets import BUCKET_WIDTHS, MARKERS


def bucket_for(run_length: int) -> int:
    """Map a run length to its bucket index (0, 1 or 2)."""
    return min(run_length, len(BUCKET_WIDTHS)) - 1


def _empty_grid() -> list[list[deque[int]]]:
    return [[deque() for _ in BUCKET_WIDTHS] for _ in MARKERS]


@dataclass(frozen=True, slots=True)
class DelimiterPair:
    """Two run-start offsets popped together from one queue.

    Attributes:
        start: Offset of the opening run.
        end: Offset of the closing run (its first character).
        marker: Row index into MARKERS.
        bucket: Column index into BUCKET_WIDTHS.

    """

    start: int
    end: int
    marker: int
    bucket: int

    @property
    def char(self) -> str:
        return MARKERS[self.marker]

    @property
    def width(self) -> int:
        return BUCKET_WIDTHS[self.bucket]


@dataclass(slots=True)
class DelimiterQueues:
    """Fixed 4 x 3 grid of offset queues.

    Usage:
        queues = DelimiterQueues()
        queues.push(marker=0, run_length=1, offset=2)
        queues.push(marker=0, run_length=1, offset=4)
        queues.pop_min_pair()  # DelimiterPair(start=2, end=4, marker=0, bucket=0)

    """

    grid: list[list[deque[int]]] = field(default_factory=_empty_grid)

    def push(self, marker: int, run_length: int, offset: int) -> None:
        """Queue the start offset of a marker run."""
        self.grid[marker][bucket_for(run_length)].append(offset)

    def pop_min_pair(self) -> DelimiterPair | None:
        """Pop the earliest pairable run from any queue.

        Only queues with two or more offsets are considered. Among those the
        one with the smallest front offset wins and loses its first two
        entries.

        Returns:
            The popped pair, or None once no queue can form a pair.
        """
        best: tuple[int, int, int] | None = None
        for marker, row in enumerate(self.grid):
            for bucket, queue in enumerate(row):
                if len(queue) >= 2 and (best is None or queue[0] < best[0]):
                    best = (queue[0], marker, bucket)

        if best is None:
            return None

        _, marker, bucket = best
        queue = self.grid[marker][bucket]
        start = queue.popleft()
        end = queue.popleft()
        return DelimiterPair(start, end, marker, bucket)

    def pending(self) -> int:
        """Number of offsets still queued (unpaired runs)."""
        return sum(len(queue) for row in self.grid for queue in row)
