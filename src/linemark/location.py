"""Source location tracking for block nodes and tokens.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where a node came from in the source text.

    Line and column numbers are 1-indexed; offsets are 0-indexed character
    positions into the whole source string.

    Examples:
        >>> loc = SourceLocation(lineno=3, col_offset=1, source_file="notes.md")
        >>> str(loc)
        'notes.md:3:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a location running from this one to the end of ``end``.

        Used when consecutive paragraph lines are merged into one block.
        """
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            end_lineno=end.end_lineno or end.lineno,
            end_col_offset=end.end_col_offset or end.col_offset,
            source_file=self.source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder location for synthesized nodes."""
        return cls(lineno=0, col_offset=0)
