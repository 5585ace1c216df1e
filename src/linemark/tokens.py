"""Token and TokenType definitions for the linemark lexer.

The lexer classifies each physical line and produces Token objects that
the parser turns into block nodes. A token carries the text the parser
needs (heading text, list item text, paragraph line, fenced code) plus the
few structural facts the line classifier found (heading level, list depth
and kind, fence language).

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

Performance Note:
Token stores raw coordinates and creates its SourceLocation lazily.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linemark.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer, one per classified line.

    A fenced code block is a single token covering opener through closer.

    """

    EOF = auto()
    BLANK_LINE = auto()

    ATX_HEADING = auto()  # # Heading
    LIST_ITEM = auto()  # - item, + item, * item, 1. item
    THEMATIC_BREAK = auto()  # ---, ***, ___
    FENCED_CODE = auto()  # ```lang ... ```

    PARAGRAPH_LINE = auto()  # Anything else


@dataclass(frozen=True, slots=True)
class Token:
    """A classified line.

    Attributes:
        type: The token type
        value: Text handed to the parser: inline source for headings, list
            items and paragraph lines; accumulated code for fences
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        line_indent: List nesting depth (tabs plus groups of spaces)
        level: Heading level (1..5), 0 for other tokens
        info: Fence language tag
        ordered: True for ``1.`` style list items
        ordinal: Parsed number of an ordered list item
        _end_lineno: End line number (for fences)
        _source_file: Optional source file path

    """

    type: TokenType
    value: str
    _lineno: int
    _col: int
    _start_offset: int
    _end_offset: int
    line_indent: int = 0
    level: int = 0
    info: str = ""
    ordered: bool = False
    ordinal: int | None = None
    _end_lineno: int | None = None
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Source location (created on first access, then cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from linemark.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=self._end_lineno,
            source_file=self._source_file,
        )
        # Idempotent write to the cache field of a frozen dataclass
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        return self._lineno
