"""Lexer operating modes.

The line classifier carries exactly one piece of state from one line to
the next: whether a code fence is open. Everything else is decided by the
current line alone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    - BLOCK: Idle, classifying each line on its own
    - CODE_FENCE: Inside an open fence, collecting raw lines

    """

    BLOCK = auto()
    CODE_FENCE = auto()


@dataclass(slots=True)
class OpenFence:
    """An opened, not yet closed code fence.

    Attributes:
        language: Tag after the opening backticks (may be empty)
        lineno: Line number of the opening fence
        start_offset: Source offset of the opening fence line
        lines: Raw lines collected so far, without newlines

    """

    language: str
    lineno: int
    start_offset: int
    lines: list[str] = field(default_factory=list)

    @property
    def code(self) -> str:
        """Collected lines, each followed by a newline."""
        return "".join(f"{line}\n" for line in self.lines)
